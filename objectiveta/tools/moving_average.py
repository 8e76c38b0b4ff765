"""Candle-level moving average API.

These functions pull a price series out of candles and run one of the
calculations in objectiveta.indicators over it, returning a tagged
MAResult.
"""

from collections.abc import Sequence
from typing import Optional

from objectiveta.config import DEFAULT_PERIOD, MovingAverageSettings
from objectiveta.indicators.moving_average import (
    calculate_cma,
    calculate_ema,
    calculate_sma,
    calculate_smma,
    calculate_wma,
)
from objectiveta.models import Candle, MAResult, MAType, PriceSource, extract_prices


def sma(
    candles: Sequence[Candle],
    period: int = DEFAULT_PERIOD,
    price_source: PriceSource = PriceSource.CLOSE,
) -> MAResult:
    """Simple Moving Average of the selected candle price."""
    prices = extract_prices(candles, price_source)
    return MAResult(values=calculate_sma(prices, period), ma_type=MAType.SMA)


def ema(
    candles: Sequence[Candle],
    period: int = DEFAULT_PERIOD,
    price_source: PriceSource = PriceSource.CLOSE,
) -> MAResult:
    """Exponential Moving Average of the selected candle price."""
    prices = extract_prices(candles, price_source)
    return MAResult(values=calculate_ema(prices, period), ma_type=MAType.EMA)


def cma(
    candles: Sequence[Candle],
    price_source: PriceSource = PriceSource.CLOSE,
) -> MAResult:
    """Cumulative Moving Average of the selected candle price."""
    prices = extract_prices(candles, price_source)
    return MAResult(values=calculate_cma(prices), ma_type=MAType.CMA)


def wma(
    candles: Sequence[Candle],
    weight: int = DEFAULT_PERIOD,
    price_source: PriceSource = PriceSource.CLOSE,
) -> MAResult:
    """Weighted Moving Average of the selected candle price."""
    prices = extract_prices(candles, price_source)
    return MAResult(values=calculate_wma(prices, weight), ma_type=MAType.WMA)


def smma(
    candles: Sequence[Candle],
    period: int = DEFAULT_PERIOD,
    price_source: PriceSource = PriceSource.CLOSE,
) -> MAResult:
    """Smoothed Moving Average of the selected candle price."""
    prices = extract_prices(candles, price_source)
    return MAResult(values=calculate_smma(prices, period), ma_type=MAType.SMMA)


def moving_average(
    candles: Sequence[Candle],
    ma_type: MAType,
    period: Optional[int] = None,
    price_source: Optional[PriceSource] = None,
    settings: Optional[MovingAverageSettings] = None,
) -> MAResult:
    """Calculate any moving average variant by type.
    
    Args:
        candles: Candles in ascending time order
        ma_type: Variant to calculate
        period: Period (or WMA weight). Ignored for CMA. Falls back to
            settings.period when None.
        price_source: Candle field to use. Falls back to
            settings.price_source when None.
        settings: Defaults for omitted arguments. Built-in defaults
            (period 14, close) when None.
        
    Returns:
        MAResult tagged with `ma_type`.
    """
    settings = settings or MovingAverageSettings()
    period = settings.period if period is None else period
    price_source = settings.price_source if price_source is None else price_source
    
    ma_type = MAType(ma_type)
    if ma_type is MAType.SMA:
        return sma(candles, period, price_source)
    if ma_type is MAType.EMA:
        return ema(candles, period, price_source)
    if ma_type is MAType.CMA:
        return cma(candles, price_source)
    if ma_type is MAType.WMA:
        return wma(candles, period, price_source)
    return smma(candles, period, price_source)
