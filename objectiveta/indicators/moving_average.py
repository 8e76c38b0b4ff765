"""Moving average calculations over a price series.

Each function takes a complete list of prices (index 0 = earliest) and
returns a list of the same length. Entries before the warm-up point are
NaN, so the output always lines up with the input time axis.
"""

import logging
import math
import operator
from collections.abc import Sequence

from objectiveta.errors import EmptySeriesError, InvalidParameterError

logger = logging.getLogger(__name__)

NAN = float("nan")


def _as_int(value, name: str) -> int:
    """Normalize integer-like values (including numpy integers), rejecting bools."""
    if isinstance(value, bool):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}") from None


def _validate(prices: Sequence[float], period: int, name: str = "period") -> int:
    """Reject empty input and windows outside [1, len(prices)].
    
    Returns the period as a plain int.
    """
    if len(prices) == 0:
        raise EmptySeriesError("Price series is empty")
    
    period = _as_int(period, name)
    if period < 1 or period > len(prices):
        raise InvalidParameterError(
            f"{name} must be between 1 and {len(prices)} (series length), got {period}"
        )
    return period


def calculate_sma(prices: Sequence[float], period: int = 14) -> list[float]:
    """Calculate Simple Moving Average.
    
    Uses a running sum over the window, so each step is O(1).
    
    Args:
        prices: List of price values (typically close prices)
        period: Number of periods for the moving average (default 14)
        
    Returns:
        List of SMA values. First (period-1) values will be NaN.
        
    Raises:
        EmptySeriesError: If prices is empty.
        InvalidParameterError: If period is not in [1, len(prices)].
    """
    period = _validate(prices, period)
    logger.debug("SMA over %d prices, period %d", len(prices), period)
    
    result = [NAN] * (period - 1)
    
    window_sum = sum(prices[:period])
    result.append(window_sum / period)
    
    for i in range(period, len(prices)):
        window_sum += prices[i] - prices[i - period]
        if not math.isfinite(window_sum):
            # inf - inf leaves NaN behind; resum the window instead
            window_sum = sum(prices[i - period + 1:i + 1])
        result.append(window_sum / period)
    
    return result


def calculate_ema(prices: Sequence[float], period: int = 14) -> list[float]:
    """Calculate Exponential Moving Average.
    
    Smoothing constant is 2 / (period + 1). The first price seeds the
    recursion, so every index has a value.
    
    Args:
        prices: List of price values
        period: Number of periods for the EMA (default 14)
        
    Returns:
        List of EMA values, no NaN warm-up.
        
    Raises:
        EmptySeriesError: If prices is empty.
        InvalidParameterError: If period is not in [1, len(prices)].
    """
    period = _validate(prices, period)
    logger.debug("EMA over %d prices, period %d", len(prices), period)
    
    multiplier = 2 / (period + 1)
    result = [float(prices[0])]
    
    for i in range(1, len(prices)):
        ema = (prices[i] - result[-1]) * multiplier + result[-1]
        result.append(ema)
    
    return result


def calculate_cma(prices: Sequence[float]) -> list[float]:
    """Calculate Cumulative Moving Average (running mean of all prices so far).
    
    Args:
        prices: List of price values
        
    Returns:
        List of CMA values, no NaN warm-up.
        
    Raises:
        EmptySeriesError: If prices is empty.
    """
    if len(prices) == 0:
        raise EmptySeriesError("Price series is empty")
    logger.debug("CMA over %d prices", len(prices))
    
    result = [float(prices[0])]
    
    for i in range(1, len(prices)):
        # i + 1 prices are included at step i
        result.append(result[-1] + (prices[i] - result[-1]) / (i + 1))
    
    return result


def wma_weights(weight: int) -> list[float]:
    """Normalized linear weights for a WMA window, oldest first.
    
    The oldest price gets 1, the newest gets `weight`, all divided by the
    triangular number weight * (weight + 1) / 2. calculate_wma applies
    these to each window.
    
    Raises:
        InvalidParameterError: If weight is not an integer >= 1.
    """
    weight = _as_int(weight, "weight")
    if weight < 1:
        raise InvalidParameterError(f"weight must be at least 1, got {weight}")
    
    normalizer = weight * (weight + 1) / 2
    return [(k + 1) / normalizer for k in range(weight)]


def calculate_wma(prices: Sequence[float], weight: int = 14) -> list[float]:
    """Calculate Weighted Moving Average.
    
    Args:
        prices: List of price values
        weight: Window size; the newest price is weighted `weight`,
            the oldest 1 (default 14)
        
    Returns:
        List of WMA values. First (weight-1) values will be NaN.
        
    Raises:
        EmptySeriesError: If prices is empty.
        InvalidParameterError: If weight is not in [1, len(prices)].
    """
    weight = _validate(prices, weight, name="weight")
    logger.debug("WMA over %d prices, weight %d", len(prices), weight)
    
    weights = wma_weights(weight)
    result = [NAN] * (weight - 1)
    
    for i in range(weight - 1, len(prices)):
        start = i - weight + 1
        result.append(sum(prices[start + k] * w for k, w in enumerate(weights)))
    
    return result


def calculate_smma(prices: Sequence[float], period: int = 14) -> list[float]:
    """Calculate Smoothed (Running) Moving Average.
    
    Seeded with the SMA of the first `period` prices; afterwards each step
    replaces 1/period of the previous value with the new price.
    
    Args:
        prices: List of price values
        period: Number of periods (default 14)
        
    Returns:
        List of SMMA values. First (period-1) values will be NaN.
        
    Raises:
        EmptySeriesError: If prices is empty.
        InvalidParameterError: If period is not in [1, len(prices)].
    """
    period = _validate(prices, period)
    logger.debug("SMMA over %d prices, period %d", len(prices), period)
    
    result = [NAN] * (period - 1)
    
    # Same seed as calculate_sma
    result.append(sum(prices[:period]) / period)
    
    for i in range(period, len(prices)):
        smma = result[-1] + (prices[i] - result[-1]) / period
        result.append(smma)
    
    return result
