"""ObjectiveTA - moving averages over candle price series."""

from objectiveta.errors import EmptySeriesError, InvalidParameterError, ObjectiveTAError
from objectiveta.models import Candle, MAResult, MAType, PriceSource, extract_prices
from objectiveta.indicators import (
    calculate_cma,
    calculate_ema,
    calculate_sma,
    calculate_smma,
    calculate_wma,
    wma_weights,
)
from objectiveta.config import MovingAverageSettings, load_settings
from objectiveta.tools import cma, ema, moving_average, sma, smma, wma

__version__ = "0.1.0"

__all__ = [
    "Candle",
    "EmptySeriesError",
    "InvalidParameterError",
    "MAResult",
    "MAType",
    "MovingAverageSettings",
    "ObjectiveTAError",
    "PriceSource",
    "calculate_cma",
    "calculate_ema",
    "calculate_sma",
    "calculate_smma",
    "calculate_wma",
    "cma",
    "ema",
    "extract_prices",
    "load_settings",
    "moving_average",
    "sma",
    "smma",
    "wma",
    "wma_weights",
]
