"""Data models for ObjectiveTA."""

from objectiveta.models.candle import Candle
from objectiveta.models.moving_average import MAResult, MAType
from objectiveta.models.price_source import PriceSource, extract_prices

__all__ = [
    "Candle",
    "MAResult",
    "MAType",
    "PriceSource",
    "extract_prices",
]
