"""Price source selection and extraction of a price series from candles."""

from collections.abc import Sequence
from enum import Enum

from objectiveta.errors import EmptySeriesError
from objectiveta.models.candle import Candle


class PriceSource(str, Enum):
    """Which field of a candle feeds an indicator."""

    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    CLOSE = "close"

    def value_from(self, candle: Candle) -> float:
        """Return the selected price of a single candle."""
        return getattr(candle, self.value)


def extract_prices(
    candles: Sequence[Candle],
    price_source: PriceSource = PriceSource.CLOSE,
) -> list[float]:
    """Build a price series aligned 1:1 with the candles.
    
    Args:
        candles: Candles in ascending time order (index 0 = earliest)
        price_source: Candle field to read (default close)
        
    Returns:
        List of prices, element i taken from candle i.
        
    Raises:
        EmptySeriesError: If no candles are given.
    """
    if len(candles) == 0:
        raise EmptySeriesError("Cannot extract prices from an empty candle series")
    
    source = PriceSource(price_source)
    return [source.value_from(candle) for candle in candles]
