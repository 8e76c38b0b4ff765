"""Moving average type tag and result model."""

import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class MAType(str, Enum):
    """Moving average variant that produced a result."""

    SMA = "SMA"
    EMA = "EMA"
    CMA = "CMA"
    WMA = "WMA"
    SMMA = "SMMA"


class MAResult(BaseModel):
    """A moving average series aligned index-for-index with its input.

    Warm-up entries (not enough history yet) hold NaN and must be read as
    "undefined", never as a price of zero.
    """

    values: list[float] = Field(..., description="Moving average values, NaN during warm-up")
    ma_type: MAType = Field(..., description="Variant that produced the values")

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.values)

    def is_defined(self, index: int) -> bool:
        """Check whether the value at `index` is past the warm-up period."""
        return not math.isnan(self.values[index])

    @property
    def first_defined_index(self) -> Optional[int]:
        """Index of the first defined value, or None if all are undefined."""
        for i, value in enumerate(self.values):
            if not math.isnan(value):
                return i
        return None

    def defined_values(self) -> list[tuple[int, float]]:
        """Return (index, value) pairs for every defined entry."""
        return [(i, v) for i, v in enumerate(self.values) if not math.isnan(v)]
