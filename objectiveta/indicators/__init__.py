"""Moving average calculations on plain price lists."""

from objectiveta.indicators.moving_average import (
    calculate_cma,
    calculate_ema,
    calculate_sma,
    calculate_smma,
    calculate_wma,
    wma_weights,
)

__all__ = [
    "calculate_cma",
    "calculate_ema",
    "calculate_sma",
    "calculate_smma",
    "calculate_wma",
    "wma_weights",
]
