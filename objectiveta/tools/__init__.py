"""Candle-level moving average functions returning MAResult."""

from objectiveta.tools.moving_average import cma, ema, moving_average, sma, smma, wma

__all__ = ["cma", "ema", "moving_average", "sma", "smma", "wma"]
