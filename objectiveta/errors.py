"""Exceptions raised by ObjectiveTA."""


class ObjectiveTAError(Exception):
    """Base class for all ObjectiveTA errors."""


class InvalidParameterError(ObjectiveTAError, ValueError):
    """A period or weight is outside [1, N] or not an integer."""


class EmptySeriesError(InvalidParameterError):
    """The candle or price series has no elements."""
