"""Exceptions raised by heatgrid.

Every error derives from HeatMapError, which is itself a ValueError so that
callers already guarding numeric input with ``except ValueError`` keep working.
"""


class HeatMapError(ValueError):
    """Base class for all heatgrid validation errors."""

    pass


class InvalidDimensionsError(HeatMapError):
    """Raised when a width or height is smaller than 1."""

    pass


class RowCountMismatchError(HeatMapError):
    """Raised when the number of columns in the data differs from the width."""

    pass


class ColumnCountMismatchError(HeatMapError):
    """Raised when a column holds a number of values other than the height."""

    pass


class ValueOutOfRangeError(HeatMapError):
    """Raised when a score falls outside [0, 1]."""

    pass


class NoInputError(HeatMapError):
    """Raised when averaging is requested for zero heatmaps."""

    pass


class DimensionMismatchError(HeatMapError):
    """Raised when heatmaps being combined differ in width or height."""

    pass


class InvalidBlockSizeError(HeatMapError):
    pass


class InvalidOutputNameError(HeatMapError):
    pass


class UnknownColorMapperError(HeatMapError):
    pass
