"""Heatmap rasterization package for grids of normalized scores.

This package provides a validated HeatMap grid type with transforms for
transposing, marking per-axis maxima and averaging, plus color mappers and a
rasterizer that renders a grid as a PNG image of solid blocks.
"""

from .colors import COLOR_MAPPERS, RGBA, ColorMapper, get_color_mapper, greyscale, red_blue
from .errors import (
    ColumnCountMismatchError,
    DimensionMismatchError,
    HeatMapError,
    InvalidBlockSizeError,
    InvalidDimensionsError,
    InvalidOutputNameError,
    NoInputError,
    RowCountMismatchError,
    UnknownColorMapperError,
    ValueOutOfRangeError,
)
from .grid import HeatMap, average, reduce_to_max, transpose, validate
from .raster import cell_to_pixel_bounds, draw_heat_map, rasterize, render_to_file
from .sink import write_png

__all__ = [
    "HeatMap",
    "average",
    "reduce_to_max",
    "transpose",
    "validate",
    "RGBA",
    "ColorMapper",
    "COLOR_MAPPERS",
    "get_color_mapper",
    "greyscale",
    "red_blue",
    "cell_to_pixel_bounds",
    "rasterize",
    "render_to_file",
    "draw_heat_map",
    "write_png",
    "HeatMapError",
    "InvalidDimensionsError",
    "RowCountMismatchError",
    "ColumnCountMismatchError",
    "ValueOutOfRangeError",
    "NoInputError",
    "DimensionMismatchError",
    "InvalidBlockSizeError",
    "InvalidOutputNameError",
    "UnknownColorMapperError",
]
