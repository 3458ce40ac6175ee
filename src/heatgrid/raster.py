"""Rasterization of heatmaps into RGBA pixel buffers.

Every cell of a HeatMap becomes a solid square of ``block_size`` pixels. The
image uses Cartesian orientation: row 0 of the grid is drawn at the bottom,
while the pixel buffer itself is addressed from the top down.
"""

from pathlib import Path
from typing import Optional, Sequence, Tuple

import numpy as np

from .colors import ColorMapper, get_color_mapper, greyscale
from .config import get_settings
from .errors import InvalidBlockSizeError, InvalidDimensionsError
from .grid import HeatMap
from .logging import get_logger, log_execution_time
from .sink import validate_output_name, write_png

logger = get_logger(__name__)


def cell_to_pixel_bounds(
    i: int, j: int, height: int, block_size: int
) -> Tuple[int, int, int, int]:
    """Map grid cell (i, j) to its pixel rectangle.

    The vertical position is flipped around the x axis so that the y
    coordinate increases upwards.

    Args:
        i: Column index (x)
        j: Row index (y), 0 being the bottom row
        height: Number of rows in the grid
        block_size: Edge length of a cell in pixels

    Returns:
        Half-open ranges (x_start, x_stop, y_start, y_stop) in pixel
        coordinates, with y counted from the top of the image
    """
    x_start = i * block_size
    y_start = (height - j - 1) * block_size
    return x_start, x_start + block_size, y_start, y_start + block_size


def validate_block_size(block_size: int) -> None:
    """Check that block_size is a positive integer.

    An upper bound applies only when max_block_size is configured.

    Raises:
        InvalidBlockSizeError: If block_size is out of range or not an integer
    """
    if isinstance(block_size, bool) or not isinstance(block_size, (int, np.integer)):
        raise InvalidBlockSizeError(
            f"Heatmap block size must be an integer, got {block_size!r}"
        )
    if block_size < 1:
        raise InvalidBlockSizeError(
            f"Heatmap block size must be positive, got {block_size}"
        )

    max_block_size = get_settings().max_block_size
    if max_block_size is not None and block_size > max_block_size:
        raise InvalidBlockSizeError(
            f"Heatmap block size {block_size} exceeds maximum of {max_block_size}"
        )


def rasterize(heatmap: HeatMap, block_size: int, mapper: ColorMapper) -> np.ndarray:
    """Expand a heatmap into an RGBA pixel buffer.

    Args:
        heatmap: Grid to render
        block_size: Edge length of each cell in pixels
        mapper: Function translating a score into an RGBA color

    Returns:
        uint8 array of shape (height * block_size, width * block_size, 4)

    Raises:
        InvalidBlockSizeError: If block_size is not a positive integer
        ValueOutOfRangeError: If mapper rejects a score; any other mapper
            error propagates the same way and no buffer is returned
    """
    validate_block_size(block_size)

    pixels = np.zeros(
        (heatmap.height * block_size, heatmap.width * block_size, 4), dtype=np.uint8
    )

    with log_execution_time(
        logger, f"rasterizing {heatmap.width}x{heatmap.height} heatmap"
    ):
        for i, column in enumerate(heatmap.data):
            for j, score in enumerate(column):
                color = mapper(float(score))
                x_start, x_stop, y_start, y_stop = cell_to_pixel_bounds(
                    i, j, heatmap.height, block_size
                )
                pixels[y_start:y_stop, x_start:x_stop] = tuple(color)

    return pixels


def render_to_file(
    heatmap: HeatMap,
    block_size: int,
    name: str,
    mapper: Optional[ColorMapper] = None,
) -> Path:
    """Render a heatmap and write it to ``<name>.png``.

    Args:
        heatmap: Grid to render
        block_size: Edge length of each cell in pixels
        name: Destination path without extension
        mapper: Color mapper; defaults to the configured default_color_mapper

    Returns:
        Path of the written file

    Raises:
        InvalidBlockSizeError: If block_size is not a positive integer
        InvalidOutputNameError: If name is blank
        OSError: If the file cannot be written
    """
    validate_block_size(block_size)
    validate_output_name(name)

    if mapper is None:
        mapper = get_color_mapper(get_settings().default_color_mapper)

    pixels = rasterize(heatmap, block_size, mapper)
    return write_png(pixels, name)


def draw_heat_map(data: Sequence[Sequence[float]], block_size: int, name: str) -> Path:
    """Render raw column-major scores as a greyscale ``<name>.png``.

    The grid dimensions are taken from the data itself.

    Raises:
        InvalidBlockSizeError: If block_size is not a positive integer
        InvalidOutputNameError: If name is blank
        InvalidDimensionsError: If data is empty in either dimension
        HeatMapError: If data is ragged or holds values outside [0, 1]
    """
    validate_block_size(block_size)
    validate_output_name(name)

    if len(data) == 0 or len(data[0]) == 0:
        raise InvalidDimensionsError(
            "Heatmap is missing data in one or more dimensions"
        )

    heatmap = HeatMap(len(data), len(data[0]), data)
    return render_to_file(heatmap, block_size, name, greyscale)
