"""PNG output for rendered heatmap pixel buffers."""

from pathlib import Path

import numpy as np
from PIL import Image

from .errors import InvalidOutputNameError
from .logging import get_logger, log_execution_time

logger = get_logger(__name__)

PNG_EXTENSION = ".png"


def validate_output_name(name: str) -> None:
    """Raise InvalidOutputNameError unless name is a non-empty string."""
    if not isinstance(name, str) or not name:
        raise InvalidOutputNameError("Heatmap filename cannot be blank")


def write_png(pixels: np.ndarray, name: str) -> Path:
    """Write an RGBA pixel buffer to ``<name>.png``.

    Args:
        pixels: uint8 array of shape (rows, cols, 4), addressed top-down
        name: Destination path without extension

    Returns:
        Path of the written file

    Raises:
        InvalidOutputNameError: If name is blank
        ValueError: If pixels is not an RGBA uint8 buffer
        OSError: If the file cannot be created or written
    """
    validate_output_name(name)

    if pixels.dtype != np.uint8 or pixels.ndim != 3 or pixels.shape[2] != 4:
        raise ValueError(
            f"Pixel buffer must be a uint8 array of shape (rows, cols, 4), "
            f"got {pixels.dtype} {pixels.shape}"
        )

    path = Path(name + PNG_EXTENSION)
    with log_execution_time(logger, f"writing {path}"):
        Image.fromarray(pixels).save(path, format="PNG")
    return path
