"""Color mapping policies for heatmap scores.

A color mapper is any callable taking a normalized score in [0, 1] and
returning an RGBA color. Mappers are plain functions passed explicitly to the
rasterizer; the registry below only resolves them by name.
"""

import math
from typing import Callable, Dict, NamedTuple

from .errors import UnknownColorMapperError, ValueOutOfRangeError


class RGBA(NamedTuple):
    """An 8-bit-per-channel color."""

    r: int
    g: int
    b: int
    a: int = 255


ColorMapper = Callable[[float], RGBA]


def _to_byte(value: float) -> int:
    # Round half away from zero; inputs here are never negative.
    return int(math.floor(value + 0.5))


def _check_score(score: float) -> float:
    score = float(score)
    if score < 0:
        raise ValueOutOfRangeError(f"Score {score} must be greater or equal to 0")
    if not score <= 1:
        raise ValueOutOfRangeError(f"Score {score} must be less or equal to 1")
    return score


def greyscale(score: float) -> RGBA:
    """Convert a score in [0, 1] to greyscale, from #000000 to #FFFFFF.

    Args:
        score: Normalized score

    Returns:
        Opaque RGBA color with equal red, green and blue channels

    Raises:
        ValueOutOfRangeError: If score is negative, above 1, or NaN
    """
    v = _to_byte(_check_score(score) * 255)
    return RGBA(v, v, v, 255)


def red_blue(score: float) -> RGBA:
    """Convert a score in [0, 1] to a red-blue diverging color.

    Scores at or below 0.5 are increasingly red the closer they get to 0, and
    scores above 0.5 are increasingly blue the closer they get to 1. The
    midpoint itself is pure black.

    Args:
        score: Normalized score

    Returns:
        Opaque RGBA color with at most one of red or blue set

    Raises:
        ValueOutOfRangeError: If score is negative, above 1, or NaN
    """
    score = _check_score(score)

    if score <= 0.5:
        return RGBA(_to_byte(255 - score * 510), 0, 0, 255)

    return RGBA(0, 0, _to_byte(score * 510 - 255), 255)


COLOR_MAPPERS: Dict[str, ColorMapper] = {
    "greyscale": greyscale,
    "red_blue": red_blue,
}


def get_color_mapper(name: str) -> ColorMapper:
    """Look up a built-in color mapper by name.

    Raises:
        UnknownColorMapperError: If no mapper is registered under name
    """
    try:
        return COLOR_MAPPERS[name]
    except KeyError:
        raise UnknownColorMapperError(
            f"Unknown color mapper '{name}', expected one of {sorted(COLOR_MAPPERS)}"
        ) from None
