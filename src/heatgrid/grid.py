"""HeatMap data model and grid transforms.

A HeatMap is a validated, read-only grid of normalized scores. ``data[i][j]``
holds the score of column ``i`` (x) and row ``j`` (y). Transforms never touch
the receiver and always return a new HeatMap, with the single exception of
averaging one heatmap, which hands the argument straight back.
"""

from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .errors import (
    ColumnCountMismatchError,
    DimensionMismatchError,
    InvalidDimensionsError,
    NoInputError,
    RowCountMismatchError,
    ValueOutOfRangeError,
)


def validate(width: int, height: int, data: Sequence[Sequence[float]]) -> None:
    """Validate heatmap dimensions and scores.

    Checks run in a fixed order and the first violation is raised: dimensions,
    number of columns, then each column's length followed by its values.

    Args:
        width: Number of columns (x positions)
        height: Number of rows (y positions)
        data: ``width`` columns of ``height`` scores each

    Raises:
        InvalidDimensionsError: If width or height is smaller than 1
        RowCountMismatchError: If data does not hold exactly width columns
        ColumnCountMismatchError: If a column does not hold exactly height scores
        ValueOutOfRangeError: If a score lies outside [0, 1]
    """
    if width < 1 or height < 1:
        raise InvalidDimensionsError(
            f"Dimensions must all be greater or equal to 1, got {width}x{height}"
        )

    if len(data) != width:
        raise RowCountMismatchError(
            f"Data holds {len(data)} columns but width is {width}"
        )

    for i, column in enumerate(data):
        try:
            column_length = len(column)
        except TypeError:
            raise ColumnCountMismatchError(
                f"Column {i} is {column!r}, expected a sequence of {height} values"
            ) from None

        if column_length != height:
            raise ColumnCountMismatchError(
                f"Column {i} holds {column_length} values but height is {height}"
            )

        for j, value in enumerate(column):
            # Written so that NaN fails as well.
            if not 0 <= value <= 1:
                raise ValueOutOfRangeError(
                    f"Value {value} at ({i}, {j}) must be between 0 and 1, inclusive"
                )


def reduce_to_max(values: Iterable[float]) -> np.ndarray:
    """Mark every position holding the maximum value.

    Returns an array of the same length with all values set to 0 except at
    the indices holding the maximum, which are all set to 1. Ties are kept,
    so an all-equal input comes back as all ones.

    Args:
        values: One column of scores

    Returns:
        float64 array of 0s and 1s
    """
    array = np.asarray(list(values), dtype=np.float64)
    if array.size == 0:
        return array
    return (array == array.max()).astype(np.float64)


class HeatMap:
    """Read-only grid of normalized scores.

    Attributes:
        width: Number of columns (x positions)
        height: Number of rows (y positions)
        data: Read-only float64 array of shape (width, height)
    """

    __slots__ = ("_width", "_height", "_data")

    def __init__(self, width: int, height: int, data: Sequence[Sequence[float]]):
        validate(width, height, data)

        array = np.array([list(column) for column in data], dtype=np.float64)
        self._set(width, height, array)

    @classmethod
    def _from_array(cls, array: np.ndarray) -> "HeatMap":
        # Used by transforms whose output is valid by construction.
        heatmap = cls.__new__(cls)
        width, height = array.shape
        heatmap._set(width, height, array)
        return heatmap

    def _set(self, width: int, height: int, array: np.ndarray) -> None:
        array = array.reshape(width, height)
        array.setflags(write=False)
        self._width = width
        self._height = height
        self._data = array

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def transpose(self) -> "HeatMap":
        """Return a new HeatMap with the columns and rows of this one swapped."""
        return HeatMap._from_array(self._data.T.copy())

    def max_by_column(self) -> "HeatMap":
        """Return a new HeatMap marking the maximum of each column.

        Within every column the cells holding that column's maximum are set
        to 1 and every other cell to 0.
        """
        return HeatMap._from_array(
            np.array([reduce_to_max(column) for column in self._data])
        )

    def max_by_row(self) -> "HeatMap":
        """Return a new HeatMap marking the maximum of each row.

        Rows are reduced by transposing, reducing by column and transposing
        back, so both axes share the same tie handling.
        """
        return self.transpose().max_by_column().transpose()

    def isclose(self, other: "HeatMap", atol: float = 1e-9) -> bool:
        """Compare against another HeatMap allowing for float rounding."""
        return self.shape == other.shape and bool(
            np.allclose(self._data, other._data, rtol=0.0, atol=atol)
        )

    def to_list(self) -> List[List[float]]:
        """Return the scores as nested lists, one list per column."""
        return self._data.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeatMap):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._data, other._data)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        """String representation for debugging and output."""
        return f"HeatMap(width={self._width}, height={self._height}, data={self.to_list()})"


def transpose(heatmap: HeatMap) -> HeatMap:
    """Return a new HeatMap with the columns and rows of heatmap swapped."""
    return heatmap.transpose()


def average(*heatmaps: HeatMap) -> HeatMap:
    """Return the cell-wise mean of the given heatmaps.

    A single heatmap is returned as is, without copying.

    Args:
        *heatmaps: HeatMaps sharing the same width and height

    Returns:
        HeatMap whose every cell is the mean of the matching input cells

    Raises:
        NoInputError: If no heatmaps are given
        DimensionMismatchError: If consecutive heatmaps differ in width or height
    """
    if not heatmaps:
        raise NoInputError("No heatmaps provided")

    if len(heatmaps) == 1:
        return heatmaps[0]

    # Comparing each heatmap with its predecessor is enough to cover all of them
    for k in range(1, len(heatmaps)):
        current, previous = heatmaps[k], heatmaps[k - 1]
        if current.width != previous.width or current.height != previous.height:
            raise DimensionMismatchError(
                f"Heatmap {k} is {current.width}x{current.height} but heatmap "
                f"{k - 1} is {previous.width}x{previous.height}"
            )

    total = np.zeros(heatmaps[0].shape, dtype=np.float64)
    for heatmap in heatmaps:
        total += heatmap.data
    return HeatMap._from_array(total / len(heatmaps))
