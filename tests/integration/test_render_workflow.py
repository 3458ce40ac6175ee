"""Integration tests for the heatmap rendering workflow.

This module tests complete workflows: combining score grids, deriving
maximum masks and writing the result as a PNG image.
"""

import numpy as np
from PIL import Image

from heatgrid import (
    HeatMap,
    average,
    cell_to_pixel_bounds,
    greyscale,
    red_blue,
    render_to_file,
)
from tests.utils import create_average_pair


class TestRenderWorkflow:
    """Test end-to-end rendering of transformed heatmaps."""

    def test_average_then_render(self, tmp_path) -> None:
        """Test rendering an averaged heatmap in red-blue."""
        pair = create_average_pair()
        averaged = average(pair["a"], pair["b"])
        block_size = 4

        path = render_to_file(averaged, block_size, str(tmp_path / "avg"), red_blue)

        with Image.open(path) as image:
            assert image.size == (3 * block_size, 2 * block_size)
            pixels = np.asarray(image.convert("RGBA"))

        for i in range(averaged.width):
            for j in range(averaged.height):
                x_start, _, y_start, _ = cell_to_pixel_bounds(
                    i, j, averaged.height, block_size
                )
                expected = tuple(red_blue(averaged.data[i][j]))
                assert tuple(pixels[y_start, x_start]) == expected

    def test_row_mask_orientation(self, tmp_path) -> None:
        """Test that a row mask renders with row 0 at the bottom."""
        heatmap = HeatMap(3, 2, [[0.1, 0.3], [0, 0.2], [0.01, 0.5]])
        mask = heatmap.max_by_row()

        path = render_to_file(mask, 1, str(tmp_path / "mask"), greyscale)

        with Image.open(path) as image:
            pixels = np.asarray(image.convert("L"))

        # Bottom row (row 0): column 0 is the maximum
        # Top row (row 1): column 2 is the maximum
        assert pixels.tolist() == [[0, 0, 255], [255, 0, 0]]

    def test_column_mask_of_averaged_stack(self, tmp_path) -> None:
        """Test masking the average of several heatmaps."""
        stack = [
            HeatMap(2, 3, [[0.2, 0.9, 0.1], [0.5, 0.5, 0.0]]),
            HeatMap(2, 3, [[0.4, 0.1, 0.1], [0.5, 0.5, 1.0]]),
            HeatMap(2, 3, [[0.0, 0.2, 0.1], [0.5, 0.5, 0.0]]),
        ]

        mask = average(*stack).max_by_column()

        # Column 0 means: 0.2, 0.4, 0.1; column 1 means: 0.5, 0.5, 0.333
        assert mask.to_list() == [[0, 1, 0], [1, 1, 0]]

        path = render_to_file(mask, 2, str(tmp_path / "stack"))
        assert path.exists()
