"""Test utilities package for heatgrid tests.

This package provides shared utilities for testing, including sample
heatmaps and common assertions.
"""

from .test_assertions import assert_block_color, assert_heatmap_close
from .test_data import (
    create_average_pair,
    create_gradient_heatmap,
    create_sample_heatmap,
    create_sample_heatmap_config,
)

__all__ = [
    # Assertions
    "assert_block_color",
    "assert_heatmap_close",
    # Test data
    "create_average_pair",
    "create_gradient_heatmap",
    "create_sample_heatmap",
    "create_sample_heatmap_config",
]
