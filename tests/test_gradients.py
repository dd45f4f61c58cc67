"""Tests for the gradient tables."""

import numpy as np
import pytest

from simplexgen.core.gradients import (
    GRADIENT_COUNT_2D,
    GRADIENT_COUNT_3D,
    GRADIENT_COUNT_4D,
    GRADIENTS_2D,
    GRADIENTS_3D,
    GRADIENTS_4D,
)


@pytest.mark.parametrize(
    "table,dims,count,components",
    [
        (GRADIENTS_2D, 2, GRADIENT_COUNT_2D, [2, 5]),
        (GRADIENTS_3D, 3, GRADIENT_COUNT_3D, [4, 4, 11]),
        (GRADIENTS_4D, 4, GRADIENT_COUNT_4D, [1, 1, 1, 3]),
    ],
)
def test_gradient_shapes(table, dims, count, components):
    """Each table holds distinct vectors built from the same magnitudes."""
    assert table.dtype == np.float64
    assert table.size == dims * count
    vectors = table.reshape(count, dims)
    for vector in vectors:
        assert sorted(np.abs(vector).tolist()) == components
    assert len({tuple(v) for v in vectors.tolist()}) == count


def test_gradient_counts():
    """2D has 8 vectors, 3D 24 and 4D 64."""
    assert (GRADIENT_COUNT_2D, GRADIENT_COUNT_3D, GRADIENT_COUNT_4D) == (8, 24, 64)


@pytest.mark.parametrize("table", [GRADIENTS_2D, GRADIENTS_3D, GRADIENTS_4D])
def test_gradients_are_read_only(table):
    """Gradient tables are shared and cannot be modified."""
    with pytest.raises(ValueError):
        table[0] = 0.0
