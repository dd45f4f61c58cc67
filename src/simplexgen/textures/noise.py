"""Sample noise functions over regular 2D grids."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

import numpy as np
from numpy.typing import NDArray

LOGGER = logging.getLogger(__name__)


def noise_grid(
    noise_func: Callable[..., float],
    width: int,
    height: int,
    step: float = 1.0,
    origin: Sequence[float] = (0.0, 0.0, 0.0, 0.0),
    dimensions: int = 2,
) -> NDArray[np.float64]:
    """Sample a 2D slice of a noise function.

    Sample (row j, column i) is taken at
    (origin[0] + i * step, origin[1] + j * step, origin[2], ...), with as
    many coordinates as the noise function has dimensions.

    Args:
        noise_func: Function of `dimensions` coordinates
        width: Number of samples along x
        height: Number of samples along y
        step: Distance between neighbouring samples
        origin: Position of sample (0, 0); components past the second fix
            the slice through higher-dimensional noise
        dimensions: Number of coordinates noise_func takes (2, 3 or 4)

    Returns:
        Array of shape (height, width)

    Raises:
        ValueError: If dimensions is not 2-4 or origin is too short
    """
    if dimensions not in (2, 3, 4):
        raise ValueError(f"dimensions must be 2, 3 or 4, got {dimensions}")
    if len(origin) < dimensions:
        raise ValueError(f"origin needs at least {dimensions} components, got {len(origin)}")

    LOGGER.debug("Sampling %dx%d grid of %dD noise (step %g)", width, height, dimensions, step)

    xs = (origin[0] + np.arange(width, dtype=np.float64) * step).tolist()
    ys = (origin[1] + np.arange(height, dtype=np.float64) * step).tolist()
    fixed = tuple(float(c) for c in origin[2:dimensions])

    grid = np.empty((height, width), dtype=np.float64)
    for j, y in enumerate(ys):
        grid[j] = [noise_func(x, y, *fixed) for x in xs]
    return grid
