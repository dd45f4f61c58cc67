"""OpenSimplex gradient noise in 2, 3 and 4 dimensions.

Visually axis-decorrelated coherent noise in the spirit of Perlin's
simplex noise, built on a simplectic honeycomb instead of the patented
simplex grid.
"""

from __future__ import annotations

import itertools
import logging
from typing import Callable, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..core.gradients import GRADIENTS_2D, GRADIENTS_3D, GRADIENTS_4D
from ..core.lattice import LatticeContribution, decompose_2d, decompose_3d, decompose_4d
from ..core.permutation import build_permutation, wrap_int64

LOGGER = logging.getLogger(__name__)

DEFAULT_SEED = 0

# Divisors that bring each dimension's output to roughly [-1, 1]
NORM_2D = 47.0
NORM_3D = 103.0
NORM_4D = 30.0

# Plain lists index faster than numpy arrays for scalar lookups
_GRAD_2D = GRADIENTS_2D.tolist()
_GRAD_3D = GRADIENTS_3D.tolist()
_GRAD_4D = GRADIENTS_4D.tolist()


class OpenSimplexGenerator:
    """Seeded OpenSimplex noise generator.

    The permutation tables are built once from the seed and never change,
    so one instance can be queried from several threads at once.

    Example:
        >>> gen = OpenSimplexGenerator(seed=0)
        >>> round(gen.noise2(0.1, -0.5), 6)
        0.168155
    """

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        """Initialize the generator.

        Args:
            seed: Seed for the permutation tables. Values outside the
                signed 64-bit range are wrapped into it.
        """
        self._seed = wrap_int64(seed)
        self._perm, self._grad_index_3d = build_permutation(self._seed)
        self._perm_lookup: list[int] = self._perm.tolist()
        self._grad_index_lookup: list[int] = self._grad_index_3d.tolist()
        LOGGER.debug("Built permutation tables for seed %d", self._seed)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(seed={self._seed})"

    @property
    def seed(self) -> int:
        """The 64-bit seed the tables were built from."""
        return self._seed

    @property
    def permutation(self) -> NDArray[np.uint8]:
        """Read-only permutation of [0, 255]."""
        return self._perm

    @property
    def grad_index_3d(self) -> NDArray[np.uint16]:
        """Read-only offsets into GRADIENTS_3D, one per permutation entry."""
        return self._grad_index_3d

    def extrapolate(self, point: Sequence[int], offset: Sequence[float]) -> float:
        """Dot product of a lattice point's gradient with an offset.

        The point's coordinates are folded through the permutation table
        to pick the gradient.

        Args:
            point: Integer lattice coordinates (2, 3 or 4 of them)
            offset: Offset from the lattice point, same length as point

        Returns:
            The unattenuated contribution of the lattice point

        Raises:
            ValueError: If point and offset lengths differ or are not 2-4
        """
        dims = len(point)
        if dims not in (2, 3, 4):
            raise ValueError(f"Unsupported number of dimensions: {dims}")
        if len(offset) != dims:
            raise ValueError(f"Point has {dims} coordinates but offset has {len(offset)}")

        perm = self._perm_lookup
        index = point[0] & 0xFF
        for coord in point[1:]:
            index = (perm[index] + coord) & 0xFF

        if dims == 2:
            grads, slot = _GRAD_2D, perm[index] & 0x0E
        elif dims == 3:
            grads, slot = _GRAD_3D, self._grad_index_lookup[index]
        else:
            grads, slot = _GRAD_4D, perm[index] & 0xFC

        return sum(grads[slot + axis] * d for axis, d in enumerate(offset))

    def _evaluate(self, contributions: list[LatticeContribution], norm: float) -> float:
        value = 0.0
        for contribution in contributions:
            attn = 2 - contribution.squared_distance
            if attn > 0:
                attn *= attn
                value += attn * attn * self.extrapolate(contribution.point, contribution.offset)
        return value / norm

    def noise2(self, x: float, y: float) -> float:
        """Compute 2D noise at (x, y).

        Raises:
            NoiseDomainError: If the point is outside the lattice domain
        """
        return self._evaluate(decompose_2d(x, y), NORM_2D)

    def noise3(self, x: float, y: float, z: float) -> float:
        """Compute 3D noise at (x, y, z).

        Raises:
            NoiseDomainError: If the point is outside the lattice domain
        """
        return self._evaluate(decompose_3d(x, y, z), NORM_3D)

    def noise4(self, x: float, y: float, z: float, w: float) -> float:
        """Compute 4D noise at (x, y, z, w).

        Raises:
            NoiseDomainError: If the point is outside the lattice domain
        """
        return self._evaluate(decompose_4d(x, y, z, w), NORM_4D)

    def noise(self, *coords: float) -> float:
        """Compute noise in as many dimensions as there are coordinates.

        Raises:
            TypeError: If not given 2, 3 or 4 coordinates
        """
        evaluator = self._evaluators.get(len(coords))
        if evaluator is None:
            raise TypeError(f"noise() takes 2, 3 or 4 coordinates ({len(coords)} given)")
        return evaluator(self, *coords)

    _evaluators: dict[int, Callable[..., float]] = {
        2: noise2,
        3: noise3,
        4: noise4,
    }

    def noise2_array(self, x: ArrayLike, y: ArrayLike) -> NDArray[np.float64]:
        """Sample 2D noise over the grid spanned by two coordinate axes.

        Returns:
            Array of shape (len(y), len(x))
        """
        return self._sample_grid(self.noise2, (x, y))

    def noise3_array(self, x: ArrayLike, y: ArrayLike, z: ArrayLike) -> NDArray[np.float64]:
        """Sample 3D noise over a grid. Returns shape (len(z), len(y), len(x))."""
        return self._sample_grid(self.noise3, (x, y, z))

    def noise4_array(
        self, x: ArrayLike, y: ArrayLike, z: ArrayLike, w: ArrayLike
    ) -> NDArray[np.float64]:
        """Sample 4D noise over a grid. Returns shape (len(w), len(z), len(y), len(x))."""
        return self._sample_grid(self.noise4, (x, y, z, w))

    @staticmethod
    def _sample_grid(
        evaluator: Callable[..., float],
        axes: tuple[ArrayLike, ...],
    ) -> NDArray[np.float64]:
        # Last axis varies slowest, so iterate in reverse to fill in C order
        values = [np.asarray(axis, dtype=np.float64).ravel().tolist() for axis in reversed(axes)]
        shape = tuple(len(v) for v in values)
        samples = (evaluator(*reversed(point)) for point in itertools.product(*values))
        return np.fromiter(samples, dtype=np.float64, count=int(np.prod(shape))).reshape(shape)
