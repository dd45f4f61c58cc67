"""Seeded permutation tables used to hash lattice points to gradients."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .gradients import GRADIENT_COUNT_3D

TABLE_SIZE = 256

# 64-bit LCG constants (Knuth's MMIX).
LCG_MULTIPLIER = 6364136223846793005
LCG_INCREMENT = 1442695040888963407

_UINT64_MASK = (1 << 64) - 1
_INT64_SIGN = 1 << 63


def wrap_int64(value: int) -> int:
    """Reduce an arbitrary int to a signed 64-bit value (two's complement)."""
    value &= _UINT64_MASK
    return value - (1 << 64) if value >= _INT64_SIGN else value


def lcg_step(seed: int) -> int:
    """Advance the seed by one step of the 64-bit LCG, with wraparound."""
    return wrap_int64(seed * LCG_MULTIPLIER + LCG_INCREMENT)


def build_permutation(seed: int) -> tuple[NDArray[np.uint8], NDArray[np.uint16]]:
    """Build the permutation table and the 3D gradient index table for a seed.

    Runs a backward Fisher-Yates shuffle over [0, 255] driven by the LCG,
    so the result is a proper permutation rather than a series of swaps.
    The exact recurrence is kept so tables match other implementations
    seeded with the same value.

    Args:
        seed: Any int; values outside the signed 64-bit range are wrapped

    Returns:
        Tuple of (permutation, grad_index_3d), both read-only arrays of
        length 256. grad_index_3d[i] is the offset of the 3D gradient
        selected by permutation[i] in GRADIENTS_3D.
    """
    source = list(range(TABLE_SIZE))
    perm = np.zeros(TABLE_SIZE, dtype=np.uint8)
    grad_index_3d = np.zeros(TABLE_SIZE, dtype=np.uint16)

    seed = wrap_int64(seed)
    for _ in range(3):
        seed = lcg_step(seed)

    for i in range(TABLE_SIZE - 1, -1, -1):
        seed = lcg_step(seed)
        # Python's modulo is already non-negative for a positive divisor
        r = wrap_int64(seed + 31) % (i + 1)
        perm[i] = source[r]
        grad_index_3d[i] = (source[r] % GRADIENT_COUNT_3D) * 3
        source[r] = source[i]

    perm.flags.writeable = False
    grad_index_3d.flags.writeable = False
    return perm, grad_index_3d
