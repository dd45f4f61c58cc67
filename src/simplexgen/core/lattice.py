"""Lattice decomposition for OpenSimplex noise.

Each ``decompose_*`` function places a sample point on the simplectic
honeycomb, works out which simplex (or rectified simplex) of its
stretched hypercube cell it falls in, and returns every lattice point
whose kernel may reach the sample together with the offset from that
lattice point to the sample.

Lattice points inside the unit cell are written as bit masks: bit ``i``
set means the point is one step along axis ``i`` from the cell origin.
The extra points outside the main simplex are always one of two shapes:

- *lowered*: a cell vertex with one of its unset axes moved to ``-1``
- *raised*: a cell vertex with one of its set axes moved to ``2``

Which vertex gets lowered or raised depends on the two main-simplex
vertices closest to the sample. Ties always go the same way, following
the comparison order below, so neighbouring cells agree on the tiling.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from .errors import NoiseDomainError

STRETCH_2D = (1 / math.sqrt(2 + 1) - 1) / 2
STRETCH_3D = (1 / math.sqrt(3 + 1) - 1) / 3
STRETCH_4D = (1 / math.sqrt(4 + 1) - 1) / 4
SQUISH_2D = (math.sqrt(2 + 1) - 1) / 2
SQUISH_3D = (math.sqrt(3 + 1) - 1) / 3
SQUISH_4D = (math.sqrt(4 + 1) - 1) / 4

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

Delta = tuple[int, ...]


@dataclass(frozen=True)
class LatticeContribution:
    """A lattice point that may contribute to a noise sample.

    Attributes:
        point: Integer lattice coordinates in stretched space
        offset: Sample position minus the unskewed lattice point
    """

    point: tuple[int, ...]
    offset: tuple[float, ...]

    @property
    def squared_distance(self) -> float:
        """Squared distance from the lattice point to the sample."""
        return sum(d * d for d in self.offset)


def _vertex(mask: int, dims: int) -> Delta:
    return tuple((mask >> axis) & 1 for axis in range(dims))


def _lowered(mask: int, dims: int) -> list[Delta]:
    """Vertex ``mask`` with each unset axis moved to -1, one point per axis."""
    base = _vertex(mask, dims)
    return [base[:axis] + (-1,) + base[axis + 1:] for axis in range(dims) if not base[axis]]


def _raised(mask: int, dims: int) -> list[Delta]:
    """Vertex ``mask`` with each set axis moved to 2, one point per axis."""
    base = _vertex(mask, dims)
    return [base[:axis] + (2,) + base[axis + 1:] for axis in range(dims) if base[axis]]


def _vertices(masks: Sequence[int], dims: int) -> tuple[Delta, ...]:
    return tuple(_vertex(mask, dims) for mask in masks)


_TRIANGLE_EDGE = _vertices((0x1, 0x2), 2)

_TETRAHEDRON_LOW = _vertices((0x0, 0x1, 0x2, 0x4), 3)
_TETRAHEDRON_HIGH = _vertices((0x3, 0x5, 0x6, 0x7), 3)
_OCTAHEDRON = _vertices((0x1, 0x2, 0x4, 0x3, 0x5, 0x6), 3)

_PENTACHORON_LOW = _vertices((0x0, 0x1, 0x2, 0x4, 0x8), 4)
_PENTACHORON_HIGH = _vertices((0x7, 0xB, 0xD, 0xE, 0xF), 4)
_PAIRS_4D = (0x3, 0x5, 0x9, 0x6, 0xA, 0xC)
_DISPENTACHORON_LOW = _vertices((0x1, 0x2, 0x4, 0x8) + _PAIRS_4D, 4)
_DISPENTACHORON_HIGH = _vertices((0x7, 0xB, 0xD, 0xE) + _PAIRS_4D, 4)


def _locate(
    coords: tuple[float, ...],
    stretch: float,
    squish: float,
) -> tuple[tuple[int, ...], tuple[float, ...], tuple[float, ...]]:
    """Find the cell containing a sample point.

    Returns:
        Tuple of (cell origin in stretched lattice coordinates, position
        within the cell in stretched space, sample position relative to
        the unskewed cell origin)

    Raises:
        NoiseDomainError: If a stretched coordinate is not finite or its
            floor does not fit strictly inside a signed 32-bit integer
    """
    stretch_offset = sum(coords) * stretch
    stretched = [c + stretch_offset for c in coords]

    cell = []
    for value in stretched:
        if not math.isfinite(value):
            raise NoiseDomainError(coords, "coordinate is not finite")
        floored = math.floor(value)
        if not _INT32_MIN < floored < _INT32_MAX:
            raise NoiseDomainError(coords, f"lattice coordinate {floored} does not fit in 32 bits")
        cell.append(floored)

    squish_offset = sum(cell) * squish
    inside = tuple(s - c for s, c in zip(stretched, cell))
    origin = tuple(c - (base + squish_offset) for c, base in zip(coords, cell))
    return tuple(cell), inside, origin


def _contributions(
    cell: tuple[int, ...],
    origin: tuple[float, ...],
    deltas: Sequence[Delta],
    squish: float,
) -> list[LatticeContribution]:
    result = []
    for delta in deltas:
        shift = sum(delta) * squish
        point = tuple(c + d for c, d in zip(cell, delta))
        offset = tuple(o - d - shift for o, d in zip(origin, delta))
        result.append(LatticeContribution(point, offset))
    return result


def _closest_pair_low(inside: tuple[float, ...]) -> tuple[int, float, int, float]:
    """Pick the two unit vertices nearest the sample, near the cell origin."""
    a_point, a_score = 0x01, inside[0]
    b_point, b_score = 0x02, inside[1]
    for axis in range(2, len(inside)):
        score = inside[axis]
        if a_score >= b_score and score > b_score:
            b_point, b_score = 1 << axis, score
        elif a_score < b_score and score > a_score:
            a_point, a_score = 1 << axis, score
    return a_point, a_score, b_point, b_score


def _closest_pair_high(inside: tuple[float, ...]) -> tuple[int, float, int, float]:
    """Pick the two vertices nearest the sample, next to the far corner."""
    full = (1 << len(inside)) - 1
    a_point, a_score = full & ~0x01, inside[0]
    b_point, b_score = full & ~0x02, inside[1]
    for axis in range(2, len(inside)):
        score = inside[axis]
        if a_score <= b_score and score < b_score:
            b_point, b_score = full & ~(1 << axis), score
        elif a_score > b_score and score < a_score:
            a_point, a_score = full & ~(1 << axis), score
    return a_point, a_score, b_point, b_score


def _simplex_low_extras(inside: tuple[float, ...], in_sum: float) -> list[Delta]:
    dims = len(inside)
    a_point, a_score, b_point, b_score = _closest_pair_low(inside)
    origin_score = 1 - in_sum
    if origin_score > a_score or origin_score > b_score:
        # The cell origin is one of the two closest vertices
        closest = b_point if b_score > a_score else a_point
        return _lowered(closest, dims)
    closest = a_point | b_point
    return [_vertex(closest, dims)] + _lowered(closest, dims)


def _simplex_high_extras(inside: tuple[float, ...], in_sum: float) -> list[Delta]:
    dims = len(inside)
    a_point, a_score, b_point, b_score = _closest_pair_high(inside)
    corner_score = dims - in_sum
    if corner_score < a_score or corner_score < b_score:
        # The far corner is one of the two closest vertices
        closest = b_point if b_score < a_score else a_point
        return _raised(closest, dims)
    shared = a_point & b_point
    return [_vertex(shared, dims)] + _raised(shared, dims)


def _octahedron_extras(inside: tuple[float, ...]) -> list[Delta]:
    xins, yins, zins = inside

    # Closer of (0,0,1) and (1,1,0)
    p1 = xins + yins
    if p1 > 1:
        a_score, a_point, a_far = p1 - 1, 0x03, True
    else:
        a_score, a_point, a_far = 1 - p1, 0x04, False

    # Closer of (0,1,0) and (1,0,1)
    p2 = xins + zins
    if p2 > 1:
        b_score, b_point, b_far = p2 - 1, 0x05, True
    else:
        b_score, b_point, b_far = 1 - p2, 0x02, False

    # Closer of (1,0,0) and (0,1,1) replaces the further of a and b, if closer
    p3 = yins + zins
    if p3 > 1:
        score, point, far = p3 - 1, 0x06, True
    else:
        score, point, far = 1 - p3, 0x01, False
    if a_score <= b_score and a_score < score:
        a_score, a_point, a_far = score, point, far
    elif a_score > b_score and b_score < score:
        b_score, b_point, b_far = score, point, far

    if a_far == b_far:
        if a_far:
            return [(1, 1, 1)] + _raised(a_point & b_point, 3)
        return [(0, 0, 0)] + _lowered(a_point | b_point, 3)

    far_point, near_point = (a_point, b_point) if a_far else (b_point, a_point)
    return _lowered(far_point, 3) + _raised(near_point, 3)


def _dispentachoron_low_extras(inside: tuple[float, ...], in_sum: float) -> list[Delta]:
    xins, yins, zins, wins = inside

    # Closer of (1,1,0,0) and (0,0,1,1)
    if xins + yins > zins + wins:
        a_score, a_point = xins + yins, 0x03
    else:
        a_score, a_point = zins + wins, 0x0C

    # Closer of (1,0,1,0) and (0,1,0,1)
    if xins + zins > yins + wins:
        b_score, b_point = xins + zins, 0x05
    else:
        b_score, b_point = yins + wins, 0x0A

    # Closer of (1,0,0,1) and (0,1,1,0) replaces the further of a and b, if closer
    if xins + wins > yins + zins:
        score, point = xins + wins, 0x09
    else:
        score, point = yins + zins, 0x06
    if a_score >= b_score and score > b_score:
        b_score, b_point = score, point
    elif a_score < b_score and score > a_score:
        a_score, a_point = score, point

    # Any of the unit vertices may still be closer
    a_bigger = b_bigger = True
    for axis in range(4):
        score = 2 - in_sum + inside[axis]
        if a_score >= b_score and score > b_score:
            b_score, b_point, b_bigger = score, 1 << axis, False
        elif a_score < b_score and score > a_score:
            a_score, a_point, a_bigger = score, 1 << axis, False

    if a_bigger == b_bigger:
        if a_bigger:
            merged = a_point | b_point
            return [_vertex(merged, 4)] + _lowered(merged, 4) + _raised(a_point & b_point, 4)
        return _lowered(a_point | b_point, 4) + [(0, 0, 0, 0)]

    bigger, smaller = (a_point, b_point) if a_bigger else (b_point, a_point)
    return _lowered(bigger, 4) + _raised(smaller, 4)


def _dispentachoron_high_extras(inside: tuple[float, ...], in_sum: float) -> list[Delta]:
    xins, yins, zins, wins = inside

    # Closer of (0,0,1,1) and (1,1,0,0)
    if xins + yins < zins + wins:
        a_score, a_point = xins + yins, 0x0C
    else:
        a_score, a_point = zins + wins, 0x03

    # Closer of (0,1,0,1) and (1,0,1,0)
    if xins + zins < yins + wins:
        b_score, b_point = xins + zins, 0x0A
    else:
        b_score, b_point = yins + wins, 0x05

    # Closer of (0,1,1,0) and (1,0,0,1) replaces the further of a and b, if closer
    if xins + wins < yins + zins:
        score, point = xins + wins, 0x06
    else:
        score, point = yins + zins, 0x09
    if a_score <= b_score and score < b_score:
        b_score, b_point = score, point
    elif a_score > b_score and score < a_score:
        a_score, a_point = score, point

    # Any of the three-axis vertices may still be closer
    a_bigger = b_bigger = True
    for axis in range(4):
        score = 3 - in_sum + inside[axis]
        vertex = 0x0F & ~(1 << axis)
        if a_score <= b_score and score < b_score:
            b_score, b_point, b_bigger = score, vertex, False
        elif a_score > b_score and score < a_score:
            a_score, a_point, a_bigger = score, vertex, False

    if a_bigger == b_bigger:
        if a_bigger:
            shared = a_point & b_point
            return [_vertex(shared, 4)] + _raised(shared, 4) + _lowered(a_point | b_point, 4)
        return _raised(a_point & b_point, 4) + [(1, 1, 1, 1)]

    bigger, smaller = (a_point, b_point) if a_bigger else (b_point, a_point)
    return _raised(bigger, 4) + _lowered(smaller, 4)


def decompose_2d(x: float, y: float) -> list[LatticeContribution]:
    """Lattice points contributing to a 2D sample.

    Always returns four points: the two vertices shared by both triangles
    of the rhombus cell, the vertex of the triangle the sample is in, and
    one extra vertex from the neighbouring cell.
    """
    cell, inside, origin = _locate((x, y), STRETCH_2D, SQUISH_2D)
    xins, yins = inside
    in_sum = xins + yins

    deltas: list[Delta] = list(_TRIANGLE_EDGE)
    if in_sum <= 1:
        # Triangle at (0,0)
        zins = 1 - in_sum
        if zins > xins or zins > yins:
            extra = _lowered(0x01 if xins > yins else 0x02, 2)
        else:
            extra = [(1, 1)]
        deltas += [(0, 0)] + extra
    else:
        # Triangle at (1,1)
        zins = 2 - in_sum
        if zins < xins or zins < yins:
            extra = _raised(0x01 if xins > yins else 0x02, 2)
        else:
            extra = [(0, 0)]
        deltas += [(1, 1)] + extra

    return _contributions(cell, origin, deltas, SQUISH_2D)


def decompose_3d(x: float, y: float, z: float) -> list[LatticeContribution]:
    """Lattice points contributing to a 3D sample.

    The rhombohedral cell splits into a tetrahedron at each end and an
    octahedron in between. Tetrahedra yield their four vertices plus two
    extras, the octahedron its six vertices plus two extras.
    """
    cell, inside, origin = _locate((x, y, z), STRETCH_3D, SQUISH_3D)
    in_sum = sum(inside)

    if in_sum <= 1:
        deltas = list(_TETRAHEDRON_LOW) + _simplex_low_extras(inside, in_sum)
    elif in_sum >= 2:
        deltas = list(_TETRAHEDRON_HIGH) + _simplex_high_extras(inside, in_sum)
    else:
        deltas = list(_OCTAHEDRON) + _octahedron_extras(inside)

    return _contributions(cell, origin, deltas, SQUISH_3D)


def decompose_4d(x: float, y: float, z: float, w: float) -> list[LatticeContribution]:
    """Lattice points contributing to a 4D sample.

    The cell splits into a pentachoron at each end and two rectified
    pentachora in between. Pentachora yield five vertices, the rectified
    ones ten, and every region adds three extras.
    """
    cell, inside, origin = _locate((x, y, z, w), STRETCH_4D, SQUISH_4D)
    in_sum = sum(inside)

    if in_sum <= 1:
        deltas = list(_PENTACHORON_LOW) + _simplex_low_extras(inside, in_sum)
    elif in_sum >= 3:
        deltas = list(_PENTACHORON_HIGH) + _simplex_high_extras(inside, in_sum)
    elif in_sum <= 2:
        deltas = list(_DISPENTACHORON_LOW) + _dispentachoron_low_extras(inside, in_sum)
    else:
        deltas = list(_DISPENTACHORON_HIGH) + _dispentachoron_high_extras(inside, in_sum)

    return _contributions(cell, origin, deltas, SQUISH_4D)
