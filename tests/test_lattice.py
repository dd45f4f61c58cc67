"""Tests for the lattice decomposition."""

import math

import pytest

from simplexgen.core.errors import NoiseDomainError, NoiseError
from simplexgen.core.lattice import (
    SQUISH_2D,
    SQUISH_3D,
    SQUISH_4D,
    STRETCH_2D,
    STRETCH_3D,
    STRETCH_4D,
    decompose_2d,
    decompose_3d,
    decompose_4d,
)

DECOMPOSERS = {
    2: (decompose_2d, STRETCH_2D, SQUISH_2D),
    3: (decompose_3d, STRETCH_3D, SQUISH_3D),
    4: (decompose_4d, STRETCH_4D, SQUISH_4D),
}

SAMPLE_POINTS = [
    (0.1, -0.5, 0.3, 0.9),
    (-10.5, 0.0, 2.25, -0.7),
    (108.2, -77.7, 13.1, 5.5),
    (0.5, 0.6, 0.7, 0.8),
    (-0.6, 0.6, -0.6, 0.6),
    (3.0, 3.0, 3.0, 3.0),
]


def _stretched_inside(coords, stretch):
    """Fractional parts of the stretched coordinates."""
    offset = sum(coords) * stretch
    return [c + offset - math.floor(c + offset) for c in coords]


@pytest.mark.parametrize("dims", [2, 3, 4])
@pytest.mark.parametrize("point", SAMPLE_POINTS)
def test_offsets_point_from_lattice_to_sample(dims, point):
    """Each offset is the sample minus the unskewed lattice point."""
    decompose, _, squish = DECOMPOSERS[dims]
    coords = point[:dims]
    for contribution in decompose(*coords):
        assert len(contribution.point) == dims
        assert all(isinstance(c, int) for c in contribution.point)
        shift = sum(contribution.point) * squish
        for axis in range(dims):
            expected = coords[axis] - (contribution.point[axis] + shift)
            assert contribution.offset[axis] == pytest.approx(expected, abs=1e-9)


@pytest.mark.parametrize("dims", [2, 3, 4])
@pytest.mark.parametrize("point", SAMPLE_POINTS)
def test_lattice_points_are_distinct(dims, point):
    """No lattice point is reported twice for one sample."""
    decompose = DECOMPOSERS[dims][0]
    points = [c.point for c in decompose(*point[:dims])]
    assert len(points) == len(set(points))


@pytest.mark.parametrize("point", SAMPLE_POINTS)
def test_2d_always_four_points(point):
    """2D samples always yield four lattice points."""
    assert len(decompose_2d(*point[:2])) == 4


def test_3d_counts_by_region():
    """Tetrahedra yield six points and the octahedron eight."""
    seen = set()
    for i in range(300):
        coords = (i * 0.173, i * 0.311 - 3.0, 1.7 - i * 0.057)
        in_sum = sum(_stretched_inside(coords, STRETCH_3D))
        expected = 6 if in_sum <= 1 or in_sum >= 2 else 8
        assert len(decompose_3d(*coords)) == expected
        seen.add(expected)
    assert seen == {6, 8}


def test_4d_counts_by_region():
    """Pentachora yield eight points and the rectified pentachora thirteen."""
    seen = set()
    for i in range(600):
        coords = (i * 0.173, i * 0.311 - 3.0, 1.7 - i * 0.057, i * 0.091)
        in_sum = sum(_stretched_inside(coords, STRETCH_4D))
        expected = 8 if in_sum <= 1 or in_sum >= 3 else 13
        assert len(decompose_4d(*coords)) == expected
        seen.add(expected)
    assert seen == {8, 13}


def test_cell_vertex_is_included():
    """A sample sitting on a lattice point gets that point with zero offset."""
    contributions = decompose_2d(0.0, 0.0)
    origin = [c for c in contributions if c.point == (0, 0)]
    assert len(origin) == 1
    assert origin[0].squared_distance == pytest.approx(0.0)


def test_squared_distance():
    """squared_distance sums the squared offset components."""
    contribution = decompose_3d(0.25, 0.5, 0.75)[0]
    assert contribution.squared_distance == pytest.approx(sum(d * d for d in contribution.offset))


@pytest.mark.parametrize("dims", [2, 3, 4])
@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_coordinates_rejected(dims, bad):
    """NaN and infinite coordinates raise a domain error."""
    decompose = DECOMPOSERS[dims][0]
    coords = (bad,) + (0.5,) * (dims - 1)
    with pytest.raises(NoiseDomainError) as excinfo:
        decompose(*coords)
    assert excinfo.value.coords == coords


@pytest.mark.parametrize("dims", [2, 3, 4])
@pytest.mark.parametrize("magnitude", [1e10, -1e10, 2.0**40])
def test_huge_coordinates_rejected(dims, magnitude):
    """Coordinates whose lattice cell overflows 32 bits raise a domain error."""
    decompose = DECOMPOSERS[dims][0]
    coords = (magnitude,) + (0.0,) * (dims - 1)
    with pytest.raises(NoiseDomainError):
        decompose(*coords)


@pytest.mark.parametrize("dims", [2, 3, 4])
def test_largest_cells_accepted(dims):
    """Cells just inside the signed 32-bit range are still decomposed."""
    decompose = DECOMPOSERS[dims][0]
    edge = 2**31 - 1.5
    # Coordinates summing to zero leave the stretched values unchanged
    coords = (edge, -edge) + (0.0,) * (dims - 2)
    points = [c.point for c in decompose(*coords)]
    assert any(p[0] == 2**31 - 2 for p in points)
    assert any(p[1] == -(2**31 - 1) for p in points)


@pytest.mark.parametrize("dims", [2, 3, 4])
def test_cells_on_32_bit_limits_rejected(dims):
    """Floors equal to either 32-bit limit fall outside the domain."""
    decompose = DECOMPOSERS[dims][0]
    edge = 2**31 - 0.5
    coords = (edge, -edge) + (0.0,) * (dims - 2)
    with pytest.raises(NoiseDomainError):
        decompose(*coords)


@pytest.mark.parametrize(
    "coords",
    [
        # x floors to 2**31 - 1, y stays inside
        (2**31 - 0.5, -(2**31 - 1.5)),
        # y floors to -2**31, x stays inside
        (2**31 - 1.5, -(2**31 - 0.5)),
    ],
)
def test_each_32_bit_limit_rejected_on_its_own(coords):
    """The upper and lower limits are each enforced separately."""
    with pytest.raises(NoiseDomainError):
        decompose_2d(*coords)


def test_domain_error_is_value_error():
    """Domain errors can be caught as NoiseError or ValueError."""
    with pytest.raises(NoiseError):
        decompose_2d(math.nan, 0.0)
    with pytest.raises(ValueError):
        decompose_2d(math.nan, 0.0)
