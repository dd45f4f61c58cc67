"""Gradient tables shared by every generator instance.

The vectors are deliberately not unit length: each set is skewed so the
facets of its gradient polytope can be inscribed in spheres of equal
radius. Normalizing them changes the look of the noise.
"""

import numpy as np
from numpy.typing import NDArray


def _frozen(values: list[int]) -> NDArray[np.float64]:
    table = np.array(values, dtype=np.float64)
    table.flags.writeable = False
    return table


# Directions to the vertices of an octagon.
GRADIENTS_2D = _frozen([
     5,  2,    2,  5,
    -5,  2,   -2,  5,
     5, -2,    2, -5,
    -5, -2,   -2, -5,
])

# Directions to the vertices of a rhombicuboctahedron.
GRADIENTS_3D = _frozen([
    -11,  4,  4,    -4,  11,  4,    -4,  4,  11,
     11,  4,  4,     4,  11,  4,     4,  4,  11,
    -11, -4,  4,    -4, -11,  4,    -4, -4,  11,
     11, -4,  4,     4, -11,  4,     4, -4,  11,
    -11,  4, -4,    -4,  11, -4,    -4,  4, -11,
     11,  4, -4,     4,  11, -4,     4,  4, -11,
    -11, -4, -4,    -4, -11, -4,    -4, -4, -11,
     11, -4, -4,     4, -11, -4,     4, -4, -11,
])

# Directions to the vertices of a disprismatotesseractihexadecachoron.
GRADIENTS_4D = _frozen([
     3,  1,  1,  1,    1,  3,  1,  1,    1,  1,  3,  1,    1,  1,  1,  3,
    -3,  1,  1,  1,   -1,  3,  1,  1,   -1,  1,  3,  1,   -1,  1,  1,  3,
     3, -1,  1,  1,    1, -3,  1,  1,    1, -1,  3,  1,    1, -1,  1,  3,
    -3, -1,  1,  1,   -1, -3,  1,  1,   -1, -1,  3,  1,   -1, -1,  1,  3,
     3,  1, -1,  1,    1,  3, -1,  1,    1,  1, -3,  1,    1,  1, -1,  3,
    -3,  1, -1,  1,   -1,  3, -1,  1,   -1,  1, -3,  1,   -1,  1, -1,  3,
     3, -1, -1,  1,    1, -3, -1,  1,    1, -1, -3,  1,    1, -1, -1,  3,
    -3, -1, -1,  1,   -1, -3, -1,  1,   -1, -1, -3,  1,   -1, -1, -1,  3,
     3,  1,  1, -1,    1,  3,  1, -1,    1,  1,  3, -1,    1,  1,  1, -3,
    -3,  1,  1, -1,   -1,  3,  1, -1,   -1,  1,  3, -1,   -1,  1,  1, -3,
     3, -1,  1, -1,    1, -3,  1, -1,    1, -1,  3, -1,    1, -1,  1, -3,
    -3, -1,  1, -1,   -1, -3,  1, -1,   -1, -1,  3, -1,   -1, -1,  1, -3,
     3,  1, -1, -1,    1,  3, -1, -1,    1,  1, -3, -1,    1,  1, -1, -3,
    -3,  1, -1, -1,   -1,  3, -1, -1,   -1,  1, -3, -1,   -1,  1, -1, -3,
     3, -1, -1, -1,    1, -3, -1, -1,    1, -1, -3, -1,    1, -1, -1, -3,
    -3, -1, -1, -1,   -1, -3, -1, -1,   -1, -1, -3, -1,   -1, -1, -1, -3,
])

GRADIENT_COUNT_2D = GRADIENTS_2D.size // 2
GRADIENT_COUNT_3D = GRADIENTS_3D.size // 3
GRADIENT_COUNT_4D = GRADIENTS_4D.size // 4
