"""Core OpenSimplex components: tables, lattice decomposition and errors."""

from .errors import NoiseError, NoiseDomainError
from .gradients import GRADIENTS_2D, GRADIENTS_3D, GRADIENTS_4D
from .lattice import LatticeContribution, decompose_2d, decompose_3d, decompose_4d
from .permutation import build_permutation

__all__ = [
    "NoiseError",
    "NoiseDomainError",
    "GRADIENTS_2D",
    "GRADIENTS_3D",
    "GRADIENTS_4D",
    "LatticeContribution",
    "decompose_2d",
    "decompose_3d",
    "decompose_4d",
    "build_permutation",
]
