"""Noise sampling and grayscale previews."""

from .base import TextureGenerator
from .noise import noise_grid
from .simplex import SimplexTextureGenerator

__all__ = [
    "TextureGenerator",
    "noise_grid",
    "SimplexTextureGenerator",
]
