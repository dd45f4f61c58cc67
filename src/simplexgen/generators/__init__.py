"""Noise generators and combinators."""

from .base import NoiseSource
from .fractal import make_fractal_noise_func
from .open_simplex import OpenSimplexGenerator

__all__ = ["NoiseSource", "make_fractal_noise_func", "OpenSimplexGenerator"]
