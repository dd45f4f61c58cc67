"""Preview generator for fractal OpenSimplex noise."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from ..config.settings import NoiseSettings
from ..generators.fractal import make_fractal_noise_func
from ..generators.open_simplex import OpenSimplexGenerator
from .base import TextureGenerator
from .noise import noise_grid


@dataclass
class SimplexTextureGenerator(TextureGenerator):
    """Samples a 2D slice of (fractal) OpenSimplex noise.

    Attributes:
        width: Grid width in samples
        height: Grid height in samples
        seed: Seed for the permutation tables
        dimensions: Noise dimensionality (2, 3 or 4)
        octaves: Number of fractal layers
        lacunarity: Frequency multiplier per octave
        gain: Amplitude multiplier per octave
        frequency: Coordinate multiplier of the first octave
        amplitude: Value multiplier of the first octave
        step: Distance between neighbouring samples
        origin: Noise-space position of sample (0, 0)
    """

    dimensions: int = 2
    octaves: int = 1
    lacunarity: float = 2.0
    gain: float = 0.5
    frequency: float = 1.0
    amplitude: float = 1.0
    step: float = 1.0 / 32.0
    origin: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_settings(cls, settings: NoiseSettings) -> SimplexTextureGenerator:
        """Create a generator from validated settings."""
        settings.validate()
        return cls(
            width=settings.width,
            height=settings.height,
            seed=settings.seed,
            dimensions=settings.dimensions,
            octaves=settings.octaves,
            lacunarity=settings.lacunarity,
            gain=settings.gain,
            frequency=settings.frequency,
            amplitude=settings.amplitude,
            step=settings.step,
            origin=tuple(settings.origin),
        )

    def noise_func(self) -> Callable[..., float]:
        """Build the fractal noise function of `dimensions` coordinates."""
        generator = OpenSimplexGenerator(self.seed)
        return make_fractal_noise_func(
            generator,
            self.octaves,
            lacunarity=self.lacunarity,
            gain=self.gain,
            frequency=self.frequency,
            amplitude=self.amplitude,
        )

    def generate_array(self) -> NDArray[np.float64]:
        """Sample the configured slice into an HxW array."""
        return noise_grid(
            self.noise_func(),
            self.width,
            self.height,
            step=self.step,
            origin=self.origin,
            dimensions=self.dimensions,
        )
