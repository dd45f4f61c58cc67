"""Fractal noise: several layers (octaves) of one noise function summed.

Each octave samples the noise at a higher frequency and adds it with a
smaller amplitude, which is sometimes called fractional Brownian motion.
"""

from __future__ import annotations

from typing import Callable

from .base import NoiseSource

NoiseFunc = Callable[..., float]


def make_fractal_noise_func(
    noise_func: NoiseFunc | NoiseSource,
    octaves: int,
    lacunarity: float = 2.0,
    gain: float = 0.5,
    frequency: float = 1.0,
    amplitude: float = 1.0,
) -> NoiseFunc:
    """Create a function that generates fractal noise.

    The returned function takes the same coordinates as noise_func and
    returns sum(noise_func(coords * freq_i) * amp_i) over the octaves.

    Args:
        noise_func: Noise function or NoiseSource to layer. Must be a pure
            function of its coordinates.
        octaves: Number of layers of noise to combine
        lacunarity: Frequency multiplier per octave
        gain: Amplitude multiplier per octave
        frequency: Coordinate multiplier of the first octave
        amplitude: Value multiplier of the first octave

    Returns:
        Function of the same coordinates returning the summed noise

    Raises:
        ValueError: If octaves is negative
    """
    if octaves < 0:
        raise ValueError(f"octaves must be non-negative, got {octaves}")

    if isinstance(noise_func, NoiseSource):
        noise_func = noise_func.noise

    def fractal_noise(*coords: float) -> float:
        total = 0.0
        freq = frequency
        amp = amplitude
        for _ in range(octaves):
            total += noise_func(*(c * freq for c in coords)) * amp
            freq *= lacunarity
            amp *= gain
        return total

    return fractal_noise
