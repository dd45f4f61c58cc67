"""Settings describing a noise field and the grid it is sampled on."""

from __future__ import annotations

from dataclasses import dataclass

from ..generators.open_simplex import DEFAULT_SEED

SUPPORTED_DIMENSIONS = (2, 3, 4)

_INT_FIELDS = ("seed", "dimensions", "octaves", "width", "height")
_FLOAT_FIELDS = ("lacunarity", "gain", "frequency", "amplitude", "step")


def _is_int(value: object) -> bool:
    # bool is an int subclass but never a meaningful setting here
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return _is_int(value) or isinstance(value, float)


@dataclass
class NoiseSettings:
    """Parameters for sampling fractal OpenSimplex noise over a 2D grid.

    Attributes:
        name: Identifier of the settings (usually the YAML file stem)
        seed: Seed for the permutation tables
        dimensions: Noise dimensionality (2, 3 or 4)
        octaves: Number of fractal layers; 1 gives plain noise
        lacunarity: Frequency multiplier per octave
        gain: Amplitude multiplier per octave
        frequency: Coordinate multiplier of the first octave
        amplitude: Value multiplier of the first octave
        width: Grid width in samples
        height: Grid height in samples
        step: Distance between neighbouring samples in noise space
        origin: Noise-space position of sample (0, 0); the z and w
            components fix the slice taken through 3D and 4D noise
    """

    name: str = "default"
    seed: int = DEFAULT_SEED
    dimensions: int = 2
    octaves: int = 1
    lacunarity: float = 2.0
    gain: float = 0.5
    frequency: float = 1.0
    amplitude: float = 1.0
    width: int = 256
    height: int = 256
    step: float = 1.0 / 32.0
    origin: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)

    def validate(self) -> None:
        """Check that every value is usable.

        Raises:
            ValueError: If any field has the wrong type or is out of range
        """
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if not _is_int(value):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        for name in _FLOAT_FIELDS:
            value = getattr(self, name)
            if not _is_number(value):
                raise ValueError(f"{name} must be a number, got {value!r}")

        if self.dimensions not in SUPPORTED_DIMENSIONS:
            raise ValueError(
                f"dimensions must be one of {SUPPORTED_DIMENSIONS}, got {self.dimensions}"
            )
        if self.octaves < 0:
            raise ValueError(f"octaves must be non-negative, got {self.octaves}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid size must be positive, got {self.width}x{self.height}")
        if self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if not isinstance(self.origin, (tuple, list)) or len(self.origin) != 4:
            raise ValueError(f"origin must have 4 components, got {self.origin!r}")
        if not all(_is_number(c) for c in self.origin):
            raise ValueError(f"origin components must be numbers, got {self.origin!r}")
