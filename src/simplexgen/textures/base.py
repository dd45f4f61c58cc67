"""Base class for noise preview generators."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from ..generators.open_simplex import DEFAULT_SEED


@dataclass
class TextureGenerator(ABC):
    """Abstract base class for grayscale noise previews.

    Subclasses implement generate_array() to sample a noise field; the
    base class turns the samples into images.
    """

    width: int = 256
    height: int = 256
    seed: int = DEFAULT_SEED

    @abstractmethod
    def generate_array(self) -> NDArray[np.float64]:
        """Sample the noise field.

        Returns:
            HxW float64 array, nominally in [-1, 1]
        """
        pass

    def generate(self) -> Image.Image:
        """Generate a grayscale preview image.

        Values are mapped linearly from [-1, 1] to [0, 255] and clipped.

        Returns:
            PIL Image in L (grayscale) mode
        """
        values = self.generate_array()
        pixels = np.clip((values + 1.0) * 0.5 * 255.0, 0.0, 255.0)
        return Image.fromarray(np.round(pixels).astype(np.uint8), mode="L")

    def save(self, path: str | Path) -> None:
        """Generate and save the preview to file.

        Args:
            path: Output file path; `.npy` stores the raw samples,
                anything else is written as an image (e.g. 'noise.png')
        """
        if Path(path).suffix.lower() == ".npy":
            np.save(path, self.generate_array())
        else:
            self.generate().save(path)
