"""Noise settings and their YAML loader."""

from .loader import SettingsLoader
from .settings import NoiseSettings

__all__ = ["NoiseSettings", "SettingsLoader"]
