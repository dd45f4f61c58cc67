"""Load noise settings from YAML configuration files."""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from .settings import NoiseSettings

LOGGER = logging.getLogger(__name__)

_FIELD_NAMES = {f.name for f in fields(NoiseSettings)}


class SettingsLoader:
    """Loads noise settings from YAML files.

    YAML format:
    ```yaml
    name: hills
    seed: 88
    dimensions: 3
    octaves: 5
    gain: 0.45
    size: [512, 256]
    step: 0.01
    origin: [0.0, 0.0, 2.5]
    ```

    `size` is shorthand for width and height. A shorter `origin` is padded
    with zeros.
    """

    def __init__(self, search_paths: list[Path] | None = None) -> None:
        """Initialize loader with search paths.

        Args:
            search_paths: Directories to search for settings YAML files.
                         Defaults to the current working directory.
        """
        if search_paths is None:
            self.search_paths = [Path.cwd()]
        else:
            self.search_paths = [Path(p) for p in search_paths]

        self._cache: dict[str, NoiseSettings] = {}

    def load(self, name: str) -> NoiseSettings:
        """Load settings by name.

        Searches for {name}.yaml in search paths.

        Args:
            name: Settings name (without .yaml extension)

        Returns:
            Validated NoiseSettings instance

        Raises:
            FileNotFoundError: If settings YAML not found
            ValueError: If YAML format is invalid
        """
        if name in self._cache:
            return self._cache[name]

        yaml_path = self._find_yaml(name)
        if yaml_path is None:
            raise FileNotFoundError(
                f"Settings '{name}' not found in search paths: {self.search_paths}"
            )

        settings = self.load_file(yaml_path)
        self._cache[name] = settings
        return settings

    def load_file(self, path: Path | str) -> NoiseSettings:
        """Load settings from an explicit file path.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If YAML format is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        LOGGER.debug("Loading noise settings from %s", path)
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a mapping")

        data.setdefault("name", path.stem)
        return self._parse_settings(data)

    def _find_yaml(self, name: str) -> Path | None:
        """Find YAML file for settings name."""
        for search_path in self.search_paths:
            yaml_path = search_path / f"{name}.yaml"
            if yaml_path.exists():
                return yaml_path
        return None

    def _parse_settings(self, data: dict[str, Any]) -> NoiseSettings:
        """Parse settings from YAML data."""
        params = dict(data)

        size = params.pop("size", None)
        if size is not None:
            if not isinstance(size, list) or len(size) != 2:
                raise ValueError(f"size must be a [width, height] pair, got {size!r}")
            params["width"], params["height"] = size

        origin = params.get("origin")
        if origin is not None:
            if not isinstance(origin, list) or not 2 <= len(origin) <= 4:
                raise ValueError(f"origin must be a list of 2 to 4 numbers, got {origin!r}")
            params["origin"] = tuple(origin) + (0.0,) * (4 - len(origin))

        unknown = set(params) - _FIELD_NAMES
        if unknown:
            raise ValueError(f"Unknown settings keys: {sorted(unknown)}")

        try:
            settings = NoiseSettings(**params)
        except TypeError as e:
            raise ValueError(f"Invalid settings: {e}") from e
        settings.validate()
        return settings

    def clear_cache(self) -> None:
        """Clear the settings cache."""
        self._cache.clear()
