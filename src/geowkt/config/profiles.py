"""Load named generator option profiles from YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ..generators.options import GeneratorOptions

logger = logging.getLogger(__name__)

# Profiles shipped with the package
DEFAULT_PROFILE_DIR = Path(__file__).parent.parent / "profiles"


class ProfileLoader:
    """Loads generator option profiles from YAML files.

    YAML format:
    ```yaml
    dialect: ewkt
    emit_identifier: true
    case_transform: uppercase
    float_precision: 15
    ```
    """

    def __init__(self, search_paths: list[Path] | None = None) -> None:
        """Initialize loader with search paths.

        Args:
            search_paths: Directories to search for profile YAML files.
                         Defaults to the profiles shipped with geowkt.
        """
        if search_paths is None:
            self.search_paths = [DEFAULT_PROFILE_DIR]
        else:
            self.search_paths = [Path(p) for p in search_paths]

        self._cache: dict[str, dict[str, Any]] = {}

    def load(self, name: str) -> GeneratorOptions:
        """Load a profile by name and resolve it to generator options.

        Args:
            name: Profile name (without .yaml extension)

        Returns:
            GeneratorOptions instance

        Raises:
            FileNotFoundError: If profile YAML not found
            ValueError: If YAML format is invalid
            InvalidOptionError: If the profile holds an unrecognized option value
        """
        return GeneratorOptions.from_mapping(self.load_mapping(name))

    def load_mapping(self, name: str) -> dict[str, Any]:
        """Load a profile's raw option mapping without resolving it."""
        if name in self._cache:
            return dict(self._cache[name])

        yaml_path = self._find_yaml(name)
        if yaml_path is None:
            raise FileNotFoundError(
                f"Profile '{name}' not found in search paths: {self.search_paths}"
            )

        logger.debug(f"Loading profile '{name}' from {yaml_path}")
        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Profile '{name}' must be a mapping, got {type(data).__name__}")

        self._cache[name] = data
        return dict(data)

    def available(self) -> list[str]:
        """Names of all profiles found in the search paths."""
        names = set()
        for search_path in self.search_paths:
            if search_path.is_dir():
                names.update(p.stem for p in search_path.glob("*.yaml"))
        return sorted(names)

    def _find_yaml(self, name: str) -> Path | None:
        """Find YAML file for profile name."""
        for search_path in self.search_paths:
            yaml_path = search_path / f"{name}.yaml"
            if yaml_path.exists():
                return yaml_path
        return None

    def clear_cache(self) -> None:
        """Clear the profile cache."""
        self._cache.clear()
