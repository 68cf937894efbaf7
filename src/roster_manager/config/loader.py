"""
Configuration Loader.

Reads a roster configuration from YAML and validates it with the pydantic
models. A named profile (``config/profiles/<name>.yaml``) is deep-merged
over the base file, so a profile only lists the keys it changes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from roster_manager.config.models import RosterConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config") / "default.yaml"
PROFILES_DIR = Path("config") / "profiles"


def deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``base`` with ``overlay`` merged in; nested mappings merge key by key."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Loads roster configuration files relative to a base directory."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        profiles_dir: Union[str, Path] = PROFILES_DIR,
    ) -> None:
        self._base_path = Path(base_path) if base_path else Path(".")
        self._profiles_dir = self._base_path / profiles_dir

    def load(
        self,
        config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
        profile: Optional[str] = None,
    ) -> RosterConfig:
        """
        Load and validate a configuration file.

        Args:
            config_path: YAML file, relative to the base path unless absolute
            profile: Optional profile merged over the file

        Returns:
            Validated RosterConfig

        Raises:
            FileNotFoundError: If the file or the profile doesn't exist
            ValueError: If a file does not hold a mapping
            ValidationError: If the merged values are invalid
        """
        path = Path(config_path)
        if not path.is_absolute():
            path = self._base_path / path
        data = self._read_mapping(path)

        if profile:
            profile_path = self._profiles_dir / f"{profile}.yaml"
            if not profile_path.exists():
                raise FileNotFoundError(
                    f"Profile not found: {profile} "
                    f"(available: {', '.join(self.available_profiles()) or 'none'})"
                )
            data = deep_merge(data, self._read_mapping(profile_path))

        config = RosterConfig.model_validate(data)
        logger.debug(
            f"Loaded roster config from {path} (profile={profile}, "
            f"sort={config.query.default_sort_key.value}, cache={config.cache.enabled})"
        )
        return config

    def available_profiles(self) -> List[str]:
        if not self._profiles_dir.is_dir():
            return []
        return sorted(p.stem for p in self._profiles_dir.glob("*.yaml"))

    def _read_mapping(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping at the top of {path}")
        return data


def load_config(
    config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> RosterConfig:
    """Load a configuration with a one-off ConfigLoader."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
