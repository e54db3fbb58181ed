"""
Configuration Loader - YAML Loading with Validation.

Loads generator configuration from YAML files and validates it with the
Pydantic models. A profile (``config/profiles/<name>.yaml`` under the base
path) can be deep-merged over the base file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from wisecrowd_data.config.models import GeneratorConfig

logger = logging.getLogger(__name__)


def read_yaml_mapping(path: Path) -> Dict[str, Any]:
    """
    Read a YAML file whose top level must be a mapping.

    An empty file reads as an empty mapping.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the top level is not a mapping
    """
    with open(path, encoding="utf-8") as f:
        content = yaml.safe_load(f)
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(
            f"{path}: expected a mapping at top level, got {type(content).__name__}"
        )
    return content


def merge_mappings(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge overlay into a copy of base; overlay wins on conflicts."""
    result = dict(base)
    for key, value in overlay.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = merge_mappings(result[key], value)
        else:
            result[key] = value
    return result


class ConfigLoader:
    """Loads and validates generator configuration from YAML files."""

    PROFILE_DIR = Path("config") / "profiles"

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config and profile paths
        """
        self._base_path = base_path or Path(".")

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> GeneratorConfig:
        """
        Load configuration from YAML file.

        A relative ``catalog.source_path`` is resolved against the directory
        of the config file.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name to merge

        Returns:
            Validated GeneratorConfig object

        Raises:
            FileNotFoundError: If the config or profile file doesn't exist
            pydantic.ValidationError: If config is invalid
        """
        path = self.resolve_path(config_path)
        config_dict = read_yaml_mapping(path)

        if profile:
            config_dict = merge_mappings(config_dict, self._load_profile(profile))

        config = GeneratorConfig.model_validate(config_dict)

        source = config.catalog.source_path
        if source and not Path(source).is_absolute():
            config = config.model_copy(
                update={
                    "catalog": config.catalog.model_copy(
                        update={"source_path": str(path.parent / source)}
                    )
                }
            )

        logger.debug(f"Loaded config {path} (profile={profile})")
        return config

    def load_from_dict(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """
        Load configuration from dictionary.

        Args:
            config_dict: Configuration as dictionary

        Returns:
            Validated GeneratorConfig object
        """
        return GeneratorConfig.model_validate(config_dict)

    def resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve a path relative to the base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_profile(self, profile: str) -> Dict[str, Any]:
        profile_path = self._base_path / self.PROFILE_DIR / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return read_yaml_mapping(profile_path)


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths

    Returns:
        Validated GeneratorConfig object
    """
    return ConfigLoader(base_path=base_path).load(config_path, profile)
