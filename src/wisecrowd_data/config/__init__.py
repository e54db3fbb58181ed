"""
Configuration Package - Models and Loaders.

This package handles the configuration of the data generator:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - GeneratorConfig: Root configuration object
    - RangeFilterConfig: Range filter settings (ceiling)
    - CatalogConfig: Reference data source
"""

from wisecrowd_data.config.loader import ConfigLoader, load_config
from wisecrowd_data.config.models import CatalogConfig, GeneratorConfig, RangeFilterConfig

__all__ = [
    "CatalogConfig",
    "ConfigLoader",
    "GeneratorConfig",
    "RangeFilterConfig",
    "load_config",
]
