"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class RangeFilterConfig(BaseModel):
    """Configuration for range filters."""

    ceiling: Optional[float] = Field(
        default=100.0,
        ge=0,
        description="Highest allowed upper bound; null disables the check",
    )


class CatalogConfig(BaseModel):
    """Where reference data comes from."""

    source_path: Optional[str] = Field(
        default=None,
        description="YAML catalog file; built-in defaults when unset",
    )


class GeneratorConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    range_filter: RangeFilterConfig = Field(default_factory=RangeFilterConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
