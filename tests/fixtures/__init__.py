"""
Test Fixtures - Shared Test Data and Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration pointing at sample_catalog.yaml
    - sample_catalog.yaml: Small YAML catalog
    - config/profiles/: Profiles merged over sample_config.yaml
    - WeightedItem: Plain record unrelated to the domain entities

Usage:
    Import fixtures in test files via pytest fixtures or direct import.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WeightedItem:
    """Minimal record unrelated to any domain entity."""

    name: str
    distribution_percentage: float
