"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from wisecrowd_data.catalog import AssetClassCollection, ReferenceCatalog
from wisecrowd_data.config.models import GeneratorConfig
from wisecrowd_data.domain.entities import AssetClass, VolatilityLevel
from tests.fixtures import WeightedItem


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding YAML fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_dir: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_dir / "sample_config.yaml"


@pytest.fixture
def sample_catalog_path(fixtures_dir: Path) -> Path:
    """Path to sample catalog file."""
    return fixtures_dir / "sample_catalog.yaml"


@pytest.fixture
def default_config() -> GeneratorConfig:
    """Create default generator configuration."""
    return GeneratorConfig()


@pytest.fixture
def weighted_items() -> List[WeightedItem]:
    """Three plain records at 10, 25 and 50 percent."""
    return [
        WeightedItem("Low", 10.0),
        WeightedItem("Medium", 25.0),
        WeightedItem("High", 50.0),
    ]


@pytest.fixture
def sample_asset_class() -> AssetClass:
    """Create a sample valid asset class."""
    return AssetClass(
        id=1,
        name="Nordic stocks",
        description="Public company shares from Nordic high-growth markets",
        volatility_level=VolatilityLevel.VERY_HIGH,
        prevalence_percentage=33,
    )


@pytest.fixture
def asset_classes() -> AssetClassCollection:
    """Default asset class collection."""
    return AssetClassCollection.create_default()


@pytest.fixture
def default_catalog() -> ReferenceCatalog:
    """Catalog with all default collections."""
    return ReferenceCatalog.create_default()
