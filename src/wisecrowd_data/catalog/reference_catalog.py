"""
Reference Catalog - All Reference Collections Together.

Loads catalogs from YAML and builds the catalog a generator run uses.

YAML layout (every section optional):

    asset_classes:
      - {id: 1, name: ..., description: ..., volatility_level: LOW,
         prevalence_percentage: 21}
    currencies: [...]
    activity_levels: [...]
    investor_profiles: [...]
    customer_countries: [...]
    market_trends:
      - {start_date: 2020-02-20, end_date: 2020-03-23, trend_type: Crash,
         strength: -2.1, description: ...}

Each record goes through its entity's validating constructor, so a bad
record raises EntityValidationError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Type, Union

from wisecrowd_data.catalog.asset_classes import AssetClassCollection
from wisecrowd_data.catalog.base import EntityCollection
from wisecrowd_data.catalog.currencies import CurrencyCollection
from wisecrowd_data.catalog.customers import (
    ActivityLevelCollection,
    CustomerCountryCollection,
    InvestorProfileCollection,
)
from wisecrowd_data.catalog.market_trends import MarketTrendCollection
from wisecrowd_data.config.loader import read_yaml_mapping
from wisecrowd_data.config.models import GeneratorConfig
from wisecrowd_data.domain.entities import (
    ActivityLevel,
    AssetClass,
    Currency,
    CustomerCountry,
    InvestorProfile,
    MarketTrend,
    ReferenceEntity,
)

logger = logging.getLogger(__name__)


@dataclass
class ReferenceCatalog:
    """The reference collections of one generator run."""

    asset_classes: AssetClassCollection = field(default_factory=AssetClassCollection)
    currencies: CurrencyCollection = field(default_factory=CurrencyCollection)
    activity_levels: ActivityLevelCollection = field(default_factory=ActivityLevelCollection)
    investor_profiles: InvestorProfileCollection = field(
        default_factory=InvestorProfileCollection
    )
    customer_countries: CustomerCountryCollection = field(
        default_factory=CustomerCountryCollection
    )
    market_trends: MarketTrendCollection = field(default_factory=MarketTrendCollection)

    @classmethod
    def create_default(cls) -> "ReferenceCatalog":
        """Catalog with every collection's default data."""
        return cls(
            asset_classes=AssetClassCollection.create_default(),
            currencies=CurrencyCollection.create_default(),
            activity_levels=ActivityLevelCollection.create_default(),
            investor_profiles=InvestorProfileCollection.create_default(),
            customer_countries=CustomerCountryCollection.create_default(),
            market_trends=MarketTrendCollection.create_default(),
        )

    def sizes(self) -> Dict[str, int]:
        """Number of entities per section."""
        return {name: getattr(self, name).size() for name in CatalogLoader.SECTIONS}


class CatalogLoader:
    """Loads a ReferenceCatalog from YAML."""

    # section -> (entity type, collection type)
    SECTIONS: Dict[str, tuple[Type[ReferenceEntity], Type[EntityCollection[Any]]]] = {
        "asset_classes": (AssetClass, AssetClassCollection),
        "currencies": (Currency, CurrencyCollection),
        "activity_levels": (ActivityLevel, ActivityLevelCollection),
        "investor_profiles": (InvestorProfile, InvestorProfileCollection),
        "customer_countries": (CustomerCountry, CustomerCountryCollection),
        "market_trends": (MarketTrend, MarketTrendCollection),
    }

    def load(self, path: Union[str, Path]) -> ReferenceCatalog:
        """
        Load a catalog file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the layout is wrong
            EntityValidationError: If a record is invalid
            DuplicateEntityError: If a section repeats an id
        """
        catalog = self.load_from_dict(read_yaml_mapping(Path(path)))
        logger.info(f"Loaded catalog {path}: {catalog.sizes()}")
        return catalog

    def load_from_dict(self, data: Dict[str, Any]) -> ReferenceCatalog:
        """Build a catalog from an already parsed mapping."""
        unknown = sorted(set(data) - set(self.SECTIONS))
        if unknown:
            raise ValueError(
                f"Unknown catalog sections: {', '.join(unknown)}. "
                f"Supported: {', '.join(self.SECTIONS)}"
            )

        collections = {}
        for section, (entity_type, collection_type) in self.SECTIONS.items():
            records = data.get(section) or []
            if not isinstance(records, list):
                raise ValueError(f"Catalog section '{section}' must be a list")
            collections[section] = collection_type(
                self._build_entities(section, entity_type, records)
            )
        return ReferenceCatalog(**collections)

    def _build_entities(
        self,
        section: str,
        entity_type: Type[ReferenceEntity],
        records: List[Any],
    ) -> List[ReferenceEntity]:
        entities = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise ValueError(f"{section}[{index}] must be a mapping")
            entities.append(entity_type.from_dict(record))
        return entities


def create_catalog(config: GeneratorConfig) -> ReferenceCatalog:
    """
    Catalog for a generator run.

    Uses ``config.catalog.source_path`` when set, otherwise the defaults.
    """
    if config.catalog.source_path:
        return CatalogLoader().load(config.catalog.source_path)
    logger.debug("No catalog source configured, using defaults")
    return ReferenceCatalog.create_default()
