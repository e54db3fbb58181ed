"""
Catalog Package - Reference Data Collections.

Collections:
    - AssetClassCollection: Volatility and prevalence queries
    - CurrencyCollection: Lookup by ISO code
    - ActivityLevelCollection / InvestorProfileCollection: Lookup by name
    - CustomerCountryCollection: Lookup by country code
    - MarketTrendCollection: Trends on a date or overlapping a date range

Loading:
    - ReferenceCatalog: All collections of one run
    - CatalogLoader: YAML catalog files
    - create_catalog: Catalog from GeneratorConfig
"""

from wisecrowd_data.catalog.asset_classes import AssetClassCollection
from wisecrowd_data.catalog.base import EntityCollection, ReferenceCollection
from wisecrowd_data.catalog.currencies import CurrencyCollection
from wisecrowd_data.catalog.customers import (
    ActivityLevelCollection,
    CustomerCountryCollection,
    InvestorProfileCollection,
)
from wisecrowd_data.catalog.market_trends import MarketTrendCollection
from wisecrowd_data.catalog.reference_catalog import (
    CatalogLoader,
    ReferenceCatalog,
    create_catalog,
)

__all__ = [
    "ActivityLevelCollection",
    "AssetClassCollection",
    "CatalogLoader",
    "CurrencyCollection",
    "CustomerCountryCollection",
    "EntityCollection",
    "InvestorProfileCollection",
    "MarketTrendCollection",
    "ReferenceCatalog",
    "ReferenceCollection",
    "create_catalog",
]
