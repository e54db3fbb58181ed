"""
Domain Layer - Validated Reference Entities.

This package contains the reference entities of the data generator.
All entities here are pure Python with no external dependencies
(except Pydantic for validation).

Entities:
    - AssetClass: Investable asset class with volatility tier and prevalence
    - Currency: Currency with distribution and SEK conversion rate
    - ActivityLevel: Customer trading frequency
    - InvestorProfile: Investment strategy archetype
    - CustomerCountry: Customer domicile
    - MarketTrend: Dated market phase with signed strength

Enums:
    - VolatilityLevel: LOW, MEDIUM, HIGH, VERY_HIGH

Design Principles:
    - Immutable (frozen pydantic models)
    - Validated at construction, never afterwards
    - Structural equality, usable as dict keys
"""

from wisecrowd_data.domain.entities import (
    ActivityLevel,
    AssetClass,
    Currency,
    CustomerCountry,
    InvestorProfile,
    MarketTrend,
    ReferenceEntity,
    VolatilityLevel,
)

__all__ = [
    "ActivityLevel",
    "AssetClass",
    "Currency",
    "CustomerCountry",
    "InvestorProfile",
    "MarketTrend",
    "ReferenceEntity",
    "VolatilityLevel",
]
