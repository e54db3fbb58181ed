"""
Core Domain Entities.

This module defines the reference entities the data generator draws from.
Every entity is validated when it is constructed and frozen afterwards: an
invalid instance never exists, and a changed entity is a new instance.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Any, Dict, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    Field,
    ValidationInfo,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from wisecrowd_data.validation.errors import EntityValidationError


def _reject_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def _parse_iso_date(value: Any) -> date:
    # datetime subclasses date; a timestamp is not a calendar date
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError:
            pass
    raise ValueError(f"must be an ISO date (YYYY-MM-DD), but was: {value!r}")


# =============================================================================
# Constrained field types
# =============================================================================

EntityId = Annotated[int, Field(gt=0, strict=True, description="Positive identifier")]

NonBlankStr = Annotated[str, AfterValidator(_reject_blank)]

Percentage = Annotated[
    float,
    Field(ge=0, le=100, strict=True, allow_inf_nan=False, description="Percentage (0-100)"),
]

IsoDate = Annotated[date, BeforeValidator(_parse_iso_date)]


class VolatilityLevel(str, Enum):
    """Volatility tier of an asset class."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    VERY_HIGH = "VERY_HIGH"


class ReferenceEntity(BaseModel):
    """
    Base class for validated, immutable reference records.

    Construction goes through pydantic validation; any failure is re-raised
    as EntityValidationError naming the offending field and value.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    def __init__(self, **data: Any) -> None:
        if type(self) is ReferenceEntity:
            raise TypeError("ReferenceEntity cannot be instantiated directly")
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            raise EntityValidationError.from_pydantic(type(self).__name__, exc) from exc

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """Construct from a mapping, with the same validation as the constructor."""
        return cls(**data)

    def model_copy(self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False):
        """Copy, re-validating when fields are updated."""
        if not update:
            return super().model_copy(deep=deep)
        return type(self)(**{**self.model_dump(), **update})


class AssetClass(ReferenceEntity):
    """A class of investable assets with its market prevalence."""

    id: EntityId
    name: NonBlankStr = Field(..., description="Asset class name")
    description: NonBlankStr = Field(..., description="What the asset class holds")
    volatility_level: VolatilityLevel = Field(..., description="Volatility tier")
    prevalence_percentage: Percentage = Field(
        ..., description="Share of the market holding this asset class"
    )

    @property
    def weight(self) -> float:
        return self.prevalence_percentage


class Currency(ReferenceEntity):
    """A currency with its customer distribution and SEK conversion rate."""

    id: EntityId
    code: NonBlankStr = Field(..., description="ISO currency code, e.g. SEK")
    name: NonBlankStr
    distribution_percentage: Percentage
    conversion_to_sek: float = Field(
        ..., gt=0, strict=True, allow_inf_nan=False, description="Value of one unit in SEK"
    )

    @property
    def weight(self) -> float:
        return self.distribution_percentage


class ActivityLevel(ReferenceEntity):
    """How often a customer trades."""

    id: EntityId
    name: NonBlankStr
    description: NonBlankStr
    distribution_percentage: Percentage

    @property
    def weight(self) -> float:
        return self.distribution_percentage


class InvestorProfile(ReferenceEntity):
    """An investment strategy archetype."""

    id: EntityId
    name: NonBlankStr
    description: NonBlankStr
    distribution_percentage: Percentage

    @property
    def weight(self) -> float:
        return self.distribution_percentage


class CustomerCountry(ReferenceEntity):
    """A country customers are domiciled in."""

    id: EntityId
    name: NonBlankStr
    country_code: NonBlankStr = Field(..., description="ISO country code, e.g. SE")
    description: NonBlankStr
    distribution_percentage: Percentage

    @property
    def weight(self) -> float:
        return self.distribution_percentage


class MarketTrend(ReferenceEntity):
    """
    A historical market phase used to shape generated price series.

    Dates are ISO calendar dates (``YYYY-MM-DD`` strings or ``date``
    objects); the period is inclusive at both ends. Strength is signed:
    positive for rising markets, negative for falling ones.
    """

    start_date: IsoDate
    end_date: IsoDate
    trend_type: NonBlankStr = Field(..., description="e.g. Bull, Bear, Recovery")
    strength: float = Field(..., ge=-5.0, le=5.0, strict=True, allow_inf_nan=False)
    description: str

    @field_validator("end_date")
    @classmethod
    def end_not_before_start(cls, value: date, info: ValidationInfo) -> date:
        start = info.data.get("start_date")
        if start is not None and value < start:
            raise ValueError(f"must not be before start_date ({start})")
        return value

    def covers(self, day: date) -> bool:
        """True if ``day`` falls within the trend period."""
        return self.start_date <= day <= self.end_date

    def overlaps(self, start: date, end: date) -> bool:
        """True if the trend period shares at least one day with [start, end]."""
        return self.start_date <= end and self.end_date >= start
