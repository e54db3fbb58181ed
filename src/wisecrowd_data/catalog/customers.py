"""
Customer Segment Collections.

Collections describing the simulated customer base:
    - ActivityLevelCollection: How often customers trade
    - InvestorProfileCollection: Investment strategy archetypes
    - CustomerCountryCollection: Where customers live
"""

from __future__ import annotations

from typing import List

from wisecrowd_data.catalog.base import ReferenceCollection
from wisecrowd_data.domain.entities import ActivityLevel, CustomerCountry, InvestorProfile

DEFAULT_ACTIVITY_LEVELS = [
    ActivityLevel(id=1, name="Inactive", description="Trades 0-1 times per year", distribution_percentage=20.0),
    ActivityLevel(id=2, name="Low", description="Trades 2-4 times per year", distribution_percentage=35.0),
    ActivityLevel(id=3, name="Moderate", description="Trades 5-12 times per year", distribution_percentage=25.0),
    ActivityLevel(id=4, name="Active", description="Trades 13-52 times per year", distribution_percentage=8.0),
    ActivityLevel(id=5, name="Hyperactive", description="Trades 53+ times per year", distribution_percentage=2.0),
]

DEFAULT_INVESTOR_PROFILES = [
    InvestorProfile(
        id=1,
        name="Conservative",
        description="Risk-averse strategy prioritizing capital preservation",
        distribution_percentage=25.0,
    ),
    InvestorProfile(
        id=2,
        name="Balanced",
        description="Moderate approach balancing growth and stability",
        distribution_percentage=40.0,
    ),
    InvestorProfile(
        id=3,
        name="Aggressive",
        description="High risk strategy seeking maximum returns",
        distribution_percentage=20.0,
    ),
    InvestorProfile(
        id=4,
        name="Income",
        description="Focus on dividend/interest generating assets",
        distribution_percentage=10.0,
    ),
    InvestorProfile(
        id=5,
        name="Trend",
        description="Follows market momentum, adapting to conditions",
        distribution_percentage=5.0,
    ),
]

DEFAULT_CUSTOMER_COUNTRIES = [
    CustomerCountry(
        id=1,
        name="Sweden",
        country_code="SE",
        description="Home market with largest customer base",
        distribution_percentage=60.0,
    ),
    CustomerCountry(
        id=2,
        name="Norway",
        country_code="NO",
        description="Oil wealth economy with active investors",
        distribution_percentage=15.0,
    ),
    CustomerCountry(
        id=3,
        name="Denmark",
        country_code="DK",
        description="Strong financial sector and banking ties",
        distribution_percentage=12.0,
    ),
    CustomerCountry(
        id=4,
        name="Finland",
        country_code="FI",
        description="Tech-savvy market with Nordic connections",
        distribution_percentage=8.0,
    ),
    CustomerCountry(
        id=5,
        name="Iceland",
        country_code="IS",
        description="Small but wealthy per capita customer base",
        distribution_percentage=5.0,
    ),
]


class ActivityLevelCollection(ReferenceCollection[ActivityLevel]):
    """Trading activity levels."""

    entity_label = "Activity level"

    def get_by_name(self, name: str) -> ActivityLevel:
        return self._find_by_text("name", name)

    def get_by_distribution_range(
        self,
        min_percentage: float,
        max_percentage: float,
    ) -> List[ActivityLevel]:
        return self.filter_by_weight(min_percentage, max_percentage)

    @classmethod
    def create_default(cls) -> "ActivityLevelCollection":
        return cls(DEFAULT_ACTIVITY_LEVELS)


class InvestorProfileCollection(ReferenceCollection[InvestorProfile]):
    """Investor profiles."""

    entity_label = "Investor profile"

    def get_by_name(self, name: str) -> InvestorProfile:
        return self._find_by_text("name", name)

    def get_by_distribution_range(
        self,
        min_percentage: float,
        max_percentage: float,
    ) -> List[InvestorProfile]:
        return self.filter_by_weight(min_percentage, max_percentage)

    @classmethod
    def create_default(cls) -> "InvestorProfileCollection":
        return cls(DEFAULT_INVESTOR_PROFILES)


class CustomerCountryCollection(ReferenceCollection[CustomerCountry]):
    """Customer countries keyed by id and ISO country code."""

    entity_label = "Customer country"

    def get_by_country_code(self, country_code: str) -> CustomerCountry:
        """
        Get a country by ISO code, ignoring case.

        Raises:
            EntityNotFoundError: If no country has this code
        """
        return self._find_by_text("country_code", country_code)

    def get_by_distribution_range(
        self,
        min_percentage: float,
        max_percentage: float,
    ) -> List[CustomerCountry]:
        return self.filter_by_weight(min_percentage, max_percentage)

    @classmethod
    def create_default(cls) -> "CustomerCountryCollection":
        return cls(DEFAULT_CUSTOMER_COUNTRIES)
