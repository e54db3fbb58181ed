"""
Currency Collection.
"""

from __future__ import annotations

from typing import List

from wisecrowd_data.catalog.base import ReferenceCollection
from wisecrowd_data.domain.entities import Currency

DEFAULT_CURRENCIES = [
    Currency(id=1, code="SEK", name="Swedish Krona", distribution_percentage=60.0, conversion_to_sek=1.0),
    Currency(id=2, code="EUR", name="Euro", distribution_percentage=20.0, conversion_to_sek=11.96),
    Currency(id=3, code="USD", name="US Dollar", distribution_percentage=10.0, conversion_to_sek=10.32),
    Currency(id=4, code="NOK", name="Norwegian Krone", distribution_percentage=3.0, conversion_to_sek=0.90),
    Currency(id=5, code="DKK", name="Danish Krone", distribution_percentage=3.0, conversion_to_sek=1.55),
    Currency(id=6, code="GBP", name="British Pound", distribution_percentage=3.0, conversion_to_sek=13.88),
    Currency(id=7, code="JPY", name="Japanese Yen", distribution_percentage=0.5, conversion_to_sek=0.070),
    Currency(id=8, code="CHF", name="Swiss Franc", distribution_percentage=0.5, conversion_to_sek=12.08),
]


class CurrencyCollection(ReferenceCollection[Currency]):
    """Currencies keyed by id and ISO code."""

    entity_label = "Currency"

    def get_by_code(self, code: str) -> Currency:
        """
        Get a currency by ISO code, ignoring case.

        Raises:
            EntityNotFoundError: If no currency has this code
        """
        return self._find_by_text("code", code)

    def get_by_distribution_range(
        self,
        min_percentage: float,
        max_percentage: float,
    ) -> List[Currency]:
        return self.filter_by_weight(min_percentage, max_percentage)

    @classmethod
    def create_default(cls) -> "CurrencyCollection":
        return cls(DEFAULT_CURRENCIES)
