"""
Asset Class Collection.

Default data is the Nordic retail market split used by the generator. The
source material grades some classes "Low-Medium" and "Medium-High"; those map
to LOW and HIGH respectively since VolatilityLevel has four tiers.
"""

from __future__ import annotations

import logging
from typing import List, Union

from wisecrowd_data.catalog.base import ReferenceCollection
from wisecrowd_data.domain.entities import AssetClass, VolatilityLevel

logger = logging.getLogger(__name__)


DEFAULT_ASSET_CLASSES = [
    AssetClass(
        id=1,
        name="Nordic stocks",
        description="Public company shares from Nordic high-growth markets",
        volatility_level=VolatilityLevel.VERY_HIGH,
        prevalence_percentage=33,
    ),
    AssetClass(
        id=2,
        name="Government bond",
        description="Fixed income security issued by sovereign governments",
        volatility_level=VolatilityLevel.LOW,
        prevalence_percentage=21,
    ),
    AssetClass(
        id=3,
        name="Corporate Bond",
        description="Fixed income security issued by private companies",
        volatility_level=VolatilityLevel.LOW,
        prevalence_percentage=13,
    ),
    AssetClass(
        id=4,
        name="Medium-Risk Fund",
        description="Diversified fund with both stocks and bonds",
        volatility_level=VolatilityLevel.MEDIUM,
        prevalence_percentage=20,
    ),
    AssetClass(
        id=5,
        name="Large-Cap Equity",
        description="Shares in large to established foreign companies",
        volatility_level=VolatilityLevel.HIGH,
        prevalence_percentage=25,
    ),
    AssetClass(
        id=6,
        name="Gold / Precious Metals",
        description="Physical commodity or related securities",
        volatility_level=VolatilityLevel.HIGH,
        prevalence_percentage=5,
    ),
    AssetClass(
        id=7,
        name="REITs",
        description="Real estate investment trusts",
        volatility_level=VolatilityLevel.MEDIUM,
        prevalence_percentage=3,
    ),
    AssetClass(
        id=8,
        name="Crypto",
        description="Digital currencies, a higher risk exposure",
        volatility_level=VolatilityLevel.VERY_HIGH,
        prevalence_percentage=1,
    ),
]


class AssetClassCollection(ReferenceCollection[AssetClass]):
    """Asset classes with volatility and prevalence queries."""

    entity_label = "Asset class"

    def get_by_volatility_level(
        self,
        volatility_level: Union[VolatilityLevel, str],
    ) -> List[AssetClass]:
        """
        Asset classes with the given volatility tier.

        Raises:
            ValueError: If volatility_level is not a VolatilityLevel value
        """
        level = VolatilityLevel(volatility_level)
        return [a for a in self._entities if a.volatility_level is level]

    def get_by_prevalence_range(
        self,
        min_prevalence: float,
        max_prevalence: float,
    ) -> List[AssetClass]:
        """
        Asset classes whose prevalence lies in [min_prevalence, max_prevalence].

        Raises:
            InvalidRangeError: If the range is malformed
        """
        return self.filter_by_weight(min_prevalence, max_prevalence)

    @classmethod
    def create_default(cls) -> "AssetClassCollection":
        """Collection populated with the default asset classes."""
        collection = cls(DEFAULT_ASSET_CLASSES)
        logger.debug(f"Created default asset class collection ({collection.size()})")
        return collection
