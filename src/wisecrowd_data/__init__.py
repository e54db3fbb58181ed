"""
WiseCrowd Data - Reference Data for a Synthetic Market Data Generator.

Validated, immutable reference entities (asset classes, currencies, customer
segments) and a generic range filter that selects records whose weight, for
example a prevalence or distribution percentage, falls within a range.

Main Components:
    - domain: Validated entities (AssetClass, Currency, ...) and VolatilityLevel
    - filters: filter_by_range and the configurable RangeFilter stage
    - validation: Error types and range validation
    - catalog: Reference collections, defaults and YAML catalog loading
    - config: Configuration models and loaders

Example:
    >>> from wisecrowd_data.catalog import AssetClassCollection
    >>> asset_classes = AssetClassCollection.create_default()
    >>> [a.name for a in asset_classes.get_by_prevalence_range(20, 30)]
    ['Government bond', 'Medium-Risk Fund', 'Large-Cap Equity']

"""

import logging
from typing import Union

__version__ = "0.1.0"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for WiseCrowd Data.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level, as a number or a name such as "DEBUG"
        format: Log message format

    Example:
        >>> import wisecrowd_data
        >>> wisecrowd_data.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("wisecrowd_data").setLevel(level)
