"""
Market Trend Collection.

Historical Swedish/Nordic market phases, 1990 to mid 2025. Periods may
overlap; a date can fall inside more than one trend.
"""

from __future__ import annotations

from datetime import date
from typing import List

from wisecrowd_data.catalog.base import EntityCollection
from wisecrowd_data.domain.entities import MarketTrend
from wisecrowd_data.validation.errors import InvalidRangeError

DEFAULT_MARKET_TRENDS = [
    MarketTrend(start_date="1990-01-01", end_date="1992-11-01", trend_type="Bear", strength=1.8, description="Nordic banking crisis"),
    MarketTrend(start_date="1992-11-21", end_date="1995-01-05", trend_type="Recovery", strength=1.3, description="Post-crisis restructuring"),
    MarketTrend(start_date="1995-01-06", end_date="1997-08-19", trend_type="Bull", strength=1.4, description="EU membership boost"),
    MarketTrend(start_date="1997-08-19", end_date="1999-10-11", trend_type="Correction", strength=-0.7, description="Asian financial crisis impact"),
    MarketTrend(start_date="1998-10-11", end_date="2000-03-10", trend_type="Bull", strength=1.8, description="Dot-com boom"),
    MarketTrend(start_date="2000-03-11", end_date="2002-10-10", trend_type="Bear", strength=1.7, description="Tech bubble burst"),
    MarketTrend(start_date="2002-10-10", end_date="2007-07-17", trend_type="Bull", strength=1.5, description="Global expansion"),
    MarketTrend(start_date="2007-07-17", end_date="2009-03-09", trend_type="Bear", strength=-2.3, description="Financial crisis"),
    MarketTrend(start_date="2009-03-10", end_date="2011-07-21", trend_type="Bull", strength=1.6, description="Recovery phase"),
    MarketTrend(start_date="2011-07-22", end_date="2012-05-04", trend_type="Correction", strength=-0.8, description="Eurozone debt crisis"),
    MarketTrend(start_date="2012-06-05", end_date="2015-04-15", trend_type="Bull", strength=1.3, description="QE-driven growth"),
    MarketTrend(start_date="2015-04-16", end_date="2016-02-11", trend_type="Correction", strength=-0.6, description="China slowdown fears"),
    MarketTrend(start_date="2016-02-12", end_date="2018-01-26", trend_type="Bull", strength=1.4, description="Synchronized global growth"),
    MarketTrend(start_date="2018-01-27", end_date="2018-12-24", trend_type="Correction", strength=-0.7, description="Trade war concerns"),
    MarketTrend(start_date="2018-12-25", end_date="2020-02-19", trend_type="Bull", strength=1.2, description="Late-cycle growth"),
    MarketTrend(start_date="2020-02-20", end_date="2020-03-23", trend_type="Crash", strength=-2.1, description="COVID-19 pandemic"),
    MarketTrend(start_date="2020-03-24", end_date="2021-11-08", trend_type="Bull", strength=1.7, description="Stimulus recovery"),
    MarketTrend(start_date="2021-11-09", end_date="2022-09-30", trend_type="Bear", strength=-1.5, description="Inflationary fears"),
    MarketTrend(start_date="2022-10-01", end_date="2023-07-31", trend_type="Recovery", strength=1.2, description="Disinflation hopes"),
    MarketTrend(start_date="2023-08-01", end_date="2024-03-25", trend_type="Sideways", strength=0.2, description="Soft landing uncertainty"),
    MarketTrend(start_date="2024-03-26", end_date="2025-06-30", trend_type="Bull", strength=1.1, description="Current phase"),
]


class MarketTrendCollection(EntityCollection[MarketTrend]):
    """Market trends in insertion order, queried by date."""

    entity_label = "MarketTrend"

    def get_trends_on_date(self, day: date) -> List[MarketTrend]:
        """Trends whose period includes ``day``."""
        return [trend for trend in self._entities if trend.covers(day)]

    def get_trends_in_range(self, start: date, end: date) -> List[MarketTrend]:
        """
        Trends sharing at least one day with [start, end].

        Raises:
            InvalidRangeError: If end is before start
        """
        if end < start:
            raise InvalidRangeError(
                f"end ({end}) must not be before start ({start})",
                field="end",
                value=end,
            )
        return [trend for trend in self._entities if trend.overlaps(start, end)]

    @classmethod
    def create_default(cls) -> "MarketTrendCollection":
        return cls(DEFAULT_MARKET_TRENDS)
