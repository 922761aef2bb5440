"""Base classes for price data sources."""

from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta
from typing import List, Optional

from ..models.bucket import PriceBucket

DEFAULT_QUERY_LIMIT = 300


class SourceError(Exception):
    """Base exception for data source errors."""

    pass


def default_since(now: Optional[datetime] = None) -> date:
    """Return the lower-bound date for a chart query.

    Charts always look back to the previous local calendar day so the
    window covers at least the last 24 hours.

    Args:
        now: Reference time (defaults to the current local time)

    Returns:
        Yesterday's date relative to ``now``
    """
    now = now or datetime.now()
    return (now - timedelta(days=1)).date()


class PriceSource(ABC):
    """Base class for sources of time-bucketed pair prices."""

    @abstractmethod
    def get_buckets(
        self,
        base_currency: str,
        quote_currency: str,
        since: date,
        limit: int = DEFAULT_QUERY_LIMIT,
        ascending: bool = True,
    ) -> List[PriceBucket]:
        """Get time-bucketed price aggregates for a trading pair.

        Args:
            base_currency: Base token address or symbol
            quote_currency: Quote token address or symbol
            since: Earliest date to include
            limit: Maximum number of buckets
            ascending: Order buckets oldest first

        Returns:
            List of PriceBucket objects in the requested order

        Raises:
            SourceError: If unable to fetch price data
        """
        pass
