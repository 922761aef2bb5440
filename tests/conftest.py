"""Shared test fixtures and utilities."""

from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from dexchart.models.bucket import PriceBucket

BASE_TIME = datetime(2024, 1, 10, 12, 0, 0)


def make_bucket(index: int, open_price, close_price, low=None, high=None) -> PriceBucket:
    """Helper to create a 15-minute bucket.

    Args:
        index: Position in the series (sets the bucket start)
        open_price: Open price
        close_price: Close price
        low: Minimum price (defaults to min(open, close))
        high: Maximum price (defaults to max(open, close))

    Returns:
        PriceBucket object
    """
    return PriceBucket(
        bucket_start=BASE_TIME + timedelta(minutes=15 * index),
        open=open_price,
        close=close_price,
        min=low if low is not None else min(open_price, close_price),
        max=high if high is not None else max(open_price, close_price),
    )


def make_buckets(prices: list[tuple]) -> list[PriceBucket]:
    """Helper to create buckets from (open, close) tuples."""
    return [make_bucket(i, o, c) for i, (o, c) in enumerate(prices)]


def make_dex_trade_row(minute: str, open_price, close_price, low, high) -> dict:
    """Helper to create a Bitquery dexTrades row."""
    return {
        "timeInterval": {"minute": minute},
        "baseAmount": 120.5,
        "quoteAmount": 36150.0,
        "trades": 42,
        "quotePrice": close_price,
        "maximum_price": high,
        "minimum_price": low,
        "open_price": open_price,
        "close_price": close_price,
    }


def make_graphql_response(rows: list[dict]) -> MagicMock:
    """Helper to create a mock requests response carrying dexTrades rows."""
    response = MagicMock()
    response.raise_for_status.return_value = None
    response.json.return_value = {"data": {"ethereum": {"dexTrades": rows}}}
    return response


@pytest.fixture
def sample_buckets():
    """Three buckets: closes [1.0, 1.2, 0.9], opens [0.8, 1.0, 1.2]."""
    return make_buckets([(0.8, 1.0), (1.0, 1.2), (1.2, 0.9)])


@pytest.fixture
def sample_rows():
    """Create sample Bitquery rows (prices as strings, as the API may send)."""
    return [
        make_dex_trade_row("2024-01-10 12:00:00", "301.10", "301.50", "300.90", "301.80"),
        make_dex_trade_row("2024-01-10 12:15:00", "301.50", "302.25", "301.20", "302.40"),
        make_dex_trade_row("2024-01-10 12:30:00", "302.25", "301.75", "301.60", "302.30"),
    ]


@pytest.fixture
def mock_session(sample_rows):
    """Create a mock requests Session returning the sample rows."""
    session = MagicMock()
    session.post.return_value = make_graphql_response(sample_rows)
    return session
