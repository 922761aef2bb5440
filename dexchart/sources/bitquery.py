"""Bitquery GraphQL adapter for DEX trade aggregates."""

import logging
from datetime import date
from typing import List, Optional

import requests
from dateutil import parser

from ..models.bucket import PriceBucket
from .base import DEFAULT_QUERY_LIMIT, PriceSource, SourceError

logger = logging.getLogger(__name__)

BITQUERY_API_URL = "https://graphql.bitquery.io/"

# WBNB quoted in BUSD on BNB Smart Chain
WBNB_ADDRESS = "0xbb4cdb9cbd36b01bd1cbaebf2de08d9173bc095c"
BUSD_ADDRESS = "0xe9e7cea3dedca5984780bafc599bd69add087d56"

DEFAULT_EXCHANGES = ["Pancake", "Pancake v2"]

DEX_TRADES_QUERY = """
query (
  $network: EthereumNetwork!,
  $limit: Int!,
  $since: ISO8601DateTime,
  $exchanges: [String!],
  $base: String!,
  $quote: String!,
  $minutes: Int
) {
  ethereum(network: $network) {
    dexTrades(
      options: {limit: $limit, %(order)s: "timeInterval.minute"}
      date: {since: $since}
      exchangeName: {in: $exchanges}
      baseCurrency: {is: $base}
      quoteCurrency: {is: $quote}
    ) {
      timeInterval {
        minute(count: $minutes)
      }
      baseAmount
      quoteAmount
      trades: count
      quotePrice
      maximum_price: quotePrice(calculate: maximum)
      minimum_price: quotePrice(calculate: minimum)
      open_price: minimum(of: block, get: quote_price)
      close_price: maximum(of: block, get: quote_price)
    }
  }
}
"""


class BitqueryPriceSource(PriceSource):
    """Fetches DEX trade aggregates from the Bitquery GraphQL API."""

    def __init__(
        self,
        endpoint: str = BITQUERY_API_URL,
        api_key: str = "",
        network: str = "bsc",
        exchange_names: Optional[List[str]] = None,
        interval_minutes: int = 15,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        """Initialize Bitquery source.

        Args:
            endpoint: GraphQL endpoint URL
            api_key: Bitquery API key (sent as X-API-KEY when set)
            network: Chain name understood by Bitquery (e.g. "bsc")
            exchange_names: DEX names to include
            interval_minutes: Bucket size in minutes
            timeout: HTTP timeout in seconds
            session: Optional requests session for testing or pooling
        """
        if not endpoint:
            raise ValueError("Bitquery endpoint is required")

        self.endpoint = endpoint
        self.network = network
        self.exchange_names = list(exchange_names or DEFAULT_EXCHANGES)
        self.interval_minutes = interval_minutes
        self.timeout = timeout
        self.session = session
        self.headers = {"Content-Type": "application/json"}
        if api_key:
            self.headers["X-API-KEY"] = api_key

    def build_payload(
        self,
        base_currency: str,
        quote_currency: str,
        since: date,
        limit: int = DEFAULT_QUERY_LIMIT,
        ascending: bool = True,
    ) -> dict:
        """Build the GraphQL request body."""
        return {
            "query": DEX_TRADES_QUERY % {"order": "asc" if ascending else "desc"},
            "variables": {
                "network": self.network,
                "limit": limit,
                "since": since.isoformat(),
                "exchanges": self.exchange_names,
                "base": base_currency,
                "quote": quote_currency,
                "minutes": self.interval_minutes,
            },
        }

    def get_buckets(
        self,
        base_currency: str,
        quote_currency: str,
        since: date,
        limit: int = DEFAULT_QUERY_LIMIT,
        ascending: bool = True,
    ) -> List[PriceBucket]:
        """Get time-bucketed price aggregates for a trading pair."""
        logger.info(
            f"Fetching {self.interval_minutes}m buckets for {base_currency}/{quote_currency} "
            f"on {self.network} since {since}"
        )
        payload = self.build_payload(base_currency, quote_currency, since, limit, ascending)
        http = self.session or requests

        try:
            response = http.post(
                self.endpoint, json=payload, headers=self.headers, timeout=self.timeout
            )
            response.raise_for_status()
            body = response.json()
        except requests.exceptions.RequestException as e:
            logger.error(f"Bitquery request failed: {e}")
            raise SourceError(f"Failed to fetch dex trades: {e}") from e
        except ValueError as e:
            logger.error(f"Bitquery returned invalid JSON: {e}")
            raise SourceError(f"Invalid JSON from Bitquery: {e}") from e

        buckets = self.parse_response(body)
        logger.info(f"Successfully fetched {len(buckets)} buckets")
        return buckets

    def parse_response(self, body: dict) -> List[PriceBucket]:
        """Parse a GraphQL response body into PriceBucket objects.

        Raises:
            SourceError: If the response carries errors, is not a JSON object
                at any level, or has no trades list
        """
        if not isinstance(body, dict):
            raise SourceError(f"Bitquery response is not a JSON object: {body!r}")

        errors = body.get("errors")
        if errors:
            messages = "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            )
            raise SourceError(f"Bitquery returned errors: {messages}")

        data = body.get("data") or {}
        if not isinstance(data, dict):
            raise SourceError(f"Bitquery response data is not an object: {data!r}")

        ethereum = data.get("ethereum") or {}
        if not isinstance(ethereum, dict):
            raise SourceError(f"Bitquery response ethereum is not an object: {ethereum!r}")

        rows = ethereum.get("dexTrades")
        if not isinstance(rows, list):
            raise SourceError("Bitquery response has no dexTrades list")

        return [self.parse_row(row) for row in rows]

    def parse_row(self, row: dict) -> PriceBucket:
        """Parse one dexTrades row."""
        try:
            minute = row["timeInterval"]["minute"]
            bucket_start = parser.parse(minute)
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise SourceError(f"Invalid bucket timestamp in row {row!r}: {e}") from e

        return PriceBucket(
            bucket_start=bucket_start,
            open=row.get("open_price"),
            close=row.get("close_price"),
            min=row.get("minimum_price"),
            max=row.get("maximum_price"),
        )
