"""Configuration management."""

import os
from dataclasses import dataclass, field
from typing import List

from .sources.bitquery import (
    BITQUERY_API_URL,
    BUSD_ADDRESS,
    DEFAULT_EXCHANGES,
    WBNB_ADDRESS,
)


@dataclass
class SystemConfig:
    """System configuration from environment variables."""

    api_url: str = BITQUERY_API_URL
    api_key: str = ""
    data_dir: str = "./data/"
    assets_dir: str = "./"
    network: str = "bsc"
    exchange_names: List[str] = field(default_factory=lambda: list(DEFAULT_EXCHANGES))
    base_currency: str = WBNB_ADDRESS
    quote_currency: str = BUSD_ADDRESS
    interval_minutes: int = 15
    query_limit: int = 300

    @classmethod
    def from_env(cls) -> "SystemConfig":
        """Load configuration from environment variables.

        Every variable is optional; unset ones fall back to the WBNB/BUSD
        PancakeSwap pair on BNB Smart Chain.
        """
        exchanges_str = os.getenv("DEX_EXCHANGES", ",".join(DEFAULT_EXCHANGES))
        exchanges = [e.strip() for e in exchanges_str.split(",") if e.strip()]

        try:
            interval_minutes = int(os.getenv("DEX_INTERVAL_MINUTES", "15"))
            query_limit = int(os.getenv("DEX_QUERY_LIMIT", "300"))
        except ValueError as e:
            raise ValueError(
                f"DEX_INTERVAL_MINUTES and DEX_QUERY_LIMIT must be integers: {e}"
            ) from e

        return cls(
            api_url=os.getenv("BITQUERY_API_URL", BITQUERY_API_URL),
            api_key=os.getenv("BITQUERY_API_KEY", ""),
            data_dir=os.getenv("DATA_DIR", "./data/"),
            assets_dir=os.getenv("ASSETS_DIR", "./"),
            network=os.getenv("DEX_NETWORK", "bsc"),
            exchange_names=exchanges,
            base_currency=os.getenv("DEX_BASE_CURRENCY", WBNB_ADDRESS),
            quote_currency=os.getenv("DEX_QUOTE_CURRENCY", BUSD_ADDRESS),
            interval_minutes=interval_minutes,
            query_limit=query_limit,
        )

    def validate(self) -> None:
        """Validate configuration."""
        if not self.api_url:
            raise ValueError("BITQUERY_API_URL is required")
        if not self.base_currency or not self.quote_currency:
            raise ValueError("DEX_BASE_CURRENCY and DEX_QUOTE_CURRENCY are required")
        if not self.exchange_names:
            raise ValueError("DEX_EXCHANGES must name at least one exchange")
        if self.interval_minutes <= 0:
            raise ValueError("DEX_INTERVAL_MINUTES must be positive")
        if self.query_limit <= 0:
            raise ValueError("DEX_QUERY_LIMIT must be positive")
