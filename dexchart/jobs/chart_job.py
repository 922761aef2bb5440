"""Fetch-and-render job for DEX price charts."""

import logging
import time
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from ..charts.renderer import CandleChartRenderer
from ..models.results import ChartResult
from ..sources.base import DEFAULT_QUERY_LIMIT, PriceSource, default_since

logger = logging.getLogger(__name__)


class ChartJob:
    """Fetches price buckets from a source and writes one chart image."""

    def __init__(
        self,
        source: PriceSource,
        renderer: CandleChartRenderer,
        output_dir: Path,
    ):
        """Initialize chart job.

        Args:
            source: Price source for fetching buckets
            renderer: Renderer holding the display configuration
            output_dir: Directory where chart images are written
        """
        self.source = source
        self.renderer = renderer
        self.output_dir = Path(output_dir)

    def output_path(self, name: Optional[str] = None) -> Path:
        """Return the image path, named by epoch milliseconds when no name is given."""
        if name is None:
            name = str(int(datetime.now().timestamp() * 1000))
        return self.output_dir / f"{name}.png"

    def run(
        self,
        base_currency: str,
        quote_currency: str,
        since: Optional[date] = None,
        limit: int = DEFAULT_QUERY_LIMIT,
        name: Optional[str] = None,
    ) -> ChartResult:
        """Fetch buckets for a pair and render them to a PNG file.

        Args:
            base_currency: Base token address
            quote_currency: Quote token address
            since: Earliest date to fetch (defaults to yesterday)
            limit: Maximum number of buckets to fetch
            name: File name without extension (defaults to a timestamp)

        Returns:
            ChartResult describing the written image

        Raises:
            SourceError: If fetching fails
            ChartError: If rendering or writing fails
        """
        started = time.monotonic()
        since = since or default_since()

        try:
            buckets = self.source.get_buckets(
                base_currency=base_currency,
                quote_currency=quote_currency,
                since=since,
                limit=limit,
                ascending=True,
            )
            path = self.renderer.render_to_file(buckets, self.output_path(name))
        except Exception as e:
            logger.error(f"Chart job failed for {base_currency}/{quote_currency}: {e}")
            raise

        config = self.renderer.config
        result = ChartResult(
            path=path,
            since=since,
            candles_fetched=len(buckets),
            candles_rendered=min(len(buckets), config.max_candles),
            show_axis=config.show_axis,
            execution_time_ms=int((time.monotonic() - started) * 1000),
        )
        logger.info(f"✅ Chart ready: {result.path} ({result.candles_rendered} candles)")
        return result
