"""DEX candlestick chart generator.

Fetches recent 15-minute trade aggregates for a token pair from Bitquery
and writes a candlestick chart PNG to DATA_DIR.
"""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

# Setup logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Imports after logging setup (required for proper logging configuration)
from dexchart.charts.renderer import CandleChartRenderer  # noqa: E402
from dexchart.config import SystemConfig  # noqa: E402
from dexchart.jobs.chart_job import ChartJob  # noqa: E402
from dexchart.models.chart_config import ChartConfig  # noqa: E402
from dexchart.sources.bitquery import BitqueryPriceSource  # noqa: E402


def main():
    """Main entry point for chart generation."""
    logger.info("🚀 Starting DEX chart generation...")

    try:
        # Load configuration
        system_config = SystemConfig.from_env()
        system_config.validate()
        chart_config = ChartConfig.from_env(assets_dir=system_config.assets_dir)
        logger.info("✅ Configuration loaded")
        logger.info(f"   - API: {system_config.api_url}")
        logger.info(f"   - Network: {system_config.network}")
        logger.info(f"   - Exchanges: {system_config.exchange_names}")
        logger.info(
            f"   - Pair: {system_config.base_currency}/{system_config.quote_currency}"
        )
        logger.info(f"   - Output: {system_config.data_dir}")
        logger.info(f"   - Axis: {chart_config.show_axis}")

        source = BitqueryPriceSource(
            endpoint=system_config.api_url,
            api_key=system_config.api_key,
            network=system_config.network,
            exchange_names=system_config.exchange_names,
            interval_minutes=system_config.interval_minutes,
        )
        renderer = CandleChartRenderer(chart_config)
        job = ChartJob(source, renderer, Path(system_config.data_dir))

        result = job.run(
            base_currency=system_config.base_currency,
            quote_currency=system_config.quote_currency,
            limit=system_config.query_limit,
            name=os.getenv("CHART_NAME") or None,
        )
        logger.info(f"path = {result.path}")

    except Exception as e:
        logger.error(f"❌ Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
