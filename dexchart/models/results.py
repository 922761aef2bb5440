"""Result models for chart jobs."""

from dataclasses import dataclass
from datetime import date
from pathlib import Path


@dataclass
class ChartResult:
    """Result of a fetch-and-render run."""

    path: Path
    since: date
    candles_fetched: int
    candles_rendered: int
    show_axis: bool
    execution_time_ms: int
