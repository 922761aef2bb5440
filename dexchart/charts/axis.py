"""Axis tick labels and their canvas positions."""

from datetime import datetime
from typing import List, Sequence, Tuple

from ..models.candle import NormalizedCandle
from .geometry import ChartGeometry

Point = Tuple[float, float]

# Offset from the bottom padding midline to the time label baseline
X_LABEL_BASELINE_OFFSET = 5


def format_time_label(dt: datetime) -> str:
    """Format a datetime as zero-padded local ``HH:MM``."""
    return f"{dt.hour:02d}:{dt.minute:02d}"


def x_axis_labels(candles: Sequence[NormalizedCandle], tick_count: int) -> List[str]:
    """Split the first-to-last candle time span into ``tick_count`` labels.

    Naive datetimes are read as local time and aware ones are converted to
    it, so labels always show local wall-clock time. The end of the span
    itself is not labelled.
    """
    start = candles[0].time.timestamp()
    end = candles[-1].time.timestamp()
    diff = (end - start) / tick_count
    return [
        format_time_label(datetime.fromtimestamp(start + diff * i))
        for i in range(tick_count)
    ]


def y_axis_labels(all_min: float, all_max: float, tick_count: int) -> List[str]:
    """Split the close-price range into ``tick_count`` labels, bottom first."""
    step = (all_max - all_min) / tick_count
    return [f"{all_min + i * step:.6f}" for i in range(tick_count)]


def x_label_positions(geometry: ChartGeometry, tick_count: int) -> List[Point]:
    """Left-baseline anchors for time labels along the bottom edge."""
    padding = geometry.padding
    spacing = (geometry.width - padding.edge - padding.right) / tick_count
    baseline = geometry.height - padding.edge / 2 + X_LABEL_BASELINE_OFFSET
    return [(i * spacing + padding.edge, baseline) for i in range(tick_count)]


def y_label_positions(
    geometry: ChartGeometry, tick_count: int, font_size: int
) -> List[Point]:
    """Left-baseline anchors for price labels along the right edge."""
    padding = geometry.padding
    spacing = (geometry.height - padding.edge * 2) / tick_count
    x = geometry.width - padding.right
    return [
        (x, geometry.height - padding.edge - i * spacing - font_size)
        for i in range(tick_count)
    ]
