"""Normalized candle model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NormalizedCandle:
    """Numeric candle ready for drawing."""

    time: datetime
    max: float
    min: float
    open: float
    close: float
    up: bool
