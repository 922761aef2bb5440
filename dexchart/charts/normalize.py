"""Bucket truncation, numeric coercion and price extrema."""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import List, Sequence

from ..models.bucket import PriceBucket, RawPrice
from ..models.candle import NormalizedCandle
from .errors import DataFormatError, EmptyInputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedSeries:
    """Normalized candles with close-price extrema."""

    candles: List[NormalizedCandle]
    all_min: float
    all_max: float

    @property
    def price_range(self) -> float:
        return abs(self.all_max - self.all_min)


def truncate(buckets: Sequence[PriceBucket], max_candles: int) -> List[PriceBucket]:
    """Keep only the most recent ``max_candles`` buckets, preserving order."""
    if len(buckets) > max_candles:
        logger.debug(f"Truncating {len(buckets)} buckets to the last {max_candles}")
        return list(buckets[len(buckets) - max_candles :])
    return list(buckets)


def to_price(value: RawPrice, field: str, index: int) -> float:
    """Coerce a raw API price to float.

    Raises:
        DataFormatError: If the value is not a finite number
    """
    try:
        price = float(Decimal(str(value).strip()))
    except (InvalidOperation, ValueError, TypeError) as e:
        raise DataFormatError(
            f"Bucket {index} has non-numeric {field}: {value!r}"
        ) from e
    if not math.isfinite(price):
        raise DataFormatError(f"Bucket {index} has non-finite {field}: {value!r}")
    return price


def normalize(buckets: Sequence[PriceBucket]) -> NormalizedSeries:
    """Convert buckets to candles and track close-price extrema.

    The first candle is up when it closes at or above its own open; every
    later candle is up only when it closes above the previous close.
    ``all_min`` and ``all_max`` are seeded from the first close and only
    ever consider close prices.

    Args:
        buckets: Buckets in ascending time order

    Returns:
        NormalizedSeries with one candle per bucket

    Raises:
        EmptyInputError: If ``buckets`` is empty
        DataFormatError: If any price cannot be coerced
    """
    if not buckets:
        raise EmptyInputError("Cannot render a chart from zero buckets")

    candles: List[NormalizedCandle] = []
    all_min = all_max = to_price(buckets[0].close, "close", 0)
    previous_close = None

    for index, bucket in enumerate(buckets):
        open_price = to_price(bucket.open, "open", index)
        close_price = to_price(bucket.close, "close", index)
        max_price = to_price(bucket.max, "max", index)
        min_price = to_price(bucket.min, "min", index)

        if previous_close is None:
            up = close_price >= open_price
        else:
            up = close_price > previous_close

        all_max = max(all_max, close_price)
        all_min = min(all_min, close_price)
        previous_close = close_price

        candles.append(
            NormalizedCandle(
                time=bucket.bucket_start,
                max=max_price,
                min=min_price,
                open=open_price,
                close=close_price,
                up=up,
            )
        )

    return NormalizedSeries(candles=candles, all_min=all_min, all_max=all_max)
