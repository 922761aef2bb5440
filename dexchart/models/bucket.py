"""Time-bucketed DEX trade aggregate."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Union

# Raw price as delivered by the API; coerced to float by the renderer
RawPrice = Union[float, int, str, Decimal, None]


@dataclass(frozen=True)
class PriceBucket:
    """Open/close/min/max prices for one time interval."""

    bucket_start: datetime
    open: RawPrice
    close: RawPrice
    min: RawPrice
    max: RawPrice
