"""Pixel geometry for candles."""

from dataclasses import dataclass

from ..models.chart_config import ChartConfig

MAX_STROKE_WIDTH = 10

AXIS_PADDING = 30
AXIS_RIGHT_PADDING = 100
PLAIN_PADDING = 20


@dataclass(frozen=True)
class Padding:
    """Space reserved around the drawing rectangle."""

    edge: int  # top, bottom and left
    right: int


def padding_for(show_axis: bool) -> Padding:
    """Return the padding for a chart with or without axis labels."""
    if show_axis:
        return Padding(edge=AXIS_PADDING, right=AXIS_RIGHT_PADDING)
    return Padding(edge=PLAIN_PADDING, right=PLAIN_PADDING)


@dataclass(frozen=True)
class ChartGeometry:
    """Maps candle indexes and prices to canvas coordinates.

    The y origin is the top edge of the canvas, so higher prices map to
    smaller y values.
    """

    width: int
    height: int
    padding: Padding
    count: int
    all_min: float
    step: float
    stroke_width: float
    scale: float

    def x_for(self, index: int) -> float:
        return self.padding.edge + self.step * index

    def y_for(self, price: float) -> float:
        return self.height - self.padding.edge - (price - self.all_min) * self.scale


def compute_geometry(
    config: ChartConfig, count: int, all_min: float, all_max: float
) -> ChartGeometry:
    """Compute candle spacing, stroke width and vertical scale.

    A flat series (``all_max == all_min``) gets a scale of zero so every
    price lands on the bottom baseline.

    Args:
        config: Display configuration
        count: Number of candles to draw
        all_min: Lowest close price
        all_max: Highest close price

    Returns:
        ChartGeometry for the canvas
    """
    padding = padding_for(config.show_axis)
    step = (config.width - padding.edge * 2 - padding.right) / count
    stroke_width = max(0.0, min(MAX_STROKE_WIDTH, step - 1))

    price_range = abs(all_max - all_min)
    if price_range == 0:
        scale = 0.0
    else:
        scale = (config.height - padding.edge * 2) / price_range

    return ChartGeometry(
        width=config.width,
        height=config.height,
        padding=padding,
        count=count,
        all_min=all_min,
        step=step,
        stroke_width=stroke_width,
        scale=scale,
    )
