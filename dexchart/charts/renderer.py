"""Candlestick chart renderer.

Turns a sequence of price buckets into a PNG image: the trailing
``max_candles`` buckets are normalized, mapped to pixel geometry and drawn
as single vertical strokes from the open price to the close price, colored
by direction. With ``show_axis`` enabled, time labels are drawn along the
bottom edge and price labels along the right edge.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from PIL import Image, ImageDraw, ImageFont

from ..models.bucket import PriceBucket
from ..models.chart_config import ChartConfig
from .axis import x_axis_labels, x_label_positions, y_axis_labels, y_label_positions
from .errors import EncodingError, ResourceLoadError
from .geometry import ChartGeometry, compute_geometry
from .normalize import NormalizedSeries, normalize, truncate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartPlan:
    """Everything needed to draw a chart, computed before any drawing."""

    series: NormalizedSeries
    geometry: ChartGeometry
    x_labels: List[str]
    y_labels: List[str]


class CandleChartRenderer:
    """Renders price buckets as a candlestick PNG."""

    def __init__(self, config: Optional[ChartConfig] = None):
        """Initialize renderer.

        Args:
            config: Display configuration (defaults to ChartConfig())
        """
        self.config = config or ChartConfig()

    def plan(self, buckets: Sequence[PriceBucket]) -> ChartPlan:
        """Truncate, normalize and lay out the buckets without drawing.

        Raises:
            EmptyInputError: If ``buckets`` is empty
            DataFormatError: If a price cannot be coerced to a number
        """
        retained = truncate(buckets, self.config.max_candles)
        series = normalize(retained)
        geometry = compute_geometry(
            self.config, len(series.candles), series.all_min, series.all_max
        )

        x_labels: List[str] = []
        y_labels: List[str] = []
        if self.config.show_axis:
            x_labels = x_axis_labels(series.candles, self.config.x_tick_count)
            y_labels = y_axis_labels(
                series.all_min, series.all_max, self.config.y_tick_count
            )

        if series.price_range == 0:
            logger.warning(
                f"Flat price series at {series.all_min}; drawing candles on the baseline"
            )

        return ChartPlan(series=series, geometry=geometry, x_labels=x_labels, y_labels=y_labels)

    def render(self, buckets: Sequence[PriceBucket]) -> bytes:
        """Render buckets to PNG bytes.

        Args:
            buckets: Price buckets in ascending time order

        Returns:
            Encoded PNG image

        Raises:
            EmptyInputError: If ``buckets`` is empty
            DataFormatError: If a price cannot be coerced to a number
            ResourceLoadError: If the label font cannot be loaded
            EncodingError: If PNG encoding fails
        """
        plan = self.plan(buckets)
        fonts = self._load_fonts() if self.config.show_axis else None

        image = self._draw(plan, fonts)
        logger.info(
            f"Rendered {len(plan.series.candles)} candles "
            f"({self.config.width}x{self.config.height}, axis={self.config.show_axis})"
        )
        return self._encode(image)

    def render_to_file(self, buckets: Sequence[PriceBucket], path: Path) -> Path:
        """Render buckets and write the PNG to ``path``.

        Nothing is written if rendering fails; a partially written file is
        removed when the write fails.

        Raises:
            EncodingError: If the file cannot be written
        """
        data = self.render(buckets)
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            if path.is_file():
                path.unlink()
            logger.error(f"Failed to write chart to {path}: {e}")
            raise EncodingError(f"Failed to write chart to {path}: {e}") from e

        logger.info(f"Chart written to {path} ({len(data)} bytes)")
        return path

    def _load_fonts(self):
        """Load the time and price label fonts."""
        return (
            self._load_font(self.config.x_font_size),
            self._load_font(self.config.y_font_size),
        )

    def _load_font(self, size: int):
        font_path = self.config.font_path
        if font_path is None:
            logger.warning(
                f"No font file configured for {self.config.font_family}; "
                f"using Pillow's default font at {size}px"
            )
            return ImageFont.load_default(size=size)
        try:
            return ImageFont.truetype(font_path, size)
        except OSError as e:
            logger.error(f"Failed to load font {self.config.font_family} from {font_path}: {e}")
            raise ResourceLoadError(f"Failed to load font {font_path}: {e}") from e

    def _draw(self, plan: ChartPlan, fonts) -> Image.Image:
        config = self.config
        geometry = plan.geometry

        image = Image.new("RGB", (config.width, config.height), config.background_color)
        draw = ImageDraw.Draw(image)

        stroke = round(geometry.stroke_width)
        for index, candle in enumerate(plan.series.candles):
            x = geometry.x_for(index)
            color = config.up_color if candle.up else config.down_color
            draw.line(
                [(x, geometry.y_for(candle.open)), (x, geometry.y_for(candle.close))],
                fill=color,
                width=stroke,
            )

        if fonts is not None:
            x_font, y_font = fonts
            x_points = x_label_positions(geometry, config.x_tick_count)
            for label, point in zip(plan.x_labels, x_points):
                self._draw_text(draw, point, label, x_font, config.x_font_size)

            y_points = y_label_positions(geometry, config.y_tick_count, config.y_font_size)
            for label, point in zip(plan.y_labels, y_points):
                self._draw_text(draw, point, label, y_font, config.y_font_size)

        return image

    def _draw_text(self, draw, baseline_point, text, font, size):
        """Draw text whose baseline starts at ``baseline_point``."""
        x, y = baseline_point
        if isinstance(font, ImageFont.FreeTypeFont):
            ascent = font.getmetrics()[0]
        else:
            ascent = size
        draw.text((x, y - ascent), text, fill=self.config.label_color, font=font)

    def _encode(self, image: Image.Image) -> bytes:
        buffer = io.BytesIO()
        try:
            image.save(buffer, format="PNG")
        except (OSError, ValueError) as e:
            logger.error(f"Failed to encode chart: {e}")
            raise EncodingError(f"Failed to encode chart: {e}") from e
        return buffer.getvalue()
