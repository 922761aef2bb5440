"""Chart display configuration."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ChartConfig(BaseModel):
    """Validated display options for the candlestick renderer."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(900, gt=0, description="Canvas width in pixels")
    height: int = Field(500, gt=0, description="Canvas height in pixels")
    show_axis: bool = Field(False, description="Reserve padding and draw tick labels")
    max_candles: int = Field(100, ge=1, description="Trailing buckets to display")
    x_tick_count: int = Field(10, ge=1, description="Time labels along the bottom")
    y_tick_count: int = Field(15, ge=1, description="Price labels along the right edge")
    font_path: Optional[str] = Field(None, description="TrueType font file for labels")
    font_family: str = Field("Verdana", description="Font family name")
    x_font_size: int = Field(14, gt=0, description="Time label font size")
    y_font_size: int = Field(12, gt=0, description="Price label font size")
    up_color: str = Field("#26A69A", description="Rising candle color")
    down_color: str = Field("#EF5350", description="Falling candle color")
    background_color: str = Field("#000000", description="Canvas fill color")
    label_color: str = Field("#FFFFFF", description="Axis label color")

    @field_validator("up_color", "down_color", "background_color", "label_color")
    @classmethod
    def color_must_be_hex(cls, v):
        """Validate that colors are #RRGGBB strings."""
        digits = v[1:] if v.startswith("#") else ""
        if len(digits) != 6 or any(c not in "0123456789abcdefABCDEF" for c in digits):
            raise ValueError(f"Color must be in #RRGGBB format, got {v!r}")
        return v

    @classmethod
    def from_env(
        cls, assets_dir: Optional[str] = None, show_axis: Optional[bool] = None
    ) -> "ChartConfig":
        """Load chart options from environment variables.

        Args:
            assets_dir: Directory holding the font file (defaults to ASSETS_DIR)
            show_axis: Overrides CHART_SHOW_AXIS when given

        Returns:
            ChartConfig built from CHART_* variables and ASSETS_DIR
        """
        if show_axis is None:
            show_axis = os.getenv("CHART_SHOW_AXIS", "true").lower() == "true"

        if assets_dir is None:
            assets_dir = os.getenv("ASSETS_DIR", "./")
        font_file = os.getenv("CHART_FONT_FILE", "verdana.ttf")

        return cls(
            width=_int_env("CHART_WIDTH", 900),
            height=_int_env("CHART_HEIGHT", 500),
            show_axis=show_axis,
            max_candles=_int_env("CHART_MAX_CANDLES", 100),
            x_tick_count=_int_env("CHART_X_TICKS", 10),
            y_tick_count=_int_env("CHART_Y_TICKS", 15),
            font_path=str(Path(assets_dir) / font_file),
        )


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name, str(default))
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {value!r}") from e
