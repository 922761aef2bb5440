"""Tests for axis labels and label positions."""

from datetime import datetime, timedelta, timezone

import pytest

from dexchart.charts.axis import (
    format_time_label,
    x_axis_labels,
    x_label_positions,
    y_axis_labels,
    y_label_positions,
)
from dexchart.charts.geometry import compute_geometry
from dexchart.models.candle import NormalizedCandle
from dexchart.models.chart_config import ChartConfig


def make_candle(time: datetime, close: float = 1.0) -> NormalizedCandle:
    return NormalizedCandle(time=time, max=close, min=close, open=close, close=close, up=True)


class TestTimeLabels:
    """Local wall-clock HH:MM labels."""

    def test_format_zero_pads(self):
        assert format_time_label(datetime(2024, 1, 10, 7, 5)) == "07:05"
        assert format_time_label(datetime(2024, 1, 10, 23, 45)) == "23:45"

    def test_span_split_into_equal_intervals(self):
        start = datetime(2024, 1, 10, 12, 0)
        candles = [make_candle(start), make_candle(start + timedelta(minutes=150))]

        labels = x_axis_labels(candles, 10)

        assert labels == [
            "12:00", "12:15", "12:30", "12:45", "13:00",
            "13:15", "13:30", "13:45", "14:00", "14:15",
        ]

    def test_end_of_span_is_not_labelled(self):
        start = datetime(2024, 1, 10, 12, 0)
        candles = [make_candle(start), make_candle(start + timedelta(hours=1))]

        labels = x_axis_labels(candles, 2)

        assert labels == ["12:00", "12:30"]

    def test_single_candle_repeats_its_time(self):
        candles = [make_candle(datetime(2024, 1, 10, 9, 30))]

        assert x_axis_labels(candles, 3) == ["09:30", "09:30", "09:30"]

    def test_aware_times_render_in_local_time(self):
        start = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)
        candles = [make_candle(start), make_candle(start + timedelta(minutes=30))]

        labels = x_axis_labels(candles, 2)

        local_start = start.astimezone()
        expected = [
            local_start.strftime("%H:%M"),
            (local_start + timedelta(minutes=15)).strftime("%H:%M"),
        ]
        assert labels == expected


class TestPriceLabels:
    def test_range_split_from_min(self):
        assert y_axis_labels(0.9, 1.2, 3) == ["0.900000", "1.000000", "1.100000"]

    def test_six_decimal_places(self):
        labels = y_axis_labels(301.1234567, 302.0, 15)

        assert len(labels) == 15
        assert labels[0] == "301.123457"
        assert all(len(label.split(".")[1]) == 6 for label in labels)

    def test_flat_range_repeats_min(self):
        assert y_axis_labels(2.5, 2.5, 2) == ["2.500000", "2.500000"]


class TestLabelPositions:
    @pytest.fixture
    def geometry(self):
        return compute_geometry(ChartConfig(show_axis=True), count=10, all_min=1.0, all_max=2.0)

    def test_x_positions_along_bottom(self, geometry):
        points = x_label_positions(geometry, 10)

        assert len(points) == 10
        assert points[0] == (30, 490)
        assert points[1] == (107, 490)
        assert points[9] == (723, 490)

    def test_y_positions_along_right_edge(self, geometry):
        points = y_label_positions(geometry, 15, 12)

        assert len(points) == 15
        assert all(x == 800 for x, _ in points)
        assert points[0][1] == 458
        assert points[1][1] == pytest.approx(458 - 440 / 15)
        assert [y for _, y in points] == sorted((y for _, y in points), reverse=True)
