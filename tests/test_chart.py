from __future__ import annotations

import pytest

from models.records import Point, TemperatureReading
from services.chart import chart_points, sparkline, svg_path


def _history(*values: float) -> list[TemperatureReading]:
    """Build a newest-first history from ``values`` given newest first."""
    return [
        TemperatureReading(timestamp=f"12:00:{len(values) - index:02d}", value=value)
        for index, value in enumerate(values)
    ]


def test_two_readings_span_the_canvas() -> None:
    points = chart_points(_history(80.0, 70.0), width=100, height=100)

    assert points == [Point(x=0.0, y=100.0), Point(x=100.0, y=0.0)]


def test_points_are_ordered_oldest_first() -> None:
    points = chart_points(_history(75.0, 85.0, 65.0), width=200, height=100)

    assert [point.x for point in points] == [0.0, 100.0, 200.0]
    assert [point.y for point in points] == [100.0, 0.0, 50.0]


def test_single_reading_yields_single_point() -> None:
    points = chart_points(_history(72.0), width=100, height=100)

    assert points == [Point(x=0.0, y=100.0)]
    assert "L" not in svg_path(points)


def test_flat_history_uses_clamped_range() -> None:
    points = chart_points(_history(72.0, 72.0, 72.0), width=100, height=50)

    assert [point.y for point in points] == [50.0, 50.0, 50.0]


def test_empty_history_renders_nothing() -> None:
    assert chart_points([], width=100, height=100) == []
    assert svg_path([]) == ""
    assert sparkline([]) == ""


@pytest.mark.parametrize("width,height", [(0, 100), (100, 0), (-1, 10)])
def test_invalid_canvas_is_rejected(width: float, height: float) -> None:
    with pytest.raises(ValueError):
        chart_points(_history(70.0), width=width, height=height)


def test_svg_path_joins_points_with_line_segments() -> None:
    path = svg_path([Point(0, 100), Point(50, 25.5), Point(100, 0)])

    assert path == "M0.00 100.00 L50.00 25.50 L100.00 0.00"


def test_sparkline_runs_oldest_to_newest() -> None:
    line = sparkline(_history(80.0, 70.0))

    assert line == "▁█"


def test_sparkline_limits_to_most_recent_readings() -> None:
    line = sparkline(_history(80.0, 70.0, 60.0), width=2)

    assert len(line) == 2
    assert line == "▁█"
