"""Map reading histories onto a fixed-size drawing surface."""

from __future__ import annotations

from typing import Sequence

from models.records import Point, TemperatureReading

MIN_RANGE = 0.01

_SPARK_LEVELS = "▁▂▃▄▅▆▇█"


def _validate_canvas(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError("Canvas width and height must be positive.")


def _scale(values: Sequence[float]) -> tuple[float, float]:
    low = min(values)
    return low, max(max(values) - low, MIN_RANGE)


def chart_points(
    readings: Sequence[TemperatureReading],
    width: float,
    height: float,
) -> list[Point]:
    """Return polyline vertices for ``readings`` (newest first), oldest on the left.

    The value range is clamped to ``MIN_RANGE`` so a flat history does not
    divide by zero; an empty history yields no points.
    """
    _validate_canvas(width, height)
    if not readings:
        return []

    values = [reading.value for reading in reversed(readings)]
    low, span = _scale(values)
    step = width / max(len(values) - 1, 1)
    return [
        Point(x=index * step, y=height - ((value - low) / span) * height)
        for index, value in enumerate(values)
    ]


def svg_path(points: Sequence[Point], precision: int = 2) -> str:
    """Serialise ``points`` as SVG path data: one move, then straight segments."""
    commands = []
    for index, point in enumerate(points):
        command = "M" if index == 0 else "L"
        commands.append(f"{command}{point.x:.{precision}f} {point.y:.{precision}f}")
    return " ".join(commands)


def sparkline(readings: Sequence[TemperatureReading], width: int | None = None) -> str:
    """Render ``readings`` (newest first) as block characters, oldest on the left.

    When ``width`` is given only the most recent ``width`` readings are drawn.
    """
    if width is not None and width <= 0:
        raise ValueError("Sparkline width must be positive.")
    if not readings:
        return ""

    selected = readings[:width] if width is not None else readings
    values = [reading.value for reading in reversed(selected)]
    low, span = _scale(values)
    top = len(_SPARK_LEVELS) - 1
    return "".join(
        _SPARK_LEVELS[min(top, int(round((value - low) / span * top)))] for value in values
    )
