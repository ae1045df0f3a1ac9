"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from models.records import Point, TemperatureReading
from services.aggregator import StatsSummary
from services.formatting import format_temperature


class ReadingOut(BaseModel):
    """A single reading as exposed by the API."""

    timestamp: str = Field(..., description="Local time of the reading, HH:MM:SS.")
    value: float
    display: str = Field(..., description="Value formatted for display, e.g. '72.4°F'.")

    @classmethod
    def from_reading(cls, reading: TemperatureReading) -> "ReadingOut":
        return cls(
            timestamp=reading.timestamp,
            value=reading.value,
            display=format_temperature(reading.value),
        )


class ReadingsResponse(BaseModel):
    """History snapshot, newest first."""

    readings: List[ReadingOut] = Field(default_factory=list)

    @classmethod
    def from_history(cls, history: Sequence[TemperatureReading]) -> "ReadingsResponse":
        return cls(readings=[ReadingOut.from_reading(reading) for reading in history])


class Stats(BaseModel):
    """Summary statistics; aggregates are 0 when there is no data."""

    current: Optional[float] = None
    average: float = 0.0
    minimum: float = 0.0
    maximum: float = 0.0
    count: int = Field(0, ge=0)

    @classmethod
    def from_summary(cls, summary: StatsSummary) -> "Stats":
        return cls(
            current=summary.current,
            average=summary.average,
            minimum=summary.minimum,
            maximum=summary.maximum,
            count=summary.count,
        )


class StatsDisplay(BaseModel):
    """Statistics pre-formatted for display."""

    current: str
    average: str
    minimum: str
    maximum: str

    @classmethod
    def from_summary(cls, summary: StatsSummary) -> "StatsDisplay":
        return cls(
            current=format_temperature(summary.current),
            average=format_temperature(summary.average),
            minimum=format_temperature(summary.minimum),
            maximum=format_temperature(summary.maximum),
        )


class RunState(BaseModel):
    running: bool


class ChartPoint(BaseModel):
    x: float
    y: float

    @classmethod
    def from_point(cls, point: Point) -> "ChartPoint":
        return cls(x=point.x, y=point.y)


class ChartResponse(BaseModel):
    """Polyline vertices for the history, oldest on the left."""

    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    points: List[ChartPoint] = Field(default_factory=list)
    path: str = Field("", description="SVG path data for the polyline.")


class DashboardSnapshot(BaseModel):
    """Everything the dashboard needs in one payload."""

    running: bool
    stats: Stats
    display: StatsDisplay
    readings: List[ReadingOut] = Field(default_factory=list)
