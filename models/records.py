"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TemperatureReading:
    """A single simulated temperature sample."""

    timestamp: str
    value: float


@dataclass(frozen=True, slots=True)
class Point:
    """A chart coordinate on the drawing surface."""

    x: float
    y: float
