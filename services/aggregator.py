"""Summary statistics for the reading history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from models.records import TemperatureReading


@dataclass(frozen=True)
class StatsSummary:
    """Statistics shown on the dashboard.

    ``average``, ``minimum`` and ``maximum`` are 0.0 when there is no data;
    ``current`` is None so callers can render a placeholder instead.
    """

    current: Optional[float] = None
    average: float = 0.0
    minimum: float = 0.0
    maximum: float = 0.0
    count: int = 0


class Aggregator:
    """Pure aggregation component that can be unit tested in isolation."""

    def aggregate(self, readings: Iterable[TemperatureReading]) -> StatsSummary:
        """Summarise ``readings``, which are expected newest first."""
        current: Optional[float] = None
        minimum: Optional[float] = None
        maximum: Optional[float] = None
        total = 0.0
        count = 0

        for reading in readings:
            value = reading.value
            if current is None:
                current = value
            count += 1
            total += value
            if minimum is None or value < minimum:
                minimum = value
            if maximum is None or value > maximum:
                maximum = value

        if not count:
            return StatsSummary()

        return StatsSummary(
            current=current,
            average=total / count,
            minimum=minimum,
            maximum=maximum,
            count=count,
        )
