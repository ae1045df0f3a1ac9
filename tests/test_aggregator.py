"""Unit tests for the aggregation logic."""

from __future__ import annotations

import pytest

from models.records import TemperatureReading
from services.aggregator import Aggregator


def _reading(value: float, timestamp: str = "12:00:00") -> TemperatureReading:
    """Helper to build deterministic readings."""

    return TemperatureReading(timestamp=timestamp, value=value)


def test_aggregate_empty_iterable_returns_zero_defaults() -> None:
    aggregator = Aggregator()

    summary = aggregator.aggregate([])

    assert summary.current is None
    assert summary.average == 0.0
    assert summary.minimum == 0.0
    assert summary.maximum == 0.0
    assert summary.count == 0


def test_aggregate_average_of_two_readings() -> None:
    summary = Aggregator().aggregate([_reading(70.0), _reading(80.0)])

    assert summary.average == pytest.approx(75.0)


def test_aggregate_computes_statistics() -> None:
    aggregator = Aggregator()
    readings = [
        _reading(72.5, "12:00:02"),
        _reading(66.0, "12:00:01"),
        _reading(84.0, "12:00:00"),
    ]

    summary = aggregator.aggregate(readings)

    assert summary.current == 72.5
    assert summary.minimum == 66.0
    assert summary.maximum == 84.0
    assert summary.average == pytest.approx(74.1666666, rel=1e-6)
    assert summary.count == 3


def test_aggregate_single_reading_sets_every_statistic() -> None:
    summary = Aggregator().aggregate([_reading(68.5)])

    assert (summary.current, summary.minimum, summary.maximum) == (68.5, 68.5, 68.5)
    assert summary.average == 68.5
    assert summary.count == 1
