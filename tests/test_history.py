from __future__ import annotations

import pytest

from models.records import TemperatureReading
from services.history import ReadingHistory


def _reading(index: int) -> TemperatureReading:
    return TemperatureReading(timestamp=f"12:00:{index:02d}", value=65.0 + index)


def test_history_starts_empty() -> None:
    history = ReadingHistory()

    assert history.snapshot() == ()
    assert history.newest() is None
    assert len(history) == 0


def test_prepend_keeps_newest_first() -> None:
    history = ReadingHistory()

    history.prepend(_reading(1))
    history.prepend(_reading(2))

    assert [reading.timestamp for reading in history] == ["12:00:02", "12:00:01"]
    assert history.newest() == _reading(2)


def test_prepend_evicts_oldest_beyond_capacity() -> None:
    history = ReadingHistory(capacity=20)

    for index in range(25):
        history.prepend(_reading(index))

    snapshot = history.snapshot()
    assert len(snapshot) == 20
    assert snapshot[0] == _reading(24)
    assert snapshot[-1] == _reading(5)


def test_snapshot_is_not_affected_by_later_prepends() -> None:
    history = ReadingHistory()
    history.prepend(_reading(1))
    before = history.snapshot()

    history.prepend(_reading(2))

    assert before == (_reading(1),)
    assert len(history.snapshot()) == 2


def test_capacity_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ReadingHistory(capacity=0)
