"""Bounded newest-first storage for temperature readings."""

from __future__ import annotations

from threading import Lock
from typing import Iterator

from models.records import TemperatureReading

DEFAULT_CAPACITY = 20

HistorySnapshot = tuple[TemperatureReading, ...]


class ReadingHistory:
    """Keeps the most recent readings, newest first.

    Every mutation builds a new tuple and swaps it in under the lock, so a
    snapshot handed to a reader is never modified afterwards.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("History capacity must be positive.")
        self.capacity = capacity
        self._items: HistorySnapshot = ()
        self._lock = Lock()

    def prepend(self, reading: TemperatureReading) -> HistorySnapshot:
        with self._lock:
            self._items = ((reading,) + self._items)[: self.capacity]
            return self._items

    def snapshot(self) -> HistorySnapshot:
        with self._lock:
            return self._items

    def newest(self) -> TemperatureReading | None:
        items = self.snapshot()
        return items[0] if items else None

    def __len__(self) -> int:
        return len(self.snapshot())

    def __iter__(self) -> Iterator[TemperatureReading]:
        return iter(self.snapshot())
