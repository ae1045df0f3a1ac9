from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable, Iterable, Iterator

import pytest

from services.simulator import TemperatureSimulator


class FixedRandom:
    """Stand-in for ``random.Random`` that replays predetermined samples."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values: Iterator[float] = iter(values)
        self.calls: list[tuple[float, float]] = []

    def uniform(self, a: float, b: float) -> float:
        self.calls.append((a, b))
        return next(self._values)


def stepping_clock(start: datetime | None = None, step_seconds: int = 1) -> Callable[[], datetime]:
    current = start or datetime(2024, 1, 1, 12, 0, 0)
    state = {"now": current - timedelta(seconds=step_seconds)}

    def clock() -> datetime:
        state["now"] += timedelta(seconds=step_seconds)
        return state["now"]

    return clock


@pytest.fixture
def make_simulator() -> Callable[..., TemperatureSimulator]:
    def factory(values: Iterable[float] = (), **kwargs) -> TemperatureSimulator:
        kwargs.setdefault("clock", stepping_clock())
        if "rng" not in kwargs:
            kwargs["rng"] = FixedRandom(values)
        return TemperatureSimulator(**kwargs)

    return factory
