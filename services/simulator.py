"""Simulated temperature feed and the periodic loop that drives it."""

from __future__ import annotations

import asyncio
import logging
import math
import random
from datetime import datetime
from functools import lru_cache
from typing import Callable, Optional

from models.records import TemperatureReading
from services.aggregator import Aggregator, StatsSummary
from services.history import DEFAULT_CAPACITY, HistorySnapshot, ReadingHistory
from services.observable import Observable
from settings import DEFAULT_MAX_TEMPERATURE, DEFAULT_MIN_TEMPERATURE, get_settings

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%H:%M:%S"

Clock = Callable[[], datetime]


class TemperatureSimulator:
    """Owns the reading history and the run/pause flag."""

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        min_temperature: float = DEFAULT_MIN_TEMPERATURE,
        max_temperature: float = DEFAULT_MAX_TEMPERATURE,
        running: bool = True,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
        aggregator: Optional[Aggregator] = None,
    ) -> None:
        if not (math.isfinite(min_temperature) and math.isfinite(max_temperature)):
            raise ValueError("Temperature range bounds must be finite.")
        if min_temperature >= max_temperature:
            raise ValueError("min_temperature must be lower than max_temperature.")
        self.min_temperature = min_temperature
        self.max_temperature = max_temperature
        self._store = ReadingHistory(capacity)
        self._rng = rng or random.Random()
        self._clock = clock or datetime.now
        self._aggregator = aggregator or Aggregator()
        self.history: Observable[HistorySnapshot] = Observable(self._store.snapshot())
        self.running: Observable[bool] = Observable(running)

    @property
    def capacity(self) -> int:
        return self._store.capacity

    @property
    def is_running(self) -> bool:
        return self.running.value

    def tick(self) -> Optional[TemperatureReading]:
        """Generate one reading if running; return it, or None when paused."""
        if not self.running.value:
            return None

        reading = TemperatureReading(
            timestamp=self._clock().strftime(TIMESTAMP_FORMAT),
            value=self._rng.uniform(self.min_temperature, self.max_temperature),
        )
        snapshot = self._store.prepend(reading)
        logger.debug(
            "Generated reading",
            extra={
                "timestamp": reading.timestamp,
                "value": f"{reading.value:.2f}",
                "history_size": len(snapshot),
            },
        )
        self.history.set(snapshot)
        return reading

    def toggle_running(self) -> bool:
        new_state = not self.running.value
        self.running.set(new_state)
        logger.info("Simulation %s", "resumed" if new_state else "paused", extra={"running": new_state})
        return new_state

    def snapshot(self) -> HistorySnapshot:
        return self._store.snapshot()

    def stats(self, snapshot: Optional[HistorySnapshot] = None) -> StatsSummary:
        """Aggregate ``snapshot``, or the current history when omitted."""
        return self._aggregator.aggregate(self.snapshot() if snapshot is None else snapshot)

    def current(self) -> Optional[float]:
        newest = self._store.newest()
        return newest.value if newest is not None else None

    def average(self) -> float:
        return self.stats().average

    def min_value(self) -> float:
        return self.stats().minimum

    def max_value(self) -> float:
        return self.stats().maximum


class SimulationLoop:
    """Calls ``simulator.tick()`` every ``interval`` seconds on the event loop."""

    def __init__(self, simulator: TemperatureSimulator, interval: float = 2.0) -> None:
        if not math.isfinite(interval) or interval <= 0:
            raise ValueError("Tick interval must be positive and finite.")
        self.simulator = simulator
        self.interval = interval
        self._task: Optional[asyncio.Task[None]] = None

    @property
    def is_active(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Schedule the loop on the running event loop; no-op if already active."""
        if self.is_active:
            return
        self._task = asyncio.create_task(self._run(), name="temperature-simulation")
        logger.info("Simulation loop started", extra={"interval": self.interval})

    async def stop(self) -> None:
        """Cancel the loop and wait for it to finish."""
        task = self._task
        self._task = None
        if task is None:
            return
        task.cancel()
        await asyncio.gather(task, return_exceptions=True)
        logger.info("Simulation loop stopped")

    async def _run(self) -> None:
        while True:
            try:
                self.simulator.tick()
            except Exception:  # noqa: BLE001 - a bad tick must not end the feed
                logger.exception("Simulation tick failed")
            await asyncio.sleep(self.interval)


@lru_cache
def build_default_simulator() -> TemperatureSimulator:
    """Factory that wires the simulator from environment settings."""
    settings = get_settings()
    rng = random.Random(settings.random_seed) if settings.random_seed is not None else None
    return TemperatureSimulator(
        capacity=settings.history_capacity,
        min_temperature=settings.min_temperature,
        max_temperature=settings.max_temperature,
        running=settings.start_running,
        rng=rng,
    )
