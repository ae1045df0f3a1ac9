from __future__ import annotations

import math
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_TICK_INTERVAL_ENV = "SIM_TICK_INTERVAL_SECONDS"
_HISTORY_CAPACITY_ENV = "SIM_HISTORY_CAPACITY"
_MIN_TEMPERATURE_ENV = "SIM_MIN_TEMPERATURE"
_MAX_TEMPERATURE_ENV = "SIM_MAX_TEMPERATURE"
_START_RUNNING_ENV = "SIM_START_RUNNING"
_RANDOM_SEED_ENV = "SIM_RANDOM_SEED"
_CHART_WIDTH_ENV = "CHART_WIDTH"
_CHART_HEIGHT_ENV = "CHART_HEIGHT"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_MIN_TEMPERATURE = 65.0
DEFAULT_MAX_TEMPERATURE = 85.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    tick_interval: float
    history_capacity: int
    min_temperature: float
    max_temperature: float
    start_running: bool
    random_seed: Optional[int]
    chart_width: float
    chart_height: float
    log_level: str


def _read_raw(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    candidate = value.strip()
    return candidate or None


def _read_positive_float(name: str, default: float) -> float:
    candidate = _read_raw(name)
    if candidate is None:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if math.isfinite(parsed) and parsed > 0 else default


def _read_positive_int(name: str, default: int) -> int:
    candidate = _read_raw(name)
    if candidate is None:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_float(name: str, default: float) -> float:
    candidate = _read_raw(name)
    if candidate is None:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if math.isfinite(parsed) else default


def _read_optional_int(name: str) -> Optional[int]:
    candidate = _read_raw(name)
    if candidate is None:
        return None
    try:
        return int(candidate)
    except ValueError:
        return None


def _read_bool(name: str, default: bool) -> bool:
    candidate = _read_raw(name)
    if candidate is None:
        return default
    lowered = candidate.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return default


def _read_temperature_range() -> tuple[float, float]:
    low = _read_float(_MIN_TEMPERATURE_ENV, DEFAULT_MIN_TEMPERATURE)
    high = _read_float(_MAX_TEMPERATURE_ENV, DEFAULT_MAX_TEMPERATURE)
    if low >= high:
        return DEFAULT_MIN_TEMPERATURE, DEFAULT_MAX_TEMPERATURE
    return low, high


def _read_log_level(default: str) -> str:
    candidate = _read_raw(_LOG_LEVEL_ENV)
    if candidate is None:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    min_temperature, max_temperature = _read_temperature_range()
    return Settings(
        tick_interval=_read_positive_float(_TICK_INTERVAL_ENV, 2.0),
        history_capacity=_read_positive_int(_HISTORY_CAPACITY_ENV, 20),
        min_temperature=min_temperature,
        max_temperature=max_temperature,
        start_running=_read_bool(_START_RUNNING_ENV, True),
        random_seed=_read_optional_int(_RANDOM_SEED_ENV),
        chart_width=_read_positive_float(_CHART_WIDTH_ENV, 600.0),
        chart_height=_read_positive_float(_CHART_HEIGHT_ENV, 150.0),
        log_level=_read_log_level("INFO"),
    )
