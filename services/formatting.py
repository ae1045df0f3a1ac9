from __future__ import annotations

from typing import Optional

NO_DATA = "--"


def format_temperature(value: Optional[float]) -> str:
    if value is None:
        return NO_DATA
    return f"{value:.1f}°F"
