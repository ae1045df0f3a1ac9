from __future__ import annotations

from typing import Any, Dict, Iterable

import typer

from models.records import TemperatureReading
from services.chart import sparkline
from services.formatting import NO_DATA

SPARKLINE_WIDTH = 40


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def _readings(payload: Dict[str, Any]) -> list[TemperatureReading]:
    return [
        TemperatureReading(timestamp=item["timestamp"], value=float(item["value"]))
        for item in payload.get("readings") or []
    ]


def render_dashboard(payload: Dict[str, Any]) -> None:
    running = bool(payload.get("running"))
    echo_heading("Temperature Dashboard")
    typer.secho(
        "RUNNING" if running else "PAUSED",
        fg=typer.colors.GREEN if running else typer.colors.YELLOW,
    )

    display = payload.get("display") or {}
    typer.echo()
    echo_key_values(
        [
            ("Current", display.get("current", NO_DATA)),
            ("Average", display.get("average", NO_DATA)),
            ("Min", display.get("minimum", NO_DATA)),
            ("Max", display.get("maximum", NO_DATA)),
        ]
    )

    readings = _readings(payload)
    if readings:
        typer.echo()
        typer.secho(sparkline(readings, SPARKLINE_WIDTH), fg=typer.colors.RED)

    typer.echo()
    echo_heading("Recent Readings:")
    if not readings:
        typer.echo("No readings yet.")
        return
    for item in payload.get("readings") or []:
        typer.echo(f"  {item.get('timestamp')}  {item.get('display')}")
