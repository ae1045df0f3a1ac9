from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

import typer
import uvicorn

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_dashboard


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Run and inspect the simulated temperature dashboard.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Dashboard API base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for each HTTP request.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, request_timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("serve")
def serve_command(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind."),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on."),
) -> None:
    """Start the dashboard service and its simulation loop."""
    typer.echo(f"Serving dashboard on http://{host}:{port}/ui")
    uvicorn.run("app.main:app", host=host, port=port, log_config=None)


@app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Print current statistics, a sparkline and the recent readings."""
    state = _get_state(ctx)
    render_dashboard(state.client.get_dashboard())


@app.command("toggle")
def toggle_command(ctx: typer.Context) -> None:
    """Pause a running simulation or resume a paused one."""
    state = _get_state(ctx)
    running = state.client.toggle()
    if running:
        typer.secho("Simulation running.", fg=typer.colors.GREEN)
    else:
        typer.secho("Simulation paused.", fg=typer.colors.YELLOW)


@app.command("watch")
def watch_command(
    ctx: typer.Context,
    interval: Optional[float] = typer.Option(
        None,
        "--interval",
        help="Seconds between refreshes (defaults to CLI_WATCH_INTERVAL or 2).",
    ),
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-n",
        min=1,
        help="Stop after this many refreshes; runs until interrupted when omitted.",
    ),
    clear: bool = typer.Option(
        True,
        "--clear/--no-clear",
        help="Clear the terminal before each refresh.",
    ),
) -> None:
    """Re-render the dashboard periodically."""
    state = _get_state(ctx)
    delay = interval if interval is not None and interval > 0 else state.config.watch_interval
    rendered = 0
    try:
        while count is None or rendered < count:
            payload = state.client.get_dashboard()
            if clear:
                typer.clear()
            render_dashboard(payload)
            rendered += 1
            if count is not None and rendered >= count:
                break
            time.sleep(delay)
    except KeyboardInterrupt:
        typer.echo()
