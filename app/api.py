"""HTTP route definitions for the service."""

from __future__ import annotations

import asyncio
from typing import AsyncIterator, Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import StreamingResponse

from app.schemas import (
    ChartPoint,
    ChartResponse,
    DashboardSnapshot,
    ReadingOut,
    ReadingsResponse,
    RunState,
    Stats,
    StatsDisplay,
)
from services.chart import chart_points, svg_path
from services.history import HistorySnapshot
from services.simulator import TemperatureSimulator, build_default_simulator
from settings import get_settings

router = APIRouter()


def get_simulator() -> TemperatureSimulator:
    return build_default_simulator()


def build_dashboard(
    simulator: TemperatureSimulator,
    history: Optional[HistorySnapshot] = None,
) -> DashboardSnapshot:
    if history is None:
        history = simulator.snapshot()
    summary = simulator.stats(history)
    return DashboardSnapshot(
        running=simulator.is_running,
        stats=Stats.from_summary(summary),
        display=StatsDisplay.from_summary(summary),
        readings=[ReadingOut.from_reading(reading) for reading in history],
    )


async def dashboard_events(
    simulator: TemperatureSimulator,
    limit: Optional[int] = None,
) -> AsyncIterator[DashboardSnapshot]:
    """Yield a dashboard snapshot now and after every history or run-state change.

    Stops after ``limit`` snapshots when given; subscriptions are dropped when
    the generator is closed.
    """
    loop = asyncio.get_running_loop()
    changes: asyncio.Queue[HistorySnapshot] = asyncio.Queue()

    def on_history(snapshot: HistorySnapshot) -> None:
        loop.call_soon_threadsafe(changes.put_nowait, snapshot)

    def on_running(_running: bool) -> None:
        loop.call_soon_threadsafe(changes.put_nowait, simulator.snapshot())

    unsubscribe_history = simulator.history.subscribe(on_history, replay=True)
    unsubscribe_running = simulator.running.subscribe(on_running)
    try:
        sent = 0
        while limit is None or sent < limit:
            history = await changes.get()
            yield build_dashboard(simulator, history)
            sent += 1
    finally:
        unsubscribe_history()
        unsubscribe_running()


@router.get(
    "/readings",
    response_model=ReadingsResponse,
    summary="Recent readings, newest first.",
)
async def list_readings(
    simulator: TemperatureSimulator = Depends(get_simulator),
) -> ReadingsResponse:
    return ReadingsResponse.from_history(simulator.snapshot())


@router.get(
    "/stats",
    response_model=Stats,
    summary="Current, average, minimum and maximum temperature.",
)
async def get_stats(
    simulator: TemperatureSimulator = Depends(get_simulator),
) -> Stats:
    return Stats.from_summary(simulator.stats())


@router.get(
    "/state",
    response_model=RunState,
    summary="Whether the simulation is generating readings.",
)
async def get_state(
    simulator: TemperatureSimulator = Depends(get_simulator),
) -> RunState:
    return RunState(running=simulator.is_running)


@router.post(
    "/state/toggle",
    response_model=RunState,
    summary="Pause a running simulation or resume a paused one.",
)
async def toggle_state(
    simulator: TemperatureSimulator = Depends(get_simulator),
) -> RunState:
    return RunState(running=simulator.toggle_running())


@router.get(
    "/dashboard",
    response_model=DashboardSnapshot,
    summary="Run state, statistics and readings in one payload.",
)
async def get_dashboard(
    simulator: TemperatureSimulator = Depends(get_simulator),
) -> DashboardSnapshot:
    return build_dashboard(simulator)


@router.get(
    "/dashboard/stream",
    response_class=StreamingResponse,
    summary="Server-sent events carrying a dashboard snapshot on every change.",
)
async def stream_dashboard(
    limit: Optional[int] = Query(None, ge=1, description="Close the stream after this many events."),
    simulator: TemperatureSimulator = Depends(get_simulator),
) -> StreamingResponse:
    async def events() -> AsyncIterator[str]:
        async for snapshot in dashboard_events(simulator, limit):
            yield f"data: {snapshot.model_dump_json()}\n\n"

    return StreamingResponse(
        events(),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache"},
    )


@router.get(
    "/chart",
    response_model=ChartResponse,
    summary="Polyline vertices for the reading history.",
)
async def get_chart(
    width: Optional[float] = Query(None, gt=0, description="Canvas width."),
    height: Optional[float] = Query(None, gt=0, description="Canvas height."),
    simulator: TemperatureSimulator = Depends(get_simulator),
) -> ChartResponse:
    settings = get_settings()
    canvas_width = width if width is not None else settings.chart_width
    canvas_height = height if height is not None else settings.chart_height
    points = chart_points(simulator.snapshot(), canvas_width, canvas_height)
    return ChartResponse(
        width=canvas_width,
        height=canvas_height,
        points=[ChartPoint.from_point(point) for point in points],
        path=svg_path(points),
    )


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /ui for the dashboard and /health for service status."}
