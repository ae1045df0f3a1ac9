from __future__ import annotations
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.api import router
from app.web import router as web_router
from logging_config import configure_logging
from services.simulator import SimulationLoop, build_default_simulator
from settings import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    simulator = build_default_simulator()
    loop = SimulationLoop(simulator, interval=get_settings().tick_interval)
    app.state.simulation_loop = loop
    loop.start()
    try:
        yield
    finally:
        await loop.stop()
        build_default_simulator.cache_clear()


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Temperature Dashboard",
        description="Simulated temperature sensor feed with live statistics and chart.",
        version="0.1.0",
        lifespan=lifespan,
    )
    static_dir = Path(__file__).resolve().parent / "static"
    app.mount("/static", StaticFiles(directory=static_dir), name="static")
    app.include_router(router)
    app.include_router(web_router)
    return app

app = create_app()
