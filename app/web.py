from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.api import build_dashboard, get_simulator
from services.chart import chart_points, svg_path
from services.simulator import TemperatureSimulator
from settings import get_settings


templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))


router = APIRouter(include_in_schema=False)


@router.get("/ui", name="ui_index", response_class=HTMLResponse)
async def ui_index(
    request: Request,
    simulator: TemperatureSimulator = Depends(get_simulator),
) -> HTMLResponse:
    settings = get_settings()
    history = simulator.snapshot()
    dashboard = build_dashboard(simulator, history)
    points = chart_points(history, settings.chart_width, settings.chart_height)
    return templates.TemplateResponse(
        request,
        "ui/index.html",
        {
            "dashboard": dashboard,
            "chart_width": settings.chart_width,
            "chart_height": settings.chart_height,
            "chart_path": svg_path(points),
        },
    )


@router.post("/ui/toggle", name="ui_toggle")
async def ui_toggle(
    request: Request,
    simulator: TemperatureSimulator = Depends(get_simulator),
) -> RedirectResponse:
    simulator.toggle_running()
    return RedirectResponse(
        url=request.url_for("ui_index"),
        status_code=status.HTTP_303_SEE_OTHER,
    )
