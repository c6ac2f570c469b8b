"""Mini README: FastAPI service exposing the survey grid planner.

Structure:
    * create_application - application factory wiring the planning routes.

Routes accept the survey polygon as GeoJSON in a form field, which is what
the map front-end posts after the operator finishes drawing. Survey
parameters fall back to the configured defaults when omitted. Invalid input
is rejected with HTTP 400 before any planning work happens.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse

from ..configuration import get_settings
from ..geo import GeoPoint
from ..logging_utils import get_logger
from ..mission import MissionEncoder
from ..route_planning import GridSurveyGenerator, GridSurveyResult, SurveyParams
from ..utils.geojson import grid_lines_to_geojson, polygon_from_geojson

LOGGER = get_logger(__name__)

EMPTY_MESSAGE = "No coverage possible for the supplied area."


def create_application() -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = get_settings()
    app = FastAPI(title="Survey Grid Planner", version="0.1.0")
    generator = GridSurveyGenerator(
        clip_samples=settings.clip_samples, max_lines=settings.max_sweep_lines
    )
    encoder = MissionEncoder(
        home_altitude=settings.home_altitude,
        takeoff_altitude=settings.takeoff_altitude,
    )

    def build_params(
        line_spacing: Optional[float],
        grid_angle: float,
        speed: Optional[float],
        altitude: Optional[float],
        include_speed_commands: bool,
    ) -> SurveyParams:
        return SurveyParams(
            line_spacing=settings.default_line_spacing if line_spacing is None else line_spacing,
            grid_angle_degrees=grid_angle,
            speed=settings.default_speed if speed is None else speed,
            altitude=settings.default_altitude if altitude is None else altitude,
            include_speed_commands=include_speed_commands,
        )

    def plan(area_geojson: str, params: SurveyParams) -> GridSurveyResult:
        try:
            polygon = polygon_from_geojson(area_geojson)
            return generator.generate_grid_survey(polygon, params)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error

    @app.get("/health")
    async def health() -> Dict[str, str]:
        """Liveness check for deployments."""

        return {"status": "ok", "environment": settings.environment}

    @app.post("/grid-survey")
    async def grid_survey(
        area_geojson: str = Form(...),
        line_spacing: Optional[float] = Form(None),
        grid_angle: float = Form(0.0),
        speed: Optional[float] = Form(None),
        altitude: Optional[float] = Form(None),
        include_speed_commands: bool = Form(True),
    ) -> JSONResponse:
        """Return the generated grid and its display overlay."""

        params = build_params(line_spacing, grid_angle, speed, altitude, include_speed_commands)
        result = plan(area_geojson, params)
        payload: Dict[str, Any] = {
            "result": result.as_dict(),
            "grid_lines": grid_lines_to_geojson(result),
        }
        if result.is_empty:
            payload["message"] = EMPTY_MESSAGE
        LOGGER.info("Grid survey request produced %s lines", result.num_lines)
        return JSONResponse(payload)

    @app.post("/mission")
    async def mission(
        area_geojson: str = Form(...),
        home_lat: float = Form(...),
        home_lon: float = Form(...),
        line_spacing: Optional[float] = Form(None),
        grid_angle: float = Form(0.0),
        speed: Optional[float] = Form(None),
        altitude: Optional[float] = Form(None),
        include_speed_commands: bool = Form(True),
        cruise_speed: Optional[float] = Form(None),
    ) -> JSONResponse:
        """Plan the grid and encode it as an ordered mission command list."""

        params = build_params(line_spacing, grid_angle, speed, altitude, include_speed_commands)
        result = plan(area_geojson, params)
        if cruise_speed is None:
            cruise_speed = params.speed if params.speed > 0 else settings.default_speed
        try:
            commands = encoder.encode(result, GeoPoint(home_lat, home_lon))
            estimated_minutes = encoder.estimate_duration_minutes(result, cruise_speed)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error

        payload: Dict[str, Any] = {
            "commands": [command.as_dict() for command in commands],
            "command_count": len(commands),
            "estimated_minutes": estimated_minutes,
            "polygon_area_label": result.polygon_area_label,
        }
        if result.is_empty:
            payload["message"] = EMPTY_MESSAGE
        LOGGER.info("Mission request encoded %s commands", len(commands))
        return JSONResponse(payload)

    return app
