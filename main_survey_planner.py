"""Mini README: Entry point CLI for the survey grid planner.

This script exposes a Typer CLI with two commands:
    * serve - start the FastAPI planning service with uvicorn.
    * plan - plan a survey for a GeoJSON polygon file, print a summary and
      optionally write a QGroundControl waypoint file.

Defaults are drawn from ``SURVEYGRID_*`` environment variables when
available.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from surveygrid.configuration import get_settings
from surveygrid.export import MissionFileExporter
from surveygrid.geo import GeoPoint
from surveygrid.logging_utils import configure_root_logger
from surveygrid.mission import MissionEncoder
from surveygrid.route_planning import GridSurveyGenerator, SurveyParams
from surveygrid.utils.geojson import polygon_from_geojson

cli = typer.Typer(help="Plan boustrophedon survey grids and encode them as missions.")


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting survey planner on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "surveygrid.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def plan(
    polygon_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="GeoJSON polygon."),
    home_lat: float = typer.Option(..., help="Home latitude in degrees."),
    home_lon: float = typer.Option(..., help="Home longitude in degrees."),
    line_spacing: Optional[float] = typer.Option(None, help="Sweep line spacing in metres."),
    grid_angle: float = typer.Option(0.0, help="Sweep bearing in degrees, 0 for automatic."),
    speed: Optional[float] = typer.Option(None, help="Survey speed in m/s, 0 disables speed commands."),
    altitude: Optional[float] = typer.Option(None, help="Survey altitude in metres above home."),
    speed_commands: bool = typer.Option(
        True, "--speed-commands/--no-speed-commands", help="Insert speed change commands."
    ),
    output: Optional[Path] = typer.Option(None, help="Write a QGC WPL 110 waypoint file here."),
) -> None:
    """Plan a survey grid and encode it as a mission."""

    settings = get_settings()
    configure_root_logger(settings.log_level)

    params = SurveyParams(
        line_spacing=settings.default_line_spacing if line_spacing is None else line_spacing,
        grid_angle_degrees=grid_angle,
        speed=settings.default_speed if speed is None else speed,
        altitude=settings.default_altitude if altitude is None else altitude,
        include_speed_commands=speed_commands,
    )
    generator = GridSurveyGenerator(
        clip_samples=settings.clip_samples, max_lines=settings.max_sweep_lines
    )
    encoder = MissionEncoder(
        home_altitude=settings.home_altitude,
        takeoff_altitude=settings.takeoff_altitude,
    )

    try:
        polygon = polygon_from_geojson(polygon_file.read_text(encoding="utf-8"))
        result = generator.generate_grid_survey(polygon, params)
        commands = encoder.encode(result, GeoPoint(home_lat, home_lon))
    except ValueError as error:
        typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1) from error

    if result.is_empty:
        typer.echo("No coverage possible for the supplied area.", err=True)

    summary = {
        "num_lines": result.num_lines,
        "waypoints": len(result.waypoints),
        "total_distance_m": round(result.total_distance, 1),
        "estimated_time_s": round(result.estimated_time, 1),
        "area": result.polygon_area_label,
        "commands": len(commands),
    }
    if output is not None:
        summary["output"] = str(MissionFileExporter().export(commands, output))
    typer.echo(json.dumps(summary, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    cli()
