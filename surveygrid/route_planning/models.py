"""Mini README: Value types exchanged by the grid generator and mission encoder.

Structure:
    * SurveyParams - numeric knobs supplied by the map UI.
    * GridWaypoint - one end of a sweep line, tagged with its line index.
    * GridSurveyResult - waypoints, display lines and summary metrics.

All types are frozen so a result can be handed to the encoder, the map and
the persistence layer without defensive copies. ``as_dict``/``from_dict``
give the persistence layer a lossless JSON-safe form.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..geo import GeoPoint

GridLine = Tuple[GeoPoint, GeoPoint]


@dataclass(frozen=True, slots=True)
class SurveyParams:
    """Inputs controlling sweep spacing, orientation, speed and altitude.

    ``grid_angle_degrees == 0`` asks the generator to align sweeps with the
    polygon's longest edge. ``hold_nose_position`` is accepted and stored but
    is not acted upon by the encoder.
    """

    line_spacing: float = 30.0
    grid_angle_degrees: float = 0.0
    speed: float = 10.0
    altitude: float = 60.0
    include_speed_commands: bool = True
    hold_nose_position: bool = False

    def as_dict(self) -> Dict[str, Any]:
        return {
            "line_spacing": self.line_spacing,
            "grid_angle_degrees": self.grid_angle_degrees,
            "speed": self.speed,
            "altitude": self.altitude,
            "include_speed_commands": self.include_speed_commands,
            "hold_nose_position": self.hold_nose_position,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "SurveyParams":
        return cls(
            line_spacing=float(payload["line_spacing"]),
            grid_angle_degrees=float(payload.get("grid_angle_degrees", 0.0)),
            speed=float(payload.get("speed", 0.0)),
            altitude=float(payload["altitude"]),
            include_speed_commands=bool(payload.get("include_speed_commands", True)),
            hold_nose_position=bool(payload.get("hold_nose_position", False)),
        )


@dataclass(frozen=True, slots=True)
class GridWaypoint:
    """Survey waypoint produced by the generator."""

    position: GeoPoint
    altitude: float
    speed: Optional[float] = None
    is_line_start: bool = False
    is_line_end: bool = False
    line_index: int = 0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position.as_dict(),
            "altitude": self.altitude,
            "speed": self.speed,
            "is_line_start": self.is_line_start,
            "is_line_end": self.is_line_end,
            "line_index": self.line_index,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "GridWaypoint":
        speed = payload.get("speed")
        return cls(
            position=GeoPoint.from_dict(payload["position"]),
            altitude=float(payload["altitude"]),
            speed=None if speed is None else float(speed),
            is_line_start=bool(payload.get("is_line_start", False)),
            is_line_end=bool(payload.get("is_line_end", False)),
            line_index=int(payload.get("line_index", 0)),
        )


@dataclass(frozen=True, slots=True)
class GridSurveyResult:
    """Outcome of one generation call.

    ``waypoints`` are in flight order. ``grid_lines`` hold the clipped
    (start, end) pairs before direction alternation and exist for display.
    ``num_lines`` counts only the sweep lines that survived clipping.
    """

    waypoints: Tuple[GridWaypoint, ...] = field(default_factory=tuple)
    grid_lines: Tuple[GridLine, ...] = field(default_factory=tuple)
    total_distance: float = 0.0
    estimated_time: float = 0.0
    num_lines: int = 0
    polygon_area_label: str = "0 ft²"

    @property
    def is_empty(self) -> bool:
        """True when no coverage was possible for the supplied area."""

        return not self.waypoints

    def as_dict(self) -> Dict[str, Any]:
        return {
            "waypoints": [waypoint.as_dict() for waypoint in self.waypoints],
            "grid_lines": [[start.as_dict(), end.as_dict()] for start, end in self.grid_lines],
            "total_distance": self.total_distance,
            "estimated_time": self.estimated_time,
            "num_lines": self.num_lines,
            "polygon_area_label": self.polygon_area_label,
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "GridSurveyResult":
        return cls(
            waypoints=tuple(GridWaypoint.from_dict(item) for item in payload.get("waypoints", [])),
            grid_lines=tuple(
                (GeoPoint.from_dict(start), GeoPoint.from_dict(end))
                for start, end in payload.get("grid_lines", [])
            ),
            total_distance=float(payload.get("total_distance", 0.0)),
            estimated_time=float(payload.get("estimated_time", 0.0)),
            num_lines=int(payload.get("num_lines", 0)),
            polygon_area_label=str(payload.get("polygon_area_label", "0 ft²")),
        )
