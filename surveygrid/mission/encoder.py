"""Mini README: Encode grid survey results as ordered mission commands.

Structure:
    * MissionEncoder - builds HOME, TAKEOFF, speed changes, waypoints and RTL.

Emitted order:
    HOME (seq 0, current), TAKEOFF, [CHANGE_SPEED], WAYPOINT, WAYPOINT, ...,
    [CHANGE_SPEED], WAYPOINT, ..., RETURN_TO_LAUNCH

A speed change precedes the first survey waypoint and the start of every
later sweep line, at most once per line, and only when the waypoint carries
a speed. The encoder depends on the result types only, never on the
generator.
"""

from __future__ import annotations

import math
from typing import List, Optional

from ..errors import InvalidParameterError
from ..geo import GeoPoint
from ..logging_utils import get_logger
from ..route_planning.models import GridSurveyResult, GridWaypoint
from .commands import (
    THROTTLE_NO_CHANGE,
    CommandKind,
    MissionCommand,
    SpeedType,
    encode_coordinate,
)

LOGGER = get_logger(__name__)

SETUP_MINUTES = 2.0
RTL_MINUTES = 1.0


class MissionEncoder:
    """Convert a GridSurveyResult into an uplink-ready command list."""

    def __init__(self, *, home_altitude: float = 10.0, takeoff_altitude: float = 15.0) -> None:
        self.home_altitude = home_altitude
        self.takeoff_altitude = takeoff_altitude

    def encode(self, result: GridSurveyResult, home: GeoPoint) -> List[MissionCommand]:
        """Return commands with contiguous sequence numbers starting at 0."""

        if not home.is_finite():
            raise InvalidParameterError(f"Home position must be finite, got {home!r}")

        commands: List[MissionCommand] = []

        def emit(**fields) -> None:
            commands.append(MissionCommand(seq=len(commands), **fields))

        home_x, home_y = encode_coordinate(home.latitude), encode_coordinate(home.longitude)
        emit(command=CommandKind.WAYPOINT, current=True, x=home_x, y=home_y, z=self.home_altitude)
        emit(command=CommandKind.TAKEOFF, x=home_x, y=home_y, z=self.takeoff_altitude)

        last_line_index: Optional[int] = None
        first_waypoint = True
        for waypoint in result.waypoints:
            if first_waypoint:
                if waypoint.speed is not None:
                    emit(**self._speed_fields(waypoint.speed))
                first_waypoint = False
            elif (
                waypoint.is_line_start
                and waypoint.speed is not None
                and waypoint.line_index != last_line_index
            ):
                emit(**self._speed_fields(waypoint.speed))
                last_line_index = waypoint.line_index
            emit(**self._waypoint_fields(waypoint))

        emit(command=CommandKind.RETURN_TO_LAUNCH)
        LOGGER.info(
            "Encoded mission with %s commands from %s survey waypoints",
            len(commands),
            len(result.waypoints),
        )
        return commands

    @staticmethod
    def _speed_fields(speed: float) -> dict:
        return {
            "command": CommandKind.CHANGE_SPEED,
            "param1": float(SpeedType.GROUND_SPEED),
            "param2": speed,
            "param3": THROTTLE_NO_CHANGE,
        }

    @staticmethod
    def _waypoint_fields(waypoint: GridWaypoint) -> dict:
        return {
            "command": CommandKind.WAYPOINT,
            "x": encode_coordinate(waypoint.position.latitude),
            "y": encode_coordinate(waypoint.position.longitude),
            "z": waypoint.altitude,
        }

    def estimate_duration_minutes(self, result: GridSurveyResult, cruise_speed: float = 10.0) -> float:
        """Survey time at ``cruise_speed`` plus fixed setup and RTL allowances."""

        if not math.isfinite(cruise_speed) or cruise_speed <= 0:
            raise InvalidParameterError(
                f"cruise_speed must be a positive number, got {cruise_speed!r}"
            )
        return (result.total_distance / cruise_speed) / 60 + SETUP_MINUTES + RTL_MINUTES

    def count_commands(self, result: GridSurveyResult) -> int:
        """Number of commands ``encode`` will emit for ``result``."""

        speed_changes = sum(
            1 for waypoint in result.waypoints if waypoint.is_line_start and waypoint.speed is not None
        )
        return 2 + len(result.waypoints) + speed_changes + 1
