"""Mini README: Boustrophedon grid survey generation.

Structure:
    * GridSurveyGenerator - turns a polygon and SurveyParams into a
      GridSurveyResult, plus a few planning helpers used by the map UI.

Algorithm outline:
    1. Fan parallel sweep lines out from the polygon centroid, spaced
       ``line_spacing`` metres apart and long enough (1.5x the larger
       bounding-box side) to cross the polygon at any angle.
    2. Clip each line by sampling it at ``clip_samples + 1`` evenly spaced
       points and keeping the first and last sample inside the polygon.
       Concavities thinner than one sample step can be missed.
    3. Fly even lines start-to-end and odd lines end-to-start.

A polygon with fewer than three vertices yields an empty result. Invalid
numbers are rejected with ``InvalidParameterError`` before any work starts,
as is a spacing that would need more than ``max_lines`` sweep lines.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

import numpy as np

from ..errors import InvalidParameterError
from ..geo import (
    GeoPoint,
    bounding_box,
    centroid,
    distance_meters,
    format_area,
    longest_edge_bearing,
    offset,
    point_in_polygon,
    polygon_area_square_meters,
)
from ..logging_utils import get_logger
from .models import GridLine, GridSurveyResult, GridWaypoint, SurveyParams

LOGGER = get_logger(__name__)

DEFAULT_CLIP_SAMPLES = 100
SWEEP_BUFFER_FACTOR = 1.5
MAX_SWEEP_LINES = 10_000


def _validate(polygon: Sequence[GeoPoint], params: SurveyParams) -> None:
    """Reject inputs that would make the sweep loop meaningless or unbounded."""

    numbers = {
        "line_spacing": params.line_spacing,
        "grid_angle_degrees": params.grid_angle_degrees,
        "speed": params.speed,
        "altitude": params.altitude,
    }
    for name, value in numbers.items():
        if not math.isfinite(value):
            raise InvalidParameterError(f"{name} must be a finite number, got {value!r}")
    if params.line_spacing <= 0:
        raise InvalidParameterError(
            f"line_spacing must be greater than zero, got {params.line_spacing!r}"
        )
    for index, vertex in enumerate(polygon):
        if not vertex.is_finite():
            raise InvalidParameterError(f"Polygon vertex {index} has a non-finite coordinate")


def _total_distance(waypoints: Sequence[GridWaypoint]) -> float:
    return sum(
        distance_meters(current.position, following.position)
        for current, following in zip(waypoints, waypoints[1:])
    )


class GridSurveyGenerator:
    """Generate lawn-mower survey patterns over arbitrary simple polygons."""

    def __init__(
        self,
        *,
        clip_samples: int = DEFAULT_CLIP_SAMPLES,
        max_lines: int = MAX_SWEEP_LINES,
    ) -> None:
        if clip_samples < 1:
            raise InvalidParameterError(f"clip_samples must be at least 1, got {clip_samples!r}")
        if max_lines < 1:
            raise InvalidParameterError(f"max_lines must be at least 1, got {max_lines!r}")
        self.clip_samples = clip_samples
        self.max_lines = max_lines
        self._fractions = np.arange(clip_samples + 1, dtype=float) / clip_samples
        LOGGER.debug("Initialised GridSurveyGenerator with clip_samples=%s", clip_samples)

    def generate_grid_survey(
        self, polygon: Sequence[GeoPoint], params: SurveyParams
    ) -> GridSurveyResult:
        """Build the sweep lines, waypoints and metrics for ``polygon``."""

        _validate(polygon, params)
        if len(polygon) < 3:
            LOGGER.warning(
                "Polygon has %s vertices; returning an empty grid survey", len(polygon)
            )
            return GridSurveyResult(polygon_area_label=format_area(polygon))

        center = centroid(polygon)
        southwest, northeast = bounding_box(polygon)
        width = distance_meters(southwest, GeoPoint(southwest.latitude, northeast.longitude))
        height = distance_meters(southwest, GeoPoint(northeast.latitude, southwest.longitude))

        if params.grid_angle_degrees == 0:
            angle_degrees = longest_edge_bearing(polygon)
        else:
            angle_degrees = params.grid_angle_degrees
        angle = math.radians(angle_degrees)

        max_dimension = max(width, height) * SWEEP_BUFFER_FACTOR
        line_count = math.ceil(max_dimension / params.line_spacing)
        if line_count > self.max_lines:
            raise InvalidParameterError(
                f"line_spacing {params.line_spacing!r} m needs {line_count} sweep lines; "
                f"the limit is {self.max_lines}"
            )
        speed = params.speed if params.include_speed_commands and params.speed > 0 else None

        half_length = max_dimension / 2
        along_east = half_length * math.cos(angle)
        along_north = half_length * math.sin(angle)

        grid_lines: List[GridLine] = []
        waypoints: List[GridWaypoint] = []
        for index in range(line_count):
            line_offset = (index - line_count / 2) * params.line_spacing
            perp_east = line_offset * math.cos(angle + math.pi / 2)
            perp_north = line_offset * math.sin(angle + math.pi / 2)

            line_start = offset(center, perp_east - along_east, perp_north - along_north)
            line_end = offset(center, perp_east + along_east, perp_north + along_north)

            clipped = self._clip_to_polygon(line_start, line_end, polygon)
            if clipped is None:
                LOGGER.debug("Sweep line %s does not cross the polygon; skipping", index)
                continue

            grid_lines.append(clipped)
            first, last = clipped if index % 2 == 0 else (clipped[1], clipped[0])
            waypoints.append(
                GridWaypoint(
                    position=first,
                    altitude=params.altitude,
                    speed=speed,
                    is_line_start=True,
                    line_index=index,
                )
            )
            waypoints.append(
                GridWaypoint(
                    position=last,
                    altitude=params.altitude,
                    speed=speed,
                    is_line_end=True,
                    line_index=index,
                )
            )

        total_distance = _total_distance(waypoints)
        estimated_time = total_distance / params.speed if params.speed > 0 else 0.0
        LOGGER.info(
            "Generated grid survey: %s of %s lines kept, %s waypoints, %.1f m",
            len(grid_lines),
            line_count,
            len(waypoints),
            total_distance,
        )
        return GridSurveyResult(
            waypoints=tuple(waypoints),
            grid_lines=tuple(grid_lines),
            total_distance=total_distance,
            estimated_time=estimated_time,
            num_lines=len(grid_lines),
            polygon_area_label=format_area(polygon),
        )

    def _clip_to_polygon(
        self, line_start: GeoPoint, line_end: GeoPoint, polygon: Sequence[GeoPoint]
    ) -> Optional[GridLine]:
        """Return the first and last sampled points inside the polygon."""

        lats = line_start.latitude + self._fractions * (line_end.latitude - line_start.latitude)
        lons = line_start.longitude + self._fractions * (line_end.longitude - line_start.longitude)

        samples = (GeoPoint(float(lat), float(lon)) for lat, lon in zip(lats, lons))
        inside = [point for point in samples if point_in_polygon(point, polygon)]
        if not inside:
            return None
        return inside[0], inside[-1]

    def generate_rectangular_survey(
        self, center: GeoPoint, width: float, height: float, params: SurveyParams
    ) -> GridSurveyResult:
        """Survey a width x height metre rectangle centred on ``center``."""

        half_width = width / 2
        half_height = height / 2
        polygon = [
            offset(center, -half_width, -half_height),
            offset(center, half_width, -half_height),
            offset(center, half_width, half_height),
            offset(center, -half_width, half_height),
        ]
        return self.generate_grid_survey(polygon, params)

    def calculate_optimal_grid_angle(self, polygon: Sequence[GeoPoint]) -> float:
        """Angle perpendicular to the longest edge, in degrees."""

        if len(polygon) < 3:
            return 0.0
        return (longest_edge_bearing(polygon) + 90) % 360

    def estimate_coverage(self, polygon: Sequence[GeoPoint], line_spacing: float) -> float:
        """Rough coverage percentage for a given spacing.

        This ignores sensor footprint entirely; it only shrinks linearly as
        spacing grows and is clamped to [0, 100].
        """

        if polygon_area_square_meters(polygon) <= 0:
            return 0.0
        return min(max(100.0 * (1.0 - line_spacing / 100.0), 0.0), 100.0)
