"""Mini README: Geodesic helpers used by the grid planner.

Structure:
    * GeoPoint - immutable latitude/longitude pair in decimal degrees.
    * distance_meters / bearing_degrees - haversine distance and initial bearing.
    * offset - move a point by east/north metres on a local tangent plane.
    * centroid / bounding_box / longest_edge_bearing - polygon summaries.
    * point_in_polygon - even-odd ray casting in (lon, lat) space.
    * polygon_area_square_meters / format_area - spherical area and its label.

All functions are pure. Polygons are plain sequences of ``GeoPoint`` treated
as closed rings. The approximations here (111,111 m per degree, vertex-mean
centroid) hold at field-survey scales and degrade towards the poles.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from ..errors import DegenerateInputError

EARTH_RADIUS_M = 6_371_000.0
AREA_EARTH_RADIUS_M = 6_371_009.0
METERS_PER_DEGREE_LAT = 111_111.0

SQ_FEET_PER_SQ_METER = 10.7639
SQ_FEET_PER_ACRE = 43_560.0
ACRES_PER_SQ_MILE = 640.0
SQ_FEET_THRESHOLD = 21_780.0
ACRE_THRESHOLD = 640.0


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """WGS84 position in decimal degrees, without altitude."""

    latitude: float
    longitude: float

    def is_finite(self) -> bool:
        return math.isfinite(self.latitude) and math.isfinite(self.longitude)

    def as_dict(self) -> Dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}

    @classmethod
    def from_dict(cls, payload: Dict[str, float]) -> "GeoPoint":
        return cls(latitude=float(payload["latitude"]), longitude=float(payload["longitude"]))


Polygon = Sequence[GeoPoint]


def distance_meters(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance using the haversine formula."""

    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def bearing_degrees(origin: GeoPoint, target: GeoPoint) -> float:
    """Initial bearing from ``origin`` to ``target`` in [0, 360)."""

    lat1 = math.radians(origin.latitude)
    lat2 = math.radians(target.latitude)
    d_lon = math.radians(target.longitude - origin.longitude)

    y = math.sin(d_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)
    return (math.degrees(math.atan2(y, x)) + 360) % 360


def offset(point: GeoPoint, east_meters: float, north_meters: float) -> GeoPoint:
    """Displace ``point`` using the small-angle approximation."""

    d_lat = north_meters / METERS_PER_DEGREE_LAT
    d_lon = east_meters / (METERS_PER_DEGREE_LAT * math.cos(math.radians(point.latitude)))
    return GeoPoint(point.latitude + d_lat, point.longitude + d_lon)


def centroid(polygon: Polygon) -> GeoPoint:
    """Arithmetic mean of the vertices (not area weighted)."""

    if not polygon:
        raise DegenerateInputError("Cannot compute the centroid of an empty polygon")
    count = len(polygon)
    return GeoPoint(
        sum(point.latitude for point in polygon) / count,
        sum(point.longitude for point in polygon) / count,
    )


def bounding_box(polygon: Polygon) -> Tuple[GeoPoint, GeoPoint]:
    """Return the (southwest, northeast) corners."""

    if not polygon:
        raise DegenerateInputError("Cannot compute the bounding box of an empty polygon")
    lats = [point.latitude for point in polygon]
    lons = [point.longitude for point in polygon]
    return GeoPoint(min(lats), min(lons)), GeoPoint(max(lats), max(lons))


def longest_edge_bearing(polygon: Polygon) -> float:
    """Bearing of the longest edge of the closed ring, 0 when under 2 vertices."""

    if len(polygon) < 2:
        return 0.0

    max_distance = 0.0
    bearing = 0.0
    for index, current in enumerate(polygon):
        following = polygon[(index + 1) % len(polygon)]
        distance = distance_meters(current, following)
        if distance > max_distance:
            max_distance = distance
            bearing = bearing_degrees(current, following)
    return bearing


def point_in_polygon(point: GeoPoint, polygon: Polygon) -> bool:
    """Even-odd ray casting; points exactly on an edge may go either way."""

    if len(polygon) < 3:
        return False

    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i].longitude, polygon[i].latitude
        xj, yj = polygon[j].longitude, polygon[j].latitude
        if (yi > point.latitude) != (yj > point.latitude) and point.longitude < (xj - xi) * (
            point.latitude - yi
        ) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def _polar_triangle_area(tan1: float, lon1: float, tan2: float, lon2: float) -> float:
    delta_lon = lon1 - lon2
    t = tan1 * tan2
    return 2 * math.atan2(t * math.sin(delta_lon), 1 + t * math.cos(delta_lon))


def polygon_area_square_meters(polygon: Polygon) -> float:
    """Spherical-excess area of the ring, independent of winding order."""

    if len(polygon) < 3:
        return 0.0

    total = 0.0
    previous = polygon[-1]
    prev_tan = math.tan((math.pi / 2 - math.radians(previous.latitude)) / 2)
    prev_lon = math.radians(previous.longitude)
    for point in polygon:
        tan_lat = math.tan((math.pi / 2 - math.radians(point.latitude)) / 2)
        lon = math.radians(point.longitude)
        total += _polar_triangle_area(tan_lat, lon, prev_tan, prev_lon)
        prev_tan, prev_lon = tan_lat, lon
    return abs(total * AREA_EARTH_RADIUS_M * AREA_EARTH_RADIUS_M)


def format_area(polygon: Polygon) -> str:
    """Human label in ft², acres or mi² depending on size."""

    if len(polygon) < 3:
        return "0 ft²"

    square_feet = polygon_area_square_meters(polygon) * SQ_FEET_PER_SQ_METER
    if square_feet < SQ_FEET_THRESHOLD:
        return f"{square_feet:,.0f} ft²"
    acres = square_feet / SQ_FEET_PER_ACRE
    if acres < ACRE_THRESHOLD:
        return f"{acres:.1f} acres"
    return f"{acres / ACRES_PER_SQ_MILE:.1f} mi²"
