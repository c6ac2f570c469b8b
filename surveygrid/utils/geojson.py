"""Mini README: GeoJSON helper utilities for survey areas and grid overlays.

This module validates polygon payloads drawn on the map and converts grid
lines back into GeoJSON for rendering. It has no web framework imports so it
can be reused by the CLI and tests.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

from ..geo import GeoPoint
from ..route_planning.models import GridSurveyResult


def polygon_from_geojson(area_geojson: str) -> List[GeoPoint]:
    """Return the outer ring of a GeoJSON polygon as ``GeoPoint`` vertices.

    The closing vertex is dropped when it repeats the first one, since
    polygons are treated as implicitly closed rings. Interior rings are
    ignored.
    """

    try:
        geojson = json.loads(area_geojson)
    except json.JSONDecodeError as error:
        raise ValueError("GeoJSON payload is invalid JSON") from error

    if not isinstance(geojson, dict):
        raise ValueError("GeoJSON payload must be an object")
    if geojson.get("type") == "Feature":
        geometry = geojson.get("geometry") or {}
    else:
        geometry = geojson

    if not isinstance(geometry, dict):
        raise ValueError("GeoJSON geometry must be an object")
    if geometry.get("type") != "Polygon":
        raise ValueError("Only polygon GeoJSON payloads are supported")

    coordinates = geometry.get("coordinates")
    if not coordinates:
        raise ValueError("Polygon coordinates are required")

    try:
        ring = [GeoPoint(latitude=float(point[1]), longitude=float(point[0])) for point in coordinates[0]]
    except (TypeError, IndexError, ValueError) as error:
        raise ValueError("Polygon coordinates must be [longitude, latitude] pairs") from error

    if len(ring) > 1 and ring[0] == ring[-1]:
        ring.pop()
    return ring


def grid_lines_to_geojson(result: GridSurveyResult) -> Dict[str, Any]:
    """Build a FeatureCollection with one LineString per surviving sweep line."""

    features = [
        {
            "type": "Feature",
            "geometry": {
                "type": "LineString",
                "coordinates": [
                    [start.longitude, start.latitude],
                    [end.longitude, end.latitude],
                ],
            },
            "properties": {"line_number": number},
        }
        for number, (start, end) in enumerate(result.grid_lines)
    ]
    return {"type": "FeatureCollection", "features": features}
