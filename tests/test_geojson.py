"""Mini README: Tests for the GeoJSON helpers.

Confirms survey polygons are read from Polygon and Feature payloads, that
invalid payloads raise ``ValueError`` and that grid lines render as
LineString features.
"""

from __future__ import annotations

import json

import pytest

from surveygrid.geo import GeoPoint
from surveygrid.route_planning import GridSurveyGenerator, SurveyParams
from surveygrid.utils.geojson import grid_lines_to_geojson, polygon_from_geojson

POLYGON = {
    "type": "Polygon",
    "coordinates": [
        [
            [0.0, 0.0],
            [0.001, 0.0],
            [0.001, 0.001],
            [0.0, 0.001],
            [0.0, 0.0],
        ]
    ],
}


def test_polygon_from_geojson_drops_closing_vertex() -> None:
    polygon = polygon_from_geojson(json.dumps(POLYGON))
    assert polygon == [
        GeoPoint(0.0, 0.0),
        GeoPoint(0.0, 0.001),
        GeoPoint(0.001, 0.001),
        GeoPoint(0.001, 0.0),
    ]


def test_polygon_from_feature() -> None:
    feature = {"type": "Feature", "geometry": POLYGON, "properties": {}}
    assert len(polygon_from_geojson(json.dumps(feature))) == 4


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        "{}",
        "[]",
        json.dumps({"type": "LineString", "coordinates": [[0, 0], [1, 1]]}),
        json.dumps({"type": "Polygon", "coordinates": []}),
        json.dumps({"type": "Polygon", "coordinates": [[["a"]]]}),
        json.dumps({"type": "Feature", "geometry": [1, 2]}),
        json.dumps({"type": "Feature", "geometry": "Polygon"}),
    ],
)
def test_invalid_payloads_are_rejected(payload: str) -> None:
    with pytest.raises(ValueError):
        polygon_from_geojson(payload)


def test_grid_lines_to_geojson() -> None:
    polygon = polygon_from_geojson(json.dumps(POLYGON))
    result = GridSurveyGenerator().generate_grid_survey(polygon, SurveyParams(line_spacing=30.0))

    collection = grid_lines_to_geojson(result)

    assert collection["type"] == "FeatureCollection"
    assert len(collection["features"]) == result.num_lines
    first = collection["features"][0]
    start, _ = result.grid_lines[0]
    assert first["geometry"]["type"] == "LineString"
    assert first["geometry"]["coordinates"][0] == [start.longitude, start.latitude]
    assert first["properties"]["line_number"] == 0
