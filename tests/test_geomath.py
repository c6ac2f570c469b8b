"""Mini README: Tests for the geodesic helpers.

Covers haversine distance, bearings, tangent-plane offsets, polygon
summaries, ray casting and the area label thresholds.
"""

from __future__ import annotations

import math
import re

import pytest

from surveygrid.errors import DegenerateInputError
from surveygrid.geo import (
    GeoPoint,
    bearing_degrees,
    bounding_box,
    centroid,
    distance_meters,
    format_area,
    longest_edge_bearing,
    offset,
    point_in_polygon,
    polygon_area_square_meters,
)

SQUARE = [
    GeoPoint(0.0, 0.0),
    GeoPoint(0.0, 0.001),
    GeoPoint(0.001, 0.001),
    GeoPoint(0.001, 0.0),
]


def test_distance_of_one_degree_along_equator() -> None:
    expected = 6_371_000.0 * math.pi / 180
    assert distance_meters(GeoPoint(0, 0), GeoPoint(0, 1)) == pytest.approx(expected, rel=1e-9)
    assert distance_meters(GeoPoint(10, 10), GeoPoint(10, 10)) == 0.0


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        (GeoPoint(1, 0), 0.0),
        (GeoPoint(0, 1), 90.0),
        (GeoPoint(-1, 0), 180.0),
        (GeoPoint(0, -1), 270.0),
    ],
)
def test_bearing_is_normalised(target: GeoPoint, expected: float) -> None:
    assert bearing_degrees(GeoPoint(0, 0), target) == pytest.approx(expected)


def test_offset_uses_small_angle_approximation() -> None:
    moved = offset(GeoPoint(0.0, 0.0), 0.0, 111_111.0)
    assert moved == GeoPoint(1.0, 0.0)

    moved_east = offset(GeoPoint(60.0, 10.0), 55_555.5, 0.0)
    assert moved_east.latitude == 60.0
    assert moved_east.longitude == pytest.approx(11.0)


def test_centroid_and_bounding_box() -> None:
    center = centroid(SQUARE)
    assert center.latitude == pytest.approx(0.0005)
    assert center.longitude == pytest.approx(0.0005)
    southwest, northeast = bounding_box(SQUARE)
    assert southwest == GeoPoint(0.0, 0.0)
    assert northeast == GeoPoint(0.001, 0.001)


def test_centroid_of_empty_polygon_is_degenerate() -> None:
    with pytest.raises(DegenerateInputError):
        centroid([])


def test_bounding_box_of_empty_polygon_is_degenerate() -> None:
    with pytest.raises(DegenerateInputError):
        bounding_box([])


def test_longest_edge_bearing() -> None:
    wide = [
        GeoPoint(0.0, 0.0),
        GeoPoint(0.0, 0.002),
        GeoPoint(0.001, 0.002),
        GeoPoint(0.001, 0.0),
    ]
    assert longest_edge_bearing(wide) == pytest.approx(90.0)
    assert longest_edge_bearing([GeoPoint(0, 0)]) == 0.0


def test_point_in_polygon() -> None:
    assert point_in_polygon(GeoPoint(0.0005, 0.0005), SQUARE)
    assert not point_in_polygon(GeoPoint(0.002, 0.0005), SQUARE)
    assert not point_in_polygon(GeoPoint(0.0005, 0.0005), SQUARE[:2])


def test_polygon_area_is_winding_independent() -> None:
    side = 6_371_009.0 * math.radians(0.001)
    area = polygon_area_square_meters(SQUARE)
    assert area == pytest.approx(side * side, rel=1e-3)
    assert polygon_area_square_meters(list(reversed(SQUARE))) == pytest.approx(area)
    assert polygon_area_square_meters(SQUARE[:2]) == 0.0


def test_format_area_thresholds() -> None:
    triangle = [GeoPoint(0.0, 0.0), GeoPoint(0.0, 0.0005), GeoPoint(0.0005, 0.0)]
    assert re.fullmatch(r"\d{1,3}(,\d{3})* ft²", format_area(triangle))
    assert format_area(SQUARE) == "3.1 acres"

    large = [GeoPoint(0, 0), GeoPoint(0, 1), GeoPoint(1, 1), GeoPoint(1, 0)]
    assert re.fullmatch(r"\d+\.\d mi²", format_area(large))
    assert format_area([]) == "0 ft²"
