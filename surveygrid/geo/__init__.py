"""Mini README: Geodesic maths for survey planning.

Re-exports the ``GeoPoint`` value type and the pure helper functions from
``geomath`` so planners can import them from one place.
"""

from .geomath import (
    GeoPoint,
    Polygon,
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

__all__ = [
    "GeoPoint",
    "Polygon",
    "bearing_degrees",
    "bounding_box",
    "centroid",
    "distance_meters",
    "format_area",
    "longest_edge_bearing",
    "offset",
    "point_in_polygon",
    "polygon_area_square_meters",
]
