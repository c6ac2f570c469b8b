"""Mini README: Utility helpers for the survey grid planner.

Currently exports the GeoJSON conversions used by the web interface and CLI
to read survey areas and hand grid lines back to the map.
"""

from .geojson import grid_lines_to_geojson, polygon_from_geojson

__all__ = ["grid_lines_to_geojson", "polygon_from_geojson"]
