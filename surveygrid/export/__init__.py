"""Mini README: Export utilities for planned missions.

Exposes helpers that write encoded missions to formats ground stations can
open, currently the QGroundControl ``QGC WPL 110`` waypoint file.
"""

from .mission_file import MissionFileExporter

__all__ = ["MissionFileExporter"]
