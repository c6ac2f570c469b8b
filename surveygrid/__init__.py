"""Mini README: Core package initializer for the survey grid planner.

The package turns an operator-drawn polygon into a boustrophedon survey
grid (``route_planning``) and encodes that grid as an ordered autopilot
mission (``mission``). Geodesic helpers live in ``geo``. Convenience
re-exports below let callers reach the main entry points without knowing
the module layout.
"""

from .errors import DegenerateInputError, InvalidParameterError, SurveyGridError
from .geo import GeoPoint
from .logging_utils import get_logger
from .mission import MissionCommand, MissionEncoder
from .route_planning import GridSurveyGenerator, GridSurveyResult, GridWaypoint, SurveyParams

__all__ = [
    "DegenerateInputError",
    "GeoPoint",
    "GridSurveyGenerator",
    "GridSurveyResult",
    "GridWaypoint",
    "InvalidParameterError",
    "MissionCommand",
    "MissionEncoder",
    "SurveyGridError",
    "SurveyParams",
    "get_logger",
]
