"""Mini README: Route planning subsystem for survey missions.

Exports the grid generator together with the value types it produces, so
the mission encoder and interfaces can depend on the result types without
importing the generator itself.
"""

from .grid_generator import GridSurveyGenerator
from .models import GridLine, GridSurveyResult, GridWaypoint, SurveyParams

__all__ = [
    "GridLine",
    "GridSurveyGenerator",
    "GridSurveyResult",
    "GridWaypoint",
    "SurveyParams",
]
