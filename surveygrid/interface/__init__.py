"""Mini README: Interactive interfaces for the survey grid planner.

Exports the FastAPI application factory used by the map front-end. The
Typer CLI at the repository root wraps this factory for local serving.
"""

from .web_app import create_application

__all__ = ["create_application"]
