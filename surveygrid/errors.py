"""Mini README: Exception types raised by the survey grid planner.

Structure:
    * SurveyGridError - common base so callers can catch planner failures.
    * InvalidParameterError - rejected numeric input (spacing, NaN, speed).
    * DegenerateInputError - polygon too small for the requested operation.

Both concrete errors subclass ``ValueError`` so interface layers that already
translate ``ValueError`` into user-facing messages keep working unchanged.
"""

from __future__ import annotations


class SurveyGridError(Exception):
    """Base class for planner errors."""


class InvalidParameterError(SurveyGridError, ValueError):
    """Raised before any computation when an input value is unusable."""


class DegenerateInputError(SurveyGridError, ValueError):
    """Raised by geometry helpers that need at least one polygon vertex."""
