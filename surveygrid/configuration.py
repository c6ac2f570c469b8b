"""Mini README: Centralised configuration for the survey grid planner.

Structure:
    * SurveyGridSettings - Pydantic settings model for the CLI and web service.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Outer surfaces call ``get_settings`` to pick defaults for survey
    parameters, the clipping sample count and the service bind address.
    Values come from ``SURVEYGRID_*`` environment variables or a ``.env``
    file. The planning core never reads settings directly; it receives
    explicit arguments.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SurveyGridSettings(BaseSettings):
    """Runtime configuration for the planner service and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="SURVEYGRID_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label reported by the health endpoint.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the CLI entry points.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the planning service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the planning service exposes.",
        ge=1,
        le=65535,
    )
    default_line_spacing: float = Field(
        30.0,
        description="Distance in metres between sweep lines when none is supplied.",
        gt=0,
    )
    default_altitude: float = Field(
        60.0,
        description="Survey altitude in metres relative to home.",
    )
    default_speed: float = Field(
        10.0,
        description="Survey ground speed in m/s. Zero disables speed commands.",
    )
    clip_samples: int = Field(
        100,
        description="Number of intervals sampled when clipping a sweep line to the polygon.",
        ge=1,
    )
    max_sweep_lines: int = Field(
        10_000,
        description="Largest number of sweep lines a single plan may request.",
        ge=1,
    )
    home_altitude: float = Field(10.0, description="Altitude of the home mission item.")
    takeoff_altitude: float = Field(15.0, description="Altitude of the takeoff mission item.")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        """Accept lower-case level names and reject unknown ones."""

        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache()
def get_settings() -> SurveyGridSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SurveyGridSettings()
