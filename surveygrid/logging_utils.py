"""Mini README: Logging setup shared by the planner library, CLI and service.

Structure:
    * configure_root_logger - install the console handler and apply a level.
    * get_logger - module logger factory used at import time.

Library modules call ``get_logger(__name__)`` when imported, which installs
the console handler once at INFO. Entry points call
``configure_root_logger(settings.log_level)`` afterwards; an explicit level
is always applied to the root logger, even when the handler already exists.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: Optional[logging.Handler] = None


def _resolve_level(level: Union[int, str]) -> int:
    """Translate level names such as ``"debug"`` into logging constants."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Install the console handler once and set the root level when given.

    With ``level=None`` an existing configuration is left alone and a first
    installation defaults to INFO.
    """

    global _handler
    root_logger = logging.getLogger()
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(_handler)
        if level is None:
            root_logger.setLevel(logging.INFO)
    if level is not None:
        root_logger.setLevel(_resolve_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a named logger, making sure the console handler exists."""

    configure_root_logger()
    return logging.getLogger(name)
