"""Logging setup for the expense tracker.

Library modules only call ``structlog.get_logger()`` and never configure
output themselves. Entrypoints (scripts, a host web app) call
``configure_logging`` once at startup.
"""

import logging
import sys
from typing import IO, Optional, Union

import structlog
from pydantic import ValidationError as PydanticValidationError

from .config import VALID_LOG_LEVELS, ExpenseTrackerConfig
from .exceptions import ConfigurationError

LOG_LEVEL_ENV_VAR = "EXPENSE_TRACKER_LOG_LEVEL"


def _configured_level() -> str:
    try:
        return ExpenseTrackerConfig().log_level
    except PydanticValidationError as e:
        raise ConfigurationError(
            "Invalid expense tracker configuration",
            config_key=LOG_LEVEL_ENV_VAR,
            expected=", ".join(sorted(VALID_LOG_LEVELS)),
            details={"errors": e.errors(include_url=False, include_context=False)},
        ) from e


def resolve_log_level(
    level: Optional[Union[int, str]] = None,
    config: Optional[ExpenseTrackerConfig] = None,
) -> int:
    """Resolve a level name or number to a ``logging`` level.

    Without an explicit ``level`` the configured ``log_level`` is used,
    taken from ``config`` or loaded from the environment and ``.env``.

    Raises:
        ConfigurationError: If the level name is not recognised.
    """
    if isinstance(level, int):
        return level
    if level is None:
        level = config.log_level if config is not None else _configured_level()

    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    if name not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log level: {level}",
            config_key=LOG_LEVEL_ENV_VAR,
            expected=", ".join(sorted(VALID_LOG_LEVELS)),
            actual=level,
        )
    return getattr(logging, name)


def configure_logging(
    level: Optional[Union[int, str]] = None,
    *,
    config: Optional[ExpenseTrackerConfig] = None,
    json_output: bool = False,
    stream: IO[str] = sys.stderr,
) -> int:
    """Configure structlog for the process and return the numeric level.

    Args:
        level: Level name or number. Overrides the configured level.
        config: Settings to read ``log_level`` from. Loaded from the
            environment when omitted.
        json_output: Render events as JSON lines instead of console text.
        stream: Where rendered events are written.
    """
    numeric_level = resolve_log_level(level, config)
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )
    return numeric_level
