"""Logging configuration for the forum engine."""

import logging
import sys

import logfire

from forum.config import Settings

# Libraries whose INFO output drowns out the engine's own records
_QUIET_LOGGERS = ("dishka",)


def _level_for(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the engine.

    Records go to stdout and are also forwarded to logfire, so library
    logs end up next to the engine's spans.

    Args:
        settings: Application settings
    """
    level = _level_for(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout), logfire.LogfireLoggingHandler()],
        force=True,
    )

    logging.getLogger("forum").setLevel(level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
