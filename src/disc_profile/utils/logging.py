"""Logging configuration for DISC Profile."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from disc_profile.config import get_settings

# Shared console for rich output
console = Console()

PACKAGE_LOGGER = "disc_profile"

# Libraries that log every request or statement at INFO
QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine")

_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Route package logs through a rich handler at the configured level.

    Safe to call more than once: the handler is attached a single time and
    later calls only change the level, so each CLI command can apply the
    current LOG_LEVEL.

    Args:
        level: Logging level name (uses LOG_LEVEL if None). Unknown names
            fall back to INFO.

    Returns:
        The package logger
    """
    log_level = _resolve_level(level or get_settings().log_level)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        package_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))

    return package_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a cached logger, the package logger when no name is given."""
    name = name or PACKAGE_LOGGER
    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)
    return _loggers[name]
