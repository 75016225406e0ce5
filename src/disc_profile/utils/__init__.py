"""Utility modules for DISC Profile."""

from disc_profile.utils.logging import get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
]
