"""Utility modules for the scorer."""

from .logger import setup_logger
from .warning_text import (
    WARNING_MESSAGES,
    describe_warning,
    format_points,
    format_rules,
    format_score_sheet,
)

__all__ = [
    "setup_logger",
    "WARNING_MESSAGES",
    "describe_warning",
    "format_points",
    "format_rules",
    "format_score_sheet",
]
