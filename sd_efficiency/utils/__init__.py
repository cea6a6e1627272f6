"""Utility functions for SD Efficiency."""

from .file_utils import ensure_directory
from .formatting import (
    PLACEHOLDER,
    format_date,
    format_health,
    format_hours,
    format_percent,
    format_time,
)
from .logging_utils import configure_logging

__all__ = [
    "ensure_directory",
    "configure_logging",
    "PLACEHOLDER",
    "format_hours",
    "format_percent",
    "format_date",
    "format_time",
    "format_health",
]
