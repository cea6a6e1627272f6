"""Display formatting for hours, percentages and timestamps."""

from datetime import datetime

from sd_efficiency.models import EfficiencyHealth

PLACEHOLDER = "---"

HEALTH_LABELS = {
    EfficiencyHealth.HEALTHY: "Healthy",
    EfficiencyHealth.FAIR: "Fair",
    EfficiencyHealth.POOR: "Poor",
}


def format_hours(hours: float) -> str:
    """Format hours with one decimal, e.g. ``24.0h``."""
    return f"{hours:.1f}h"


def format_percent(value: float) -> str:
    """Format a percentage with two decimals, e.g. ``91.67%``."""
    return f"{value:.2f}%"


def format_date(timestamp_ms: int) -> str:
    """Local calendar date of an epoch-millisecond timestamp."""
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%Y-%m-%d")


def format_time(timestamp_ms: int) -> str:
    """Local hour and minute of an epoch-millisecond timestamp."""
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%H:%M")


def format_health(health: EfficiencyHealth) -> str:
    return HEALTH_LABELS[health]
