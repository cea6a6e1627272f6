"""Data models for aggregate statistics and chart views."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class AggregateSnapshot:
    """Summary statistics over the full entry collection."""

    total_recording: float = 0.0
    total_good: float = 0.0
    total_bad: float = 0.0
    avg_efficiency: float = 0.0  # mean of the per-entry efficiencies
    entry_count: int = 0

    @property
    def is_empty(self) -> bool:
        """Check if the snapshot was computed over no entries."""
        return self.entry_count == 0


@dataclass(frozen=True)
class CompositionSlice:
    """One segment of the good/bad composition chart."""

    label: str  # "good" or "bad"
    value: float


@dataclass(frozen=True)
class TrendPoint:
    """One point of the efficiency trend chart."""

    timestamp: int  # milliseconds since epoch
    efficiency: float


class EfficiencyHealth(Enum):
    """Health band of an average efficiency value."""

    HEALTHY = "healthy"
    FAIR = "fair"
    POOR = "poor"
