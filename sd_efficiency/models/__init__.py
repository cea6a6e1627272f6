"""Data models for SD Efficiency."""

from .entry import Entry, EntryCollection
from .stats import AggregateSnapshot, CompositionSlice, EfficiencyHealth, TrendPoint

__all__ = [
    "Entry",
    "EntryCollection",
    "AggregateSnapshot",
    "CompositionSlice",
    "TrendPoint",
    "EfficiencyHealth",
]
