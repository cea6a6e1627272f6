"""Aggregate statistics and chart views over the entry collection."""

from collections.abc import Iterable

from sd_efficiency.models import (
    AggregateSnapshot,
    CompositionSlice,
    EfficiencyHealth,
    Entry,
    TrendPoint,
)

DEFAULT_HEALTHY_THRESHOLD = 90.0
DEFAULT_FAIR_THRESHOLD = 80.0


class AggregateCalculator:
    """Compute summary totals and derived views (stateless service).

    Every method is a pure function of the entries passed in; nothing is
    cached between calls.
    """

    def __init__(
        self,
        healthy_threshold: float = DEFAULT_HEALTHY_THRESHOLD,
        fair_threshold: float = DEFAULT_FAIR_THRESHOLD,
    ):
        self.healthy_threshold = healthy_threshold
        self.fair_threshold = fair_threshold

    def summarize(self, entries: Iterable[Entry]) -> AggregateSnapshot:
        """Sum hours and average efficiency across all entries.

        The average is the mean of each entry's stored (already rounded)
        efficiency, not total_good / total_recording, so the two can differ.

        Args:
            entries: Entries in any order

        Returns:
            AggregateSnapshot; all zero for an empty collection
        """
        entries = list(entries)
        if not entries:
            return AggregateSnapshot()

        total_recording = sum(e.total_hours for e in entries)
        total_good = sum(e.good_hours for e in entries)
        total_bad = sum(e.bad_hours for e in entries)
        avg_efficiency = sum(e.efficiency for e in entries) / len(entries)

        return AggregateSnapshot(
            total_recording=total_recording,
            total_good=total_good,
            total_bad=total_bad,
            avg_efficiency=avg_efficiency,
            entry_count=len(entries),
        )

    def composition_view(self, entries: Iterable[Entry]) -> list[CompositionSlice]:
        """Good/bad split for a proportion chart, always ``[good, bad]``."""
        snapshot = self.summarize(entries)
        return [
            CompositionSlice(label="good", value=snapshot.total_good),
            CompositionSlice(label="bad", value=snapshot.total_bad),
        ]

    def trend_view(self, entries: Iterable[Entry]) -> list[TrendPoint]:
        """Chronological efficiency series, one point per entry.

        Entries are held newest first, so the series is the reversed
        collection. Points sharing a timestamp are kept as-is.
        """
        return [
            TrendPoint(timestamp=e.timestamp, efficiency=e.efficiency)
            for e in reversed(list(entries))
        ]

    def health(self, avg_efficiency: float) -> EfficiencyHealth:
        """Classify an average efficiency into a health band."""
        if avg_efficiency > self.healthy_threshold:
            return EfficiencyHealth.HEALTHY
        if avg_efficiency > self.fair_threshold:
            return EfficiencyHealth.FAIR
        return EfficiencyHealth.POOR
