"""Null presenter for testing (no output)."""

from sd_efficiency.models import (
    AggregateSnapshot,
    CompositionSlice,
    EfficiencyHealth,
    Entry,
    TrendPoint,
)


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_entries(self, entries: list[Entry]) -> None:
        """Display the logged entries (no-op)."""
        pass

    def show_summary(
        self,
        snapshot: AggregateSnapshot,
        health: EfficiencyHealth,
        composition: list[CompositionSlice],
        trend: list[TrendPoint],
    ) -> None:
        """Display aggregate metrics and chart data (no-op)."""
        pass
