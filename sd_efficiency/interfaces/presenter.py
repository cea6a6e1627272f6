"""Presenter protocol for output abstraction."""

from typing import Protocol

from sd_efficiency.models import (
    AggregateSnapshot,
    CompositionSlice,
    EfficiencyHealth,
    Entry,
    TrendPoint,
)


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, GUI, etc).

    This protocol abstracts all output operations, allowing the same
    session logic to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_entries(self, entries: list[Entry]) -> None:
        """Display the logged entries, newest first.

        Args:
            entries: Entries in display order
        """
        ...

    def show_summary(
        self,
        snapshot: AggregateSnapshot,
        health: EfficiencyHealth,
        composition: list[CompositionSlice],
        trend: list[TrendPoint],
    ) -> None:
        """Display aggregate metrics and chart data.

        Args:
            snapshot: Aggregate statistics over all entries
            health: Health band of the average efficiency
            composition: Good/bad split for the proportion chart
            trend: Chronological efficiency series
        """
        ...
