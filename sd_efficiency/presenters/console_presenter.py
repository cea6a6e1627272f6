"""Console presenter for CLI output."""

from sd_efficiency.models import (
    AggregateSnapshot,
    CompositionSlice,
    EfficiencyHealth,
    Entry,
    TrendPoint,
)
from sd_efficiency.utils import (
    format_date,
    format_health,
    format_hours,
    format_percent,
    format_time,
)

COMPOSITION_LABELS = {"good": "Useful (Good)", "bad": "Wasted (Bad)"}


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_entries(self, entries: list[Entry]) -> None:
        """Display the logged entries as a table, newest first."""
        print(f"\nTest Data Rows ({len(entries)} rows logged):")
        print("=" * 92)

        if not entries:
            print("No data entries yet. Use 'add' to log your first row.")
            return

        print(f"{'ID':<32} {'Date':<10} {'Time':<5} {'Total':>8} {'Good':>8} {'Bad':>8} {'Eff.':>8}")
        for entry in entries:
            print(
                f"{entry.id:<32} "
                f"{format_date(entry.timestamp):<10} "
                f"{format_time(entry.timestamp):<5} "
                f"{format_hours(entry.total_hours):>8} "
                f"{format_hours(entry.good_hours):>8} "
                f"{format_hours(entry.bad_hours):>8} "
                f"{format_percent(entry.efficiency):>8}"
            )

    def show_summary(
        self,
        snapshot: AggregateSnapshot,
        health: EfficiencyHealth,
        composition: list[CompositionSlice],
        trend: list[TrendPoint],
    ) -> None:
        """Display aggregate metrics and chart data."""
        print("\nAnalysis:")
        print(f"  Total recording: {format_hours(snapshot.total_recording)}")
        print(
            f"  Avg. efficiency: {format_percent(snapshot.avg_efficiency)} "
            f"({format_health(health)})"
        )
        print(f"  Useful hours:    {format_hours(snapshot.total_good)}")
        print(f"  Wasted hours:    {format_hours(snapshot.total_bad)}")

        print("\nData health ratio:")
        for part in composition:
            label = COMPOSITION_LABELS.get(part.label, part.label)
            print(f"  {label:<14} {format_hours(part.value)}")

        if trend:
            print("\nEfficiency trend (oldest first):")
            for point in trend:
                print(
                    f"  {format_date(point.timestamp)} {format_time(point.timestamp)}  "
                    f"{format_percent(point.efficiency)}"
                )
