"""Export service for logged entries."""

import csv
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from sd_efficiency.exceptions import StorageError
from sd_efficiency.models import Entry
from sd_efficiency.utils import ensure_directory

CSV_HEADER = [
    "id",
    "recorded_at",
    "total_hours",
    "good_hours",
    "bad_hours",
    "efficiency",
]


class ExportService:
    """Export entries to CSV for spreadsheets and reports."""

    def export_csv(self, entries: Iterable[Entry], output_path: Path) -> int:
        """Export entries to CSV, one row per entry in collection order.

        Args:
            entries: Entries to export
            output_path: Path for the output CSV file

        Returns:
            Number of rows written (excluding header)

        Raises:
            StorageError: If the file cannot be written
        """
        count = 0
        try:
            ensure_directory(output_path.parent)
            with output_path.open("w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f)
                writer.writerow(CSV_HEADER)
                for entry in entries:
                    writer.writerow(self._to_row(entry))
                    count += 1
        except OSError as e:
            raise StorageError(f"Could not write {output_path}: {e}") from e
        return count

    @staticmethod
    def _to_row(entry: Entry) -> list[str]:
        recorded_at = datetime.fromtimestamp(entry.timestamp / 1000).isoformat(
            timespec="seconds"
        )
        return [
            entry.id,
            recorded_at,
            f"{entry.total_hours:g}",
            f"{entry.good_hours:g}",
            f"{entry.bad_hours:g}",
            f"{entry.efficiency:.2f}",
        ]
