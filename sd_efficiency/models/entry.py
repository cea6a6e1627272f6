"""Data models for logged stress-test entries."""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class Entry:
    """A single stress-test session record.

    Entries are immutable once built; efficiency is always derived from
    good_hours / total_hours and never supplied by the user.
    """

    id: str
    timestamp: int  # milliseconds since epoch
    total_hours: float
    good_hours: float
    bad_hours: float
    efficiency: float  # percent, rounded to 2 decimals

    def to_record(self) -> dict[str, Any]:
        """Convert to the flat persisted record layout."""
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "totalHours": self.total_hours,
            "goodHours": self.good_hours,
            "badHours": self.bad_hours,
            "efficiency": self.efficiency,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any], tolerance: float = 0.01) -> "Entry":
        """Build an entry from a persisted record.

        The record must satisfy the same rules a freshly validated entry
        does: finite numbers, a positive total, and total == good + bad
        within ``tolerance``.

        Raises:
            KeyError: If a field is missing
            TypeError: If a field has the wrong type
            ValueError: If a value is not finite or breaks the hour rules
        """
        entry_id = record["id"]
        if not isinstance(entry_id, str):
            raise TypeError(f"id must be a string, got {type(entry_id).__name__}")

        numbers = {}
        for key in ("timestamp", "totalHours", "goodHours", "badHours", "efficiency"):
            value = record[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{key} must be a number, got {type(value).__name__}")
            if not math.isfinite(value):
                raise ValueError(f"{key} must be finite, got {value}")
            numbers[key] = value

        total = Decimal(str(numbers["totalHours"]))
        good = Decimal(str(numbers["goodHours"]))
        bad = Decimal(str(numbers["badHours"]))
        if total <= 0:
            raise ValueError(f"totalHours must be positive, got {total}")
        if abs(total - (good + bad)) > Decimal(str(tolerance)):
            raise ValueError(f"totalHours {total} does not equal goodHours + badHours")

        return cls(
            id=entry_id,
            timestamp=int(numbers["timestamp"]),
            total_hours=float(numbers["totalHours"]),
            good_hours=float(numbers["goodHours"]),
            bad_hours=float(numbers["badHours"]),
            efficiency=float(numbers["efficiency"]),
        )

    def __str__(self) -> str:
        return (
            f"Entry {self.id}: {self.total_hours:.1f}h "
            f"(good {self.good_hours:.1f}h, bad {self.bad_hours:.1f}h, "
            f"{self.efficiency:.2f}%)"
        )


class EntryCollection:
    """Ordered collection of entries, newest first by insertion.

    Insertion order is the display and iteration order, independent of
    timestamps. The only mutations are prepend, remove-by-id and clear.
    """

    def __init__(self, entries: Iterable[Entry] | None = None):
        self._entries: list[Entry] = list(entries) if entries is not None else []

    def prepend(self, entry: Entry) -> None:
        """Insert an entry at the front of the collection."""
        self._entries.insert(0, entry)

    def remove(self, entry_id: str) -> bool:
        """Remove the entry with the given id.

        Returns:
            True if an entry was removed, False if the id is unknown
        """
        remaining = [e for e in self._entries if e.id != entry_id]
        removed = len(remaining) != len(self._entries)
        self._entries = remaining
        return removed

    def clear(self) -> None:
        """Remove all entries."""
        self._entries = []

    def get(self, entry_id: str) -> Entry | None:
        """Look up an entry by id."""
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def to_records(self) -> list[dict[str, Any]]:
        """Serialize to the flat record layout, preserving order."""
        return [entry.to_record() for entry in self._entries]

    @classmethod
    def from_records(
        cls, records: Iterable[dict[str, Any]], tolerance: float = 0.01
    ) -> "EntryCollection":
        """Build a collection from persisted records, preserving order."""
        return cls(Entry.from_record(record, tolerance) for record in records)

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __getitem__(self, index: int) -> Entry:
        return self._entries[index]

    def __repr__(self) -> str:
        return f"EntryCollection({len(self._entries)} entries)"
