"""Business logic services for SD Efficiency."""

from .aggregate_service import AggregateCalculator
from .entry_store import EntryStore
from .entry_validator import EntryValidator
from .export_service import ExportService

__all__ = [
    "EntryValidator",
    "AggregateCalculator",
    "EntryStore",
    "ExportService",
]
