"""Session state for the efficiency dashboard."""

from __future__ import annotations

import logging

from sd_efficiency.interfaces import PresenterProtocol
from sd_efficiency.models import (
    AggregateSnapshot,
    CompositionSlice,
    EfficiencyHealth,
    Entry,
    EntryCollection,
    TrendPoint,
)
from sd_efficiency.presenters import NullPresenter
from sd_efficiency.services import AggregateCalculator, EntryStore, EntryValidator

logger = logging.getLogger(__name__)


class DashboardSession:
    """Own the entry collection for one running dashboard.

    The session is the only writer of its collection. It validates new
    entries, keeps the newest-first order, mirrors every mutation to the
    store, and tracks whether the analysis panel has been requested.
    In-memory state is the source of truth; a failed save only produces a
    warning.
    """

    def __init__(
        self,
        validator: EntryValidator,
        calculator: AggregateCalculator,
        store: EntryStore | None = None,
        presenter: PresenterProtocol | None = None,
    ):
        """Initialize the session with an empty collection.

        Args:
            validator: Builds entries from raw input
            calculator: Computes aggregates and chart views
            store: Optional persistence mirror
            presenter: Optional output presenter for storage warnings
        """
        self.validator = validator
        self.calculator = calculator
        self.store = store
        self.presenter = presenter or NullPresenter()
        self._entries = EntryCollection()
        self._analysis_visible = False

    def load(self) -> int:
        """Replace the collection with the store's contents.

        Returns:
            Number of entries loaded
        """
        if self.store is None:
            return 0
        self._entries = self.store.load()
        self._analysis_visible = False
        return len(self._entries)

    @property
    def entries(self) -> EntryCollection:
        return self._entries

    @property
    def analysis_visible(self) -> bool:
        """Whether aggregate results should currently be shown."""
        return self._analysis_visible

    def add_entry(self, raw_total: str, raw_good: str, raw_bad: str) -> Entry:
        """Validate raw input and insert the new entry at the front.

        Args:
            raw_total: Total hours as typed by the user
            raw_good: Good hours as typed by the user
            raw_bad: Bad hours as typed by the user

        Returns:
            The new entry

        Raises:
            EntryValidationError: If the input is rejected (collection unchanged)
        """
        entry = self.validator.validate_and_build(raw_total, raw_good, raw_bad)
        self._entries.prepend(entry)
        # New data invalidates the analysis until it is requested again
        self._analysis_visible = False
        logger.info(f"Added entry {entry.id}")
        self._persist()
        return entry

    def remove_entry(self, entry_id: str) -> bool:
        """Remove an entry by id; unknown ids are ignored.

        Returns:
            True if an entry was removed
        """
        count_before = len(self._entries)
        removed = self._entries.remove(entry_id)
        if count_before <= 1:
            self._analysis_visible = False
        if removed:
            logger.info(f"Removed entry {entry_id}")
            self._persist()
        return removed

    def clear_all(self) -> bool:
        """Remove every entry and the persisted copy.

        Returns:
            True if the persisted copy is gone too
        """
        self._entries.clear()
        self._analysis_visible = False
        logger.info("Cleared all entries")
        if self.store is None or self.store.clear():
            return True
        self.presenter.show_warning(
            "Could not delete saved entries; they will be loaded again on next start."
        )
        return False

    def request_analysis(self) -> bool:
        """Show the analysis panel if there is anything to analyse.

        Returns:
            True if analysis is now visible
        """
        if self._entries:
            self._analysis_visible = True
        return self._analysis_visible

    def snapshot(self) -> AggregateSnapshot:
        return self.calculator.summarize(self._entries)

    def composition(self) -> list[CompositionSlice]:
        return self.calculator.composition_view(self._entries)

    def trend(self) -> list[TrendPoint]:
        return self.calculator.trend_view(self._entries)

    def health(self, snapshot: AggregateSnapshot | None = None) -> EfficiencyHealth:
        """Health band of the current average efficiency.

        Args:
            snapshot: Pre-computed snapshot to avoid summarizing twice
        """
        if snapshot is None:
            snapshot = self.snapshot()
        return self.calculator.health(snapshot.avg_efficiency)

    def _persist(self) -> None:
        if self.store is None:
            return
        if not self.store.save(self._entries):
            self.presenter.show_warning(
                "Could not save entries to disk; changes are kept for this session only."
            )
