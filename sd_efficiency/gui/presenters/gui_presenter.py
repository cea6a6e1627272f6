"""GUI presenter implementation using Qt signals."""

from PyQt6.QtCore import QObject, pyqtSignal

from sd_efficiency.models import (
    AggregateSnapshot,
    CompositionSlice,
    EfficiencyHealth,
    Entry,
    TrendPoint,
)


class GUIPresenter(QObject):
    """Presenter that forwards output to widgets through Qt signals.

    Implements PresenterProtocol through structural subtyping (duck typing).
    This avoids metaclass conflicts between QObject and Protocol metaclasses.
    """

    info_signal = pyqtSignal(str)
    success_signal = pyqtSignal(str)
    warning_signal = pyqtSignal(str)
    error_signal = pyqtSignal(str)
    entries_signal = pyqtSignal(list)  # list[Entry]
    summary_signal = pyqtSignal(object, object, list, list)

    def __init__(self, parent=None):
        super().__init__(parent)

    def show_info(self, message: str) -> None:
        self.info_signal.emit(message)

    def show_success(self, message: str) -> None:
        self.success_signal.emit(message)

    def show_warning(self, message: str) -> None:
        self.warning_signal.emit(message)

    def show_error(self, message: str) -> None:
        self.error_signal.emit(message)

    def show_entries(self, entries: list[Entry]) -> None:
        self.entries_signal.emit(entries)

    def show_summary(
        self,
        snapshot: AggregateSnapshot,
        health: EfficiencyHealth,
        composition: list[CompositionSlice],
        trend: list[TrendPoint],
    ) -> None:
        """Emit aggregate metrics and chart data in one signal."""
        self.summary_signal.emit(snapshot, health, composition, trend)
