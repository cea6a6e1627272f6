"""Main window for the SD Efficiency Pro dashboard."""

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStackedWidget,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from sd_efficiency import __version__
from sd_efficiency.exceptions import EntryValidationError
from sd_efficiency.gui.presenters import GUIPresenter
from sd_efficiency.gui.resources.styles import FONT_SIZES, SPACING
from sd_efficiency.gui.resources.styles.theme import Theme
from sd_efficiency.gui.widgets.charts import CompositionChart, TrendChart
from sd_efficiency.gui.widgets.enhanced import SectionHeader, StatCard
from sd_efficiency.gui.widgets.entries_table import EntriesTable
from sd_efficiency.gui.widgets.entry_form import EntryForm
from sd_efficiency.gui.widgets.header_widget import HeaderWidget
from sd_efficiency.models import (
    AggregateSnapshot,
    CompositionSlice,
    EfficiencyHealth,
    Entry,
    TrendPoint,
)
from sd_efficiency.orchestration import DashboardSession
from sd_efficiency.utils import PLACEHOLDER, format_hours, format_percent

logger = logging.getLogger(__name__)

WINDOW_MIN_WIDTH = 960
WINDOW_MIN_HEIGHT = 720

EMPTY_MESSAGE = "Add test data rows to begin the efficiency analysis."
PENDING_TITLE = "No Analysis Generated"
PENDING_MESSAGE = "Hit the 'Get Analysis' button to process your current data rows."

STATUS_TIMEOUT_MS = 5000


def health_tone(health: EfficiencyHealth) -> str:
    """QSS tone used to colour the average efficiency card."""
    return health.value


def rows_badge(count: int) -> str:
    return f"{count} Row Logged" if count == 1 else f"{count} Rows Logged"


class MainWindow(QMainWindow):
    """Main application window.

    The window owns no state of its own: every user action goes through
    the ``DashboardSession`` and the view is redrawn from it afterwards.
    Entry lists and summaries reach the widgets through the presenter's
    signals, the same path status messages take.
    """

    def __init__(self, session: DashboardSession, presenter: GUIPresenter):
        """Initialize the main window.

        Args:
            session: Session holding the entries and analysis flag
            presenter: Presenter the session reports through
        """
        super().__init__()
        self.session = session
        self.presenter = presenter

        self._setup_ui()
        self._connect_presenter_signals()
        self._setup_shortcuts()
        self.refresh()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle(f"SD Efficiency Pro {__version__}")
        self.setMinimumSize(WINDOW_MIN_WIDTH, WINDOW_MIN_HEIGHT)

        central_widget = QWidget()
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.header = HeaderWidget()
        self.header.theme_changed.connect(self._on_theme_changed)
        self.header.clear_requested.connect(self._on_clear_requested)
        layout.addWidget(self.header)

        body = QVBoxLayout()
        body.setContentsMargins(SPACING.lg, SPACING.md, SPACING.lg, SPACING.md)
        body.setSpacing(SPACING.md)

        # Metric cards
        cards = QGridLayout()
        cards.setSpacing(SPACING.md)
        self.total_card = StatCard("Total Recording", PLACEHOLDER, "Total test duration")
        self.efficiency_card = StatCard("Avg. Efficiency", PLACEHOLDER, "Data integrity")
        self.good_card = StatCard("Useful Hours", PLACEHOLDER, "Valid data written")
        self.bad_card = StatCard("Wasted Hours", PLACEHOLDER, "Corrupted or lost")
        for column, card in enumerate(
            (self.total_card, self.efficiency_card, self.good_card, self.bad_card)
        ):
            cards.addWidget(card, 0, column)
        body.addLayout(cards)

        # Form on the left, analysis on the right
        middle = QHBoxLayout()
        middle.setSpacing(SPACING.md)

        self.entry_form = EntryForm()
        self.entry_form.add_requested.connect(self._on_add_requested)
        self.entry_form.analysis_requested.connect(self._on_analysis_requested)
        middle.addWidget(self.entry_form, 1)

        self.analysis_stack = QStackedWidget()
        self.analysis_stack.addWidget(self._build_placeholder())
        self.analysis_stack.addWidget(self._build_charts())
        middle.addWidget(self.analysis_stack, 2)
        body.addLayout(middle)

        # Data table
        self.table_header = SectionHeader("Test Data Rows", rows_badge(0))
        body.addWidget(self.table_header)
        self.entries_table = EntriesTable()
        self.entries_table.remove_requested.connect(self._on_remove_requested)
        body.addWidget(self.entries_table, 1)

        layout.addLayout(body)
        central_widget.setLayout(layout)
        self.setCentralWidget(central_widget)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

    def _build_placeholder(self) -> QFrame:
        frame = QFrame()
        frame.setObjectName("placeholder")
        layout = QVBoxLayout()
        layout.setContentsMargins(SPACING.xl, SPACING.xl, SPACING.xl, SPACING.xl)
        layout.addStretch()

        self.placeholder_title = QLabel(PENDING_TITLE)
        title_font = QFont()
        title_font.setPixelSize(FONT_SIZES.h2)
        title_font.setWeight(QFont.Weight.Bold)
        self.placeholder_title.setFont(title_font)
        self.placeholder_title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.placeholder_title)

        self.placeholder_message = QLabel(EMPTY_MESSAGE)
        self.placeholder_message.setObjectName("caption")
        self.placeholder_message.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.placeholder_message.setWordWrap(True)
        layout.addWidget(self.placeholder_message)

        layout.addStretch()
        frame.setLayout(layout)
        return frame

    def _build_charts(self) -> QWidget:
        container = QWidget()
        layout = QHBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SPACING.md)

        self.composition_chart = CompositionChart()
        self.trend_chart = TrendChart()
        layout.addWidget(self._chart_card("Data Health Ratio", self.composition_chart), 1)
        layout.addWidget(self._chart_card("Efficiency Trend", self.trend_chart), 2)

        container.setLayout(layout)
        return container

    @staticmethod
    def _chart_card(title: str, chart: QWidget) -> QFrame:
        card = QFrame()
        card.setObjectName("card")
        card_layout = QVBoxLayout()
        card_layout.setContentsMargins(SPACING.md, SPACING.sm, SPACING.md, SPACING.sm)
        card_layout.addWidget(SectionHeader(title))
        card_layout.addWidget(chart, 1)
        card.setLayout(card_layout)
        return card

    def _connect_presenter_signals(self) -> None:
        """Connect presenter signals to UI update slots."""
        self.presenter.info_signal.connect(self._on_info_message)
        self.presenter.success_signal.connect(self._on_success_message)
        self.presenter.warning_signal.connect(self._on_warning_message)
        self.presenter.error_signal.connect(self._on_error_message)
        self.presenter.entries_signal.connect(self._on_entries)
        self.presenter.summary_signal.connect(self._on_summary)

    def _setup_shortcuts(self) -> None:
        """Set up global keyboard shortcuts."""
        theme_shortcut = QShortcut(QKeySequence("Ctrl+T"), self)
        theme_shortcut.activated.connect(self._cycle_theme)

        analysis_shortcut = QShortcut(QKeySequence("Ctrl+Return"), self)
        analysis_shortcut.activated.connect(self._on_analysis_requested)
        self.entry_form.analysis_button.set_shortcut_hint("Ctrl+Return")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def refresh(self) -> None:
        """Redraw every widget from the session state."""
        try:
            entries = list(self.session.entries)
            self.presenter.show_entries(entries)

            if self.session.analysis_visible:
                snapshot = self.session.snapshot()
                self.presenter.show_summary(
                    snapshot,
                    self.session.health(snapshot),
                    self.session.composition(),
                    self.session.trend(),
                )
            else:
                self._show_pending(has_entries=bool(entries))
        except Exception:
            logger.exception("Failed to refresh dashboard")
            self._on_error_message("Could not refresh the dashboard. See the log for details.")

    def _on_entries(self, entries: list[Entry]) -> None:
        self.entries_table.set_entries(entries)
        self.table_header.set_badge(rows_badge(len(entries)))

    def _on_summary(
        self,
        snapshot: AggregateSnapshot,
        health: EfficiencyHealth,
        composition: list[CompositionSlice],
        trend: list[TrendPoint],
    ) -> None:
        self.total_card.set_value(format_hours(snapshot.total_recording))
        self.efficiency_card.set_value(
            format_percent(snapshot.avg_efficiency), health_tone(health)
        )
        self.good_card.set_value(format_hours(snapshot.total_good), "good")
        self.bad_card.set_value(format_hours(snapshot.total_bad), "bad")

        self.composition_chart.set_data(composition)
        self.trend_chart.set_data(trend)
        self.analysis_stack.setCurrentIndex(1)

    def _show_pending(self, has_entries: bool) -> None:
        for card in (self.total_card, self.efficiency_card, self.good_card, self.bad_card):
            card.set_value(PLACEHOLDER)

        self.placeholder_message.setText(PENDING_MESSAGE if has_entries else EMPTY_MESSAGE)
        self.analysis_stack.setCurrentIndex(0)

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------

    def _on_add_requested(self, total: str, good: str, bad: str) -> None:
        try:
            self.session.add_entry(total, good, bad)
        except EntryValidationError as e:
            # Keep the typed values so the user can correct them
            self.entry_form.show_error(str(e))
            return

        self.entry_form.clear_inputs()
        self.refresh()

    def _on_analysis_requested(self) -> None:
        if not self.session.request_analysis():
            self._on_info_message(EMPTY_MESSAGE)
        self.refresh()

    def _on_remove_requested(self, entry_id: str) -> None:
        self.session.remove_entry(entry_id)
        self.refresh()

    def _on_clear_requested(self) -> None:
        reply = QMessageBox.question(
            self,
            "Clear Data",
            "Are you sure you want to clear all data? This cannot be undone.",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if reply != QMessageBox.StandardButton.Yes:
            return

        self.entry_form.clear_error()
        if self.session.clear_all():
            self._on_success_message("All data cleared")
        self.refresh()

    # ------------------------------------------------------------------
    # Theme and status messages
    # ------------------------------------------------------------------

    def _cycle_theme(self) -> None:
        """Switch to the next theme and update the header selector."""
        new_mode = Theme.cycle_theme()
        self.header.update_theme_selector()
        self._on_theme_changed(new_mode)

    def _on_theme_changed(self, theme_name: str) -> None:
        """Apply the stylesheet of a newly selected theme.

        Args:
            theme_name: Name of the new theme
        """
        app = QApplication.instance()
        if isinstance(app, QApplication):
            app.setStyleSheet(Theme.get_stylesheet(theme_name))  # type: ignore[arg-type]
        # Charts read colours at paint time
        self.composition_chart.update()
        self.trend_chart.update()

    def _on_info_message(self, message: str) -> None:
        self.status_bar.showMessage(message, STATUS_TIMEOUT_MS)

    def _on_success_message(self, message: str) -> None:
        self.status_bar.showMessage(message, STATUS_TIMEOUT_MS)

    def _on_warning_message(self, message: str) -> None:
        # Warnings stay until replaced
        self.status_bar.showMessage(f"Warning: {message}")

    def _on_error_message(self, message: str) -> None:
        self.status_bar.showMessage(f"Error: {message}")
