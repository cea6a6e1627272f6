"""Table of logged entries with per-row delete buttons."""

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QHeaderView,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from sd_efficiency.gui.widgets.enhanced import ModernButton
from sd_efficiency.models import Entry
from sd_efficiency.utils import format_date, format_hours, format_percent, format_time

COLUMNS = ["Date", "Total", "Good", "Bad", "Eff.", ""]

ENTRY_ID_ROLE = Qt.ItemDataRole.UserRole


class EntriesTable(QWidget):
    """Newest-first table of entries.

    Emits ``remove_requested`` with the entry id when a row's delete
    button is clicked; the table itself never mutates entries.
    """

    remove_requested = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        self.table = QTableWidget()
        self.table.setColumnCount(len(COLUMNS))
        self.table.setHorizontalHeaderLabels(COLUMNS)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QTableWidget.SelectionMode.SingleSelection)
        self.table.setAlternatingRowColors(False)

        if v_header := self.table.verticalHeader():
            v_header.setVisible(False)
        if h_header := self.table.horizontalHeader():
            h_header.setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
            for column in range(1, len(COLUMNS)):
                h_header.setSectionResizeMode(column, QHeaderView.ResizeMode.ResizeToContents)

        layout.addWidget(self.table)
        self.setLayout(layout)

    def set_entries(self, entries: list[Entry]) -> None:
        """Replace the table contents, keeping the given order."""
        self.table.setRowCount(0)
        self.table.setRowCount(len(entries))

        for row, entry in enumerate(entries):
            date_item = QTableWidgetItem(
                f"{format_date(entry.timestamp)}  {format_time(entry.timestamp)}"
            )
            date_item.setData(ENTRY_ID_ROLE, entry.id)
            self.table.setItem(row, 0, date_item)

            values = [
                format_hours(entry.total_hours),
                format_hours(entry.good_hours),
                format_hours(entry.bad_hours),
                format_percent(entry.efficiency),
            ]
            for column, text in enumerate(values, start=1):
                item = QTableWidgetItem(text)
                item.setTextAlignment(
                    Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
                )
                self.table.setItem(row, column, item)

            delete_button = ModernButton("Delete", "ghost")
            delete_button.setToolTip("Remove this row")
            delete_button.clicked.connect(
                lambda _checked=False, entry_id=entry.id: self.remove_requested.emit(entry_id)
            )
            self.table.setCellWidget(row, len(COLUMNS) - 1, delete_button)

    def entry_id_at(self, row: int) -> str | None:
        """Id of the entry shown in a row, or None if the row is empty."""
        item = self.table.item(row, 0)
        return item.data(ENTRY_ID_ROLE) if item is not None else None

    def row_count(self) -> int:
        return self.table.rowCount()
