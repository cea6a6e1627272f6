"""Form for logging a new test session."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QVBoxLayout,
)

from sd_efficiency.gui.resources.styles import FONT_SIZES, SPACING
from sd_efficiency.gui.widgets.enhanced import ModernButton


class EntryForm(QFrame):
    """Three hour inputs plus the "Add Row" and "Get Analysis" actions.

    The form never validates on its own. It hands the raw text to whoever
    listens on ``add_requested`` and shows an inline error if told to.
    """

    add_requested = pyqtSignal(str, str, str)  # total, good, bad
    analysis_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("card")
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        layout = QVBoxLayout()
        layout.setContentsMargins(SPACING.md, SPACING.md, SPACING.md, SPACING.md)
        layout.setSpacing(SPACING.sm)

        title = QLabel("Add Test Data")
        title_font = QFont()
        title_font.setPixelSize(FONT_SIZES.h3)
        title_font.setWeight(QFont.Weight.Bold)
        title.setFont(title_font)
        layout.addWidget(title)

        grid = QGridLayout()
        grid.setHorizontalSpacing(SPACING.sm)
        grid.setVerticalSpacing(SPACING.xxs)

        self.total_input = self._add_field(grid, 0, "Total Hours", "e.g. 24")
        self.good_input = self._add_field(grid, 1, "Good Hours", "Valid data")
        self.bad_input = self._add_field(grid, 2, "Bad Hours", "Corrupted/lost")
        layout.addLayout(grid)

        self.error_label = QLabel()
        self.error_label.setObjectName("form-error")
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        buttons = QHBoxLayout()
        buttons.setSpacing(SPACING.sm)
        self.add_button = ModernButton("Add Row", "primary")
        self.add_button.set_shortcut_hint("Enter")
        self.add_button.clicked.connect(self._on_add_clicked)
        buttons.addWidget(self.add_button)

        self.analysis_button = ModernButton("Get Analysis", "success")
        self.analysis_button.clicked.connect(self.analysis_requested.emit)
        buttons.addWidget(self.analysis_button)
        layout.addLayout(buttons)

        for field in (self.total_input, self.good_input, self.bad_input):
            field.returnPressed.connect(self._on_add_clicked)

        self.setLayout(layout)

    @staticmethod
    def _add_field(grid: QGridLayout, column: int, label: str, placeholder: str) -> QLineEdit:
        caption = QLabel(label.upper())
        caption.setObjectName("stat-label")
        grid.addWidget(caption, 0, column)

        field = QLineEdit()
        field.setPlaceholderText(placeholder)
        field.setAccessibleName(label)
        grid.addWidget(field, 1, column)
        return field

    def _on_add_clicked(self) -> None:
        self.add_requested.emit(
            self.total_input.text(),
            self.good_input.text(),
            self.bad_input.text(),
        )

    def show_error(self, message: str) -> None:
        """Show an inline error and keep the user's input for correction."""
        self.error_label.setText(message)
        self.error_label.setVisible(True)

    def clear_error(self) -> None:
        self.error_label.clear()
        self.error_label.setVisible(False)

    def clear_inputs(self) -> None:
        """Reset all fields after a successful add."""
        for field in (self.total_input, self.good_input, self.bad_input):
            field.clear()
        self.clear_error()
        self.total_input.setFocus()
