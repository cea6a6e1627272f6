"""Header widget for the main window.

Provides app branding, theme selection and the Clear Data action.
"""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from sd_efficiency.gui.resources.styles import FONT_SIZES, SPACING, THEME_ORDER
from sd_efficiency.gui.resources.styles.theme import Theme
from sd_efficiency.gui.widgets.enhanced import ModernButton

THEME_LABELS = {"dark": "Dark", "light": "Light"}


class HeaderWidget(QWidget):
    """Header widget with app branding, theme selection and Clear Data."""

    theme_changed = pyqtSignal(str)  # theme name
    clear_requested = pyqtSignal()

    def __init__(self, parent=None):
        """Initialize the header widget.

        Args:
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        layout = QHBoxLayout()
        layout.setContentsMargins(SPACING.md, SPACING.sm, SPACING.md, SPACING.sm)

        branding_layout = QVBoxLayout()
        branding_layout.setSpacing(2)

        title_label = QLabel("SD Efficiency Pro")
        title_font = QFont()
        title_font.setPixelSize(FONT_SIZES.h1)
        title_font.setWeight(QFont.Weight.Bold)
        title_label.setFont(title_font)
        branding_layout.addWidget(title_label)

        subtitle_label = QLabel("Stress-test data integrity analysis")
        subtitle_label.setObjectName("caption")
        subtitle_font = QFont()
        subtitle_font.setPixelSize(FONT_SIZES.caption)
        subtitle_label.setFont(subtitle_font)
        branding_layout.addWidget(subtitle_label)

        layout.addLayout(branding_layout)
        layout.addStretch()

        theme_label = QLabel("Theme:")
        theme_label.setObjectName("caption")
        layout.addWidget(theme_label)

        self.theme_combo = QComboBox()
        for mode in THEME_ORDER:
            self.theme_combo.addItem(THEME_LABELS[mode], mode)
        self.update_theme_selector()
        self.theme_combo.currentIndexChanged.connect(self._on_theme_changed)
        self.theme_combo.setToolTip("Select application theme (Ctrl+T to cycle)")
        layout.addWidget(self.theme_combo)

        self.clear_button = ModernButton("Clear Data", "danger")
        self.clear_button.setToolTip("Remove every logged row")
        self.clear_button.clicked.connect(self.clear_requested.emit)
        layout.addWidget(self.clear_button)

        self.setLayout(layout)

    def _on_theme_changed(self, index: int) -> None:
        """Handle theme selection change.

        Args:
            index: Selected combo box index
        """
        theme_name = self.theme_combo.itemData(index)
        if theme_name:
            Theme.set_mode(theme_name)
            self.theme_changed.emit(theme_name)

    def update_theme_selector(self) -> None:
        """Update theme selector to match current theme."""
        index = THEME_ORDER.index(Theme.get_current_mode())

        # Block signals to avoid triggering theme change
        self.theme_combo.blockSignals(True)
        self.theme_combo.setCurrentIndex(index)
        self.theme_combo.blockSignals(False)
