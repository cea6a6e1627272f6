"""Stat card widget for displaying metrics."""

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout

from sd_efficiency.gui.resources.styles import FONT_SIZES, SPACING
from sd_efficiency.gui.utils import refresh_widget_style


class StatCard(QFrame):
    """Card widget for displaying a single metric.

    Features:
    - Small uppercase title
    - Large value display, coloured through the ``health`` QSS property
    - One-line description

    Typical usage: Total recording, average efficiency, useful and wasted hours.
    """

    def __init__(self, title: str = "", value: str = "---", description: str = "", parent=None):
        """Initialize the stat card.

        Args:
            title: Title describing the metric
            value: Value to display (as string to support formatted numbers)
            description: Short explanatory text under the value
            parent: Optional parent widget
        """
        super().__init__(parent)

        self._title = title
        self._value = value
        self._description = description

        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setObjectName("stat-card")

        layout = QVBoxLayout()
        layout.setContentsMargins(SPACING.md, SPACING.md, SPACING.md, SPACING.md)
        layout.setSpacing(SPACING.xxs)

        # Title (small, uppercase)
        self.title_label = QLabel(self._title.upper())
        self.title_label.setObjectName("stat-label")
        title_font = QFont()
        title_font.setPixelSize(FONT_SIZES.caption)
        title_font.setWeight(QFont.Weight.Medium)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        # Value (large, bold)
        self.value_label = QLabel(self._value)
        self.value_label.setObjectName("stat-value")
        self.value_label.setProperty("health", "idle")
        value_font = QFont()
        value_font.setPixelSize(FONT_SIZES.stat_value)
        value_font.setWeight(QFont.Weight.Bold)
        self.value_label.setFont(value_font)
        layout.addWidget(self.value_label)

        # Description
        self.description_label = QLabel(self._description)
        self.description_label.setObjectName("caption")
        description_font = QFont()
        description_font.setPixelSize(FONT_SIZES.caption)
        self.description_label.setFont(description_font)
        layout.addWidget(self.description_label)

        self.setLayout(layout)
        self.setAccessibleName(self._title)

    def set_value(self, value: str, tone: str = "idle") -> None:
        """Update the displayed value and its colour.

        Args:
            value: New value to display
            tone: QSS tone (healthy, fair, poor, good, bad or idle)
        """
        self._value = value
        self.value_label.setText(value)
        self.value_label.setProperty("health", tone)
        refresh_widget_style(self.value_label)

    @property
    def value(self) -> str:
        return self._value

    @property
    def tone(self) -> str:
        return self.value_label.property("health")
