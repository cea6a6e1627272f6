"""Section header widget for organizing UI sections."""

from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QSizePolicy, QWidget

from sd_efficiency.gui.resources.styles import FONT_SIZES, SPACING


class SectionHeader(QWidget):
    """Section title with an optional caption badge on the right."""

    def __init__(self, title: str, badge: str = "", parent=None):
        """Initialize the section header.

        Args:
            title: Section title text
            badge: Optional right-aligned caption (e.g. a row count)
            parent: Optional parent widget
        """
        super().__init__(parent)

        layout = QHBoxLayout()
        layout.setContentsMargins(0, SPACING.xxs, 0, SPACING.xxs)
        layout.setSpacing(SPACING.sm)

        self.title_label = QLabel(title)
        self.title_label.setObjectName("section-header")
        title_font = QFont()
        title_font.setPixelSize(FONT_SIZES.h3)
        title_font.setWeight(QFont.Weight.Bold)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)
        layout.addStretch()

        self.badge_label = QLabel(badge)
        self.badge_label.setObjectName("caption")
        badge_font = QFont()
        badge_font.setPixelSize(FONT_SIZES.caption)
        self.badge_label.setFont(badge_font)
        self.badge_label.setVisible(bool(badge))
        layout.addWidget(self.badge_label)

        self.setLayout(layout)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Minimum)

    def set_badge(self, text: str) -> None:
        """Update the badge text; an empty string hides it."""
        self.badge_label.setText(text)
        self.badge_label.setVisible(bool(text))
