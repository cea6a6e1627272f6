"""Modern button widget with multiple style variants."""

from PyQt6.QtWidgets import QPushButton


class ModernButton(QPushButton):
    """Button with style variants applied through its object name.

    Variants:
    - primary: Solid primary color background (default)
    - success: Solid green, used for the analysis action
    - ghost: Transparent with subtle hover
    - danger: Transparent, turns red on hover, for destructive actions
    """

    def __init__(self, text: str = "", variant: str = "primary", parent=None):
        """Initialize the modern button.

        Args:
            text: Button text
            variant: Button variant ('primary', 'success', 'ghost', 'danger')
            parent: Optional parent widget
        """
        super().__init__(text, parent)
        self._variant = variant
        self.setObjectName(variant)

        # Set minimum size for better touch targets
        self.setMinimumHeight(36)
        self.setAccessibleName(text if text else "Button")

    def set_shortcut_hint(self, shortcut: str) -> None:
        """Add keyboard shortcut hint to tooltip.

        Args:
            shortcut: Keyboard shortcut (e.g., "Ctrl+Return")
        """
        current_tooltip = self.toolTip()

        if current_tooltip:
            new_tooltip = f"{current_tooltip} ({shortcut})"
        else:
            new_tooltip = f"Keyboard shortcut: {shortcut}"

        self.setToolTip(new_tooltip)
