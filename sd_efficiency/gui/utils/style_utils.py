"""Utility functions for widget styling."""

from PyQt6.QtWidgets import QWidget


def refresh_widget_style(widget: QWidget) -> None:
    """Force a widget to refresh its style after a property change.

    This is necessary when using QSS property selectors like [health="poor"].
    After setting a property with setProperty(), call this to apply the new style.

    Args:
        widget: The widget to refresh
    """
    if style := widget.style():
        style.unpolish(widget)
        style.polish(widget)
