"""Theme management system for the SD Efficiency dashboard.

Two themes are supported:
- Dark: The default zinc palette the dashboard was designed around
- Light: A high-contrast palette for bright rooms
"""

import re
from typing import Literal

from PyQt6.QtCore import QSettings

from ._variables import get_variable_dict

ThemeMode = Literal["dark", "light"]

THEME_ORDER: list[ThemeMode] = ["dark", "light"]

STYLESHEET_TEMPLATE = """
QWidget {
    background-color: ${background};
    color: ${text_primary};
    font-size: ${font-size-body}px;
}
QFrame#card, QFrame#stat-card {
    background-color: ${surface};
    border: 1px solid ${border};
    border-radius: ${border-radius-large}px;
}
QFrame#placeholder {
    background-color: ${surface};
    border: 1px dashed ${border};
    border-radius: ${border-radius-large}px;
}
QLabel {
    background: transparent;
}
QLabel#stat-label, QLabel#caption {
    color: ${text_secondary};
}
QLabel#stat-value[health="healthy"] { color: ${success}; }
QLabel#stat-value[health="fair"] { color: ${warning}; }
QLabel#stat-value[health="poor"] { color: ${error}; }
QLabel#stat-value[health="good"] { color: ${info}; }
QLabel#stat-value[health="bad"] { color: ${error}; }
QLabel#stat-value[health="idle"] { color: ${text_secondary}; }
QLabel#form-error {
    color: ${error};
    background-color: ${error_surface};
    border: 1px solid ${error};
    border-radius: ${border-radius-default}px;
    padding: ${spacing-xs}px;
}
QLineEdit {
    background-color: ${input};
    border: 1px solid ${border};
    border-radius: ${border-radius-default}px;
    padding: ${spacing-xs}px ${spacing-sm}px;
}
QLineEdit:focus {
    border: 1px solid ${primary};
}
QPushButton {
    border-radius: ${border-radius-default}px;
    padding: ${spacing-xs}px ${spacing-md}px;
    font-weight: 600;
}
QPushButton#primary {
    background-color: ${primary};
    color: ${text_on_primary};
    border: none;
}
QPushButton#primary:hover { background-color: ${primary_hover}; }
QPushButton#success {
    background-color: ${analysis};
    color: ${text_on_primary};
    border: none;
}
QPushButton#ghost, QPushButton#danger {
    background-color: transparent;
    color: ${text_secondary};
    border: none;
}
QPushButton#ghost:hover, QPushButton#danger:hover {
    color: ${error};
    background-color: ${error_surface};
}
QTableWidget {
    background-color: ${surface};
    border: none;
    gridline-color: ${border};
}
QHeaderView::section {
    background-color: ${hover_surface};
    color: ${text_secondary};
    border: none;
    padding: ${spacing-xs}px;
    font-size: ${font-size-caption}px;
    text-transform: uppercase;
}
"""


class Theme:
    """Centralized theme management for the application.

    This class provides colour palettes and stylesheet generation for the
    supported themes, and remembers the user's choice between runs.
    """

    # Singleton instance
    _instance = None
    _current_mode: ThemeMode = "dark"

    DARK_COLORS = {
        # Primary Colors
        "primary": "#3B82F6",  # Blue 500
        "primary_hover": "#2563EB",  # Blue 600
        "analysis": "#059669",  # Emerald 600
        # Status Colors
        "success": "#22C55E",  # Green 500
        "warning": "#EAB308",  # Yellow 500
        "error": "#EF4444",  # Red 500
        "info": "#3B82F6",  # Blue 500
        "error_surface": "#2A1515",
        # Background Colors
        "background": "#09090B",  # Zinc 950
        "surface": "#18181B",  # Zinc 900
        "hover_surface": "#27272A",  # Zinc 800
        "input": "#1F1F23",
        # Border Colors
        "border": "#27272A",  # Zinc 800
        # Text Colors
        "text_primary": "#FAFAFA",  # Zinc 50
        "text_secondary": "#A1A1AA",  # Zinc 400
        "text_on_primary": "#FFFFFF",
        # Charts
        "chart_grid": "#27272A",
        "chart_axis": "#71717A",  # Zinc 500
    }

    LIGHT_COLORS = {
        # Primary Colors
        "primary": "#2563EB",  # Blue 600
        "primary_hover": "#1D4ED8",  # Blue 700
        "analysis": "#059669",  # Emerald 600
        # Status Colors
        "success": "#16A34A",  # Green 600
        "warning": "#CA8A04",  # Yellow 600
        "error": "#DC2626",  # Red 600
        "info": "#2563EB",  # Blue 600
        "error_surface": "#FEF2F2",
        # Background Colors
        "background": "#F9FAFB",  # Gray 50
        "surface": "#FFFFFF",
        "hover_surface": "#F3F4F6",  # Gray 100
        "input": "#F3F4F6",
        # Border Colors
        "border": "#E5E7EB",  # Gray 200
        # Text Colors
        "text_primary": "#111827",  # Gray 900
        "text_secondary": "#6B7280",  # Gray 500
        "text_on_primary": "#FFFFFF",
        # Charts
        "chart_grid": "#E5E7EB",
        "chart_axis": "#6B7280",
    }

    # Fixed series colours so good/bad keep their meaning in every theme
    CHART_COLORS = {
        "good": "#3B82F6",
        "bad": "#EF4444",
        "trend": "#3B82F6",
    }

    def __init__(self):
        """Initialize theme manager."""
        # Load saved theme preference
        settings = QSettings("SdEfficiency", "GUI")
        saved_theme = settings.value("theme", "dark")
        if saved_theme in THEME_ORDER:
            self._current_mode = saved_theme

    @classmethod
    def get_instance(cls) -> "Theme":
        """Get or create the singleton Theme instance.

        Returns:
            The Theme singleton instance
        """
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def get_current_mode(cls) -> ThemeMode:
        """Get the current theme mode."""
        return cls.get_instance()._current_mode

    @classmethod
    def set_mode(cls, mode: ThemeMode) -> None:
        """Set the current theme mode and save preference.

        Args:
            mode: Theme mode to set ('dark' or 'light')
        """
        instance = cls.get_instance()
        instance._current_mode = mode

        settings = QSettings("SdEfficiency", "GUI")
        settings.setValue("theme", mode)

    @classmethod
    def get_colors(cls, mode: ThemeMode | None = None) -> dict[str, str]:
        """Get color palette for a theme mode.

        Args:
            mode: Theme mode, or None to use current mode

        Returns:
            Dictionary of color values
        """
        if mode is None:
            mode = cls.get_current_mode()
        return cls.LIGHT_COLORS if mode == "light" else cls.DARK_COLORS

    @classmethod
    def get_stylesheet(cls, mode: ThemeMode | None = None) -> str:
        """Get the complete QSS stylesheet for a theme mode.

        Args:
            mode: Theme mode, or None to use current mode

        Returns:
            Complete QSS stylesheet as string
        """
        return cls._substitute_variables(STYLESHEET_TEMPLATE, cls.get_colors(mode))

    @classmethod
    def _substitute_variables(cls, qss_content: str, colors: dict[str, str]) -> str:
        """Substitute ${name} placeholders with colours and design variables.

        Unknown placeholders are left untouched.
        """
        variables = {**get_variable_dict(), **colors}

        def replace_var(match: re.Match) -> str:
            var_name = match.group(1)
            return str(variables.get(var_name, match.group(0)))

        return re.sub(r"\$\{([a-z0-9_-]+)\}", replace_var, qss_content)

    @classmethod
    def cycle_theme(cls) -> ThemeMode:
        """Switch to the next theme.

        Returns:
            The new theme mode
        """
        current = cls.get_current_mode()
        new_mode = THEME_ORDER[(THEME_ORDER.index(current) + 1) % len(THEME_ORDER)]
        cls.set_mode(new_mode)
        return new_mode
