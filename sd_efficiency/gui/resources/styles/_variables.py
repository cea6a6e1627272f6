"""Design variables for consistent UI styling.

This module provides centralized design tokens as frozen dataclasses for:
- Spacing values
- Font sizes
- Border radius values

Usage in Python:
    from sd_efficiency.gui.resources.styles._variables import SPACING, FONT_SIZES

    layout.setSpacing(SPACING.md)
    font.setPixelSize(FONT_SIZES.h3)

Usage in QSS (after substitution):
    font-size: ${font-size-h3}px;
    padding: ${spacing-md}px;
    border-radius: ${border-radius-large}px;
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Spacing:
    """Spacing values based on 4px/8px grid system."""

    xxs: int = 4
    xs: int = 8
    sm: int = 12
    md: int = 16
    lg: int = 24
    xl: int = 32


@dataclass(frozen=True)
class FontSizes:
    """Font size values in pixels."""

    h1: int = 22  # Window title
    h2: int = 18  # Section headers
    h3: int = 15  # Card titles
    body: int = 14  # Default body text
    caption: int = 12  # Helper text, captions
    small: int = 10  # Table sub-labels
    stat_value: int = 26  # Metric card numbers


@dataclass(frozen=True)
class BorderRadius:
    """Border radius values in pixels."""

    small: int = 4
    default: int = 8
    large: int = 16


# Singleton instances for use throughout the application
SPACING = Spacing()
FONT_SIZES = FontSizes()
BORDER_RADIUS = BorderRadius()


def get_variable_dict() -> dict[str, str]:
    """Get all design variables as a dictionary for QSS substitution.

    Variable names follow the pattern: category-name (e.g., spacing-md,
    font-size-stat-value); underscores become dashes.

    Returns:
        Dictionary mapping variable names to their pixel values (as strings)
    """
    variables = {}
    for prefix, tokens in (
        ("spacing", SPACING),
        ("font-size", FONT_SIZES),
        ("border-radius", BORDER_RADIUS),
    ):
        for name, value in asdict(tokens).items():
            variables[f"{prefix}-{name.replace('_', '-')}"] = str(value)
    return variables
