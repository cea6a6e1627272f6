"""GUI styling and theme management."""

from ._variables import BORDER_RADIUS, FONT_SIZES, SPACING
from .theme import THEME_ORDER, Theme

__all__ = ["Theme", "THEME_ORDER", "SPACING", "FONT_SIZES", "BORDER_RADIUS"]
