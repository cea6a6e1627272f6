"""Enhanced custom widgets for modern UI."""

from .modern_button import ModernButton
from .section_header import SectionHeader
from .stat_card import StatCard

__all__ = [
    "ModernButton",
    "StatCard",
    "SectionHeader",
]
