"""PyQt6 desktop dashboard for SD Efficiency."""
