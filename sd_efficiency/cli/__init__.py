"""Command-line interface for SD Efficiency."""
