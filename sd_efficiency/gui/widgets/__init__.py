"""Widgets for the dashboard window."""
