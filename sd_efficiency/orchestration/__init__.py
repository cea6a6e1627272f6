"""Session orchestration for coordinating services."""

from .dashboard_session import DashboardSession
from .session_factory import create_dashboard_session

__all__ = ["DashboardSession", "create_dashboard_session"]
