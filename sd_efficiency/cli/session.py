"""Shared session setup for CLI commands."""

from sd_efficiency.config import SdEfficiencyConfig, create_default_config
from sd_efficiency.interfaces import PresenterProtocol
from sd_efficiency.orchestration import DashboardSession, create_dashboard_session


def config_from_args(args) -> SdEfficiencyConfig:
    """Build configuration from global CLI options."""
    overrides = {}
    if getattr(args, "data_file", None):
        overrides["data_file"] = args.data_file
    if getattr(args, "verbose", False):
        overrides["log_level"] = "DEBUG"
    return create_default_config(**overrides)


def session_from_args(args, presenter: PresenterProtocol) -> DashboardSession:
    """Create a session loaded from the configured data file."""
    return create_dashboard_session(config_from_args(args), presenter=presenter)
