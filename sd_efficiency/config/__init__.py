"""Configuration management for SD Efficiency."""

from .config import SdEfficiencyConfig
from .defaults import create_default_config

__all__ = ["SdEfficiencyConfig", "create_default_config"]
