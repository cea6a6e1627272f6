"""Default configuration values for SD Efficiency."""

from .config import SdEfficiencyConfig


def create_default_config(**overrides) -> SdEfficiencyConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        SdEfficiencyConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            data_file="~/stress-tests.json",
            tolerance=0.05,
        )
    """
    return SdEfficiencyConfig(**overrides)
