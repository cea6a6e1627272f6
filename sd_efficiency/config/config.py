"""Configuration classes for SD Efficiency."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SdEfficiencyConfig:
    """Immutable configuration for the efficiency dashboard.

    All configuration is frozen (immutable) so a running session cannot
    change its validation rules halfway through.
    """

    # Storage settings
    data_file: Path = field(
        default_factory=lambda: Path.home() / ".sd_efficiency" / "entries.json"
    )

    # Validation settings
    tolerance: float = 0.01  # Max allowed |total - (good + bad)| in hours
    efficiency_precision: int = 2  # Decimal places kept on derived efficiency

    # Health bands for the average efficiency card
    healthy_threshold: float = 90.0
    fair_threshold: float = 80.0

    # Logging
    log_level: str = "WARNING"

    def __post_init__(self):
        """Normalize paths and check value ranges."""
        object.__setattr__(self, "data_file", Path(self.data_file).expanduser())
        object.__setattr__(self, "log_level", self.log_level.strip().upper())

        if self.tolerance < 0:
            raise ValueError("tolerance must be >= 0")
        if self.efficiency_precision < 0:
            raise ValueError("efficiency_precision must be >= 0")
        if self.fair_threshold > self.healthy_threshold:
            raise ValueError("fair_threshold must not exceed healthy_threshold")
        if self.log_level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError("log_level must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG")
