"""Tests for configuration."""

import dataclasses
from pathlib import Path

import pytest

from sd_efficiency.config import SdEfficiencyConfig, create_default_config


class TestSdEfficiencyConfig:
    """Tests for SdEfficiencyConfig."""

    def test_defaults(self):
        config = create_default_config()

        assert config.tolerance == 0.01
        assert config.efficiency_precision == 2
        assert config.healthy_threshold == 90.0
        assert config.fair_threshold == 80.0
        assert config.log_level == "WARNING"
        assert config.data_file == Path.home() / ".sd_efficiency" / "entries.json"

    def test_string_path_is_converted(self, tmp_path):
        config = create_default_config(data_file=str(tmp_path / "entries.json"))
        assert config.data_file == tmp_path / "entries.json"

    def test_home_is_expanded(self):
        config = create_default_config(data_file="~/entries.json")
        assert config.data_file == Path.home() / "entries.json"

    def test_log_level_is_normalized(self):
        assert create_default_config(log_level=" debug ").log_level == "DEBUG"

    def test_is_frozen(self):
        config = SdEfficiencyConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.tolerance = 1.0  # type: ignore[misc]

    @pytest.mark.parametrize(
        "overrides",
        [
            {"tolerance": -0.1},
            {"efficiency_precision": -1},
            {"healthy_threshold": 70.0, "fair_threshold": 80.0},
            {"log_level": "LOUD"},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            create_default_config(**overrides)
