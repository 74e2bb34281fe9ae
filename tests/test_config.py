"""Tests for environment-driven configuration."""

from pathlib import Path

import pytest

from src.airport_network.config import Config, Settings
from src.airport_network.exceptions import ConfigurationError


class TestConfigFromEnv:
    def test_defaults(self):
        settings = Config.from_env({})
        assert settings == Settings(
            airports_csv=Path("data/airports.csv"),
            routes_csv=Path("data/routes.csv"),
            distance_unit="km",
            sample_size=1,
            seed=None,
            output_dir=Path("output"),
        )

    def test_overrides(self):
        settings = Config.from_env({
            "AIRPORT_NETWORK_AIRPORTS_CSV": "/tmp/a.csv",
            "AIRPORT_NETWORK_ROUTES_CSV": "/tmp/r.csv",
            "AIRPORT_NETWORK_DISTANCE_UNIT": "m",
            "AIRPORT_NETWORK_SAMPLE_SIZE": "4",
            "AIRPORT_NETWORK_SEED": "42",
            "AIRPORT_NETWORK_OUTPUT_DIR": "/tmp/out",
        })
        assert settings.airports_csv == Path("/tmp/a.csv")
        assert settings.routes_csv == Path("/tmp/r.csv")
        assert settings.distance_unit == "m"
        assert settings.sample_size == 4
        assert settings.seed == 42
        assert settings.output_dir == Path("/tmp/out")

    def test_empty_value_falls_back_to_default(self):
        assert Config.from_env({"AIRPORT_NETWORK_DISTANCE_UNIT": ""}).distance_unit == "km"

    def test_non_integer_rejected(self):
        with pytest.raises(ConfigurationError, match="AIRPORT_NETWORK_SEED"):
            Config.from_env({"AIRPORT_NETWORK_SEED": "abc"})

    def test_negative_sample_size_rejected(self):
        with pytest.raises(ConfigurationError):
            Config.from_env({"AIRPORT_NETWORK_SAMPLE_SIZE": "-1"})
