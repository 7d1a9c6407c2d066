"""Tests for configuration loading."""

import json
from dataclasses import FrozenInstanceError

import pytest

from swpc_alerts.config import Config, ConfigError, load_config


FULL_CONFIG = {
    "twilio_sid": "AC123",
    "twilio_auth": "secret",
    "twilio_from": "+15550001111",
    "twilio_to": "+15559998888",
    "dry_run": True,
    "check_interval_minutes": 10,
    "kp_threshold": 6.5,
    "bz_threshold": -10,
    "proton_flux_threshold": 10.0,
    "xray_flux_threshold": 0.0001,
}


class TestLoadConfig:
    """Test reading the JSON config file."""

    def test_load_full_config(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(FULL_CONFIG))

        config = load_config(path)

        assert config.twilio_sid == "AC123"
        assert config.twilio_to == "+15559998888"
        assert config.dry_run is True
        assert config.check_interval_minutes == 10
        assert config.check_interval_seconds == 600
        assert config.kp_threshold == 6.5
        assert config.bz_threshold == -10.0
        assert isinstance(config.bz_threshold, float)
        assert config.proton_flux_threshold == 10.0
        assert config.xray_flux_threshold == 0.0001

    def test_missing_file_is_fatal(self, tmp_path):
        with pytest.raises(ConfigError, match="Failed to load config"):
            load_config(tmp_path / "absent.json")

    def test_invalid_json_is_fatal(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{ not json")

        with pytest.raises(ConfigError, match="Failed to parse config"):
            load_config(path)

    def test_default_path_from_environment(self, tmp_path, monkeypatch):
        path = tmp_path / "env-config.json"
        path.write_text(json.dumps({"kp_threshold": 8.0}))
        monkeypatch.setattr("swpc_alerts.config.CONFIG_PATH", str(path))

        assert load_config().kp_threshold == 8.0


class TestConfigFromDict:
    """Test field validation."""

    def test_defaults_for_absent_keys(self):
        config = Config.from_dict({})

        assert config.twilio_sid == ""
        assert config.dry_run is False
        assert config.check_interval_minutes == 15
        assert config.kp_threshold == 7.0
        assert config.bz_threshold == -8.0

    def test_unknown_keys_ignored(self):
        config = Config.from_dict({"kp_threshold": 5, "extra": "x"})
        assert config.kp_threshold == 5.0

    def test_non_object_rejected(self):
        with pytest.raises(ConfigError):
            Config.from_dict([1, 2, 3])

    @pytest.mark.parametrize("field,value", [
        ("twilio_sid", 123),
        ("dry_run", "yes"),
        ("check_interval_minutes", 1.5),
        ("check_interval_minutes", True),
        ("kp_threshold", "7"),
    ])
    def test_wrong_type_rejected(self, field, value):
        with pytest.raises(ConfigError, match=field):
            Config.from_dict({field: value})

    def test_interval_must_be_positive(self):
        with pytest.raises(ConfigError, match="check_interval_minutes"):
            Config.from_dict({"check_interval_minutes": 0})

    def test_config_is_immutable(self):
        config = Config.from_dict(FULL_CONFIG)
        with pytest.raises(FrozenInstanceError):
            config.kp_threshold = 1.0

    def test_is_twilio_configured(self):
        assert Config.from_dict(FULL_CONFIG).is_twilio_configured()
        assert not Config.from_dict({"twilio_sid": "AC123"}).is_twilio_configured()
