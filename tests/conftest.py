"""Shared fixtures for SWPC alert tests."""

from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from swpc_alerts.alert_cache import AlertCache
from swpc_alerts.config import Config


@pytest.fixture
def config():
    """Live-mode config with default thresholds (Kp 7.0, Bz -8.0)."""
    return Config(
        twilio_sid="AC123",
        twilio_auth="secret",
        twilio_from="+15550001111",
        twilio_to="+15559998888",
        dry_run=False,
        check_interval_minutes=15,
        kp_threshold=7.0,
        bz_threshold=-8.0,
    )


@pytest.fixture
def dry_run_config(config):
    return replace(config, dry_run=True)


@pytest.fixture
def cache(tmp_path):
    """Empty cache stored in a temp directory."""
    return AlertCache(tmp_path / "cache.json")


@pytest.fixture
def notifier():
    """Notifier mock that always reports success."""
    mock = MagicMock()
    mock.send.return_value = True
    return mock
