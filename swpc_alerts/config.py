"""Configuration management for SWPC Space Weather Alerts."""

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    # Fall back to template for defaults
    template_path = Path(__file__).parent.parent / ".env.template"
    if template_path.exists():
        load_dotenv(template_path)


# File locations and log level come from the environment; runtime
# parameters come from the JSON config document.
CONFIG_PATH: str = os.getenv(
    "SWPC_ALERTS_CONFIG", "~/.config/swpc-alerts/config.json"
)
ALERT_CACHE_PATH: str = os.getenv("SWPC_ALERT_CACHE", ".swpc-alert-cache.json")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


class ConfigError(Exception):
    """Configuration file is missing or cannot be parsed."""


@dataclass(frozen=True)
class Config:
    """Runtime configuration, loaded once at startup."""

    twilio_sid: str = ""
    twilio_auth: str = ""
    twilio_from: str = ""
    twilio_to: str = ""
    dry_run: bool = False
    check_interval_minutes: int = 15
    kp_threshold: float = 7.0
    bz_threshold: float = -8.0
    # Loaded and validated, but no evaluator consumes these yet.
    proton_flux_threshold: float = 0.1
    xray_flux_threshold: float = 0.0001

    @property
    def check_interval_seconds(self) -> int:
        return self.check_interval_minutes * 60

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Build a Config from a parsed JSON document.

        Unknown keys are ignored. Known keys must carry the right JSON type
        (integers are accepted for float fields).

        Raises:
            ConfigError: If the document is not an object or a field is
                wrongly typed or out of range.
        """
        if not isinstance(data, dict):
            raise ConfigError("Config document must be a JSON object")

        values = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            if f.type is str:
                ok = isinstance(value, str)
            elif f.type is bool:
                ok = isinstance(value, bool)
            elif f.type is int:
                ok = isinstance(value, int) and not isinstance(value, bool)
            else:
                ok = isinstance(value, (int, float)) and not isinstance(value, bool)
                if ok:
                    value = float(value)
            if not ok:
                raise ConfigError(
                    f"Config field '{f.name}' has invalid value {value!r}"
                )
            values[f.name] = value

        config = cls(**values)
        if config.check_interval_minutes < 1:
            raise ConfigError("check_interval_minutes must be at least 1")
        return config

    def is_twilio_configured(self) -> bool:
        """Check if Twilio credentials and numbers are all present."""
        return all([
            self.twilio_sid,
            self.twilio_auth,
            self.twilio_from,
            self.twilio_to,
        ])


def load_config(path: str | Path | None = None) -> Config:
    """Load configuration from a JSON file.

    Args:
        path: Config file location (default: SWPC_ALERTS_CONFIG or
              ~/.config/swpc-alerts/config.json)

    Raises:
        ConfigError: If the file is missing or cannot be parsed.
    """
    config_path = Path(os.path.expanduser(str(path or CONFIG_PATH)))
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Failed to load config {config_path}: {e}") from e
    except ValueError as e:
        raise ConfigError(f"Failed to parse config {config_path}: {e}") from e
    return Config.from_dict(data)
