"""SWPC Space Weather Alerts - SMS notification of severe space weather.

Polls NOAA Space Weather Prediction Center feeds for:
1. Alert products at NOAA scale level 3+ (G, S, R scales)
2. Planetary K-index at or above threshold
3. Solar wind Bz more southward than threshold

and sends one SMS per new condition.
"""

from .alert_cache import AlertCache
from .config import Config, ConfigError, load_config
from .evaluators import evaluate_alerts, evaluate_bz, evaluate_kp, is_severe
from .fingerprint import fingerprint
from .models import (
    AlertSource,
    BzReading,
    CacheLoadStatus,
    CategoricalAlert,
    KpReading,
    Notification,
)
from .monitor import SpaceWeatherMonitor
from .notifier import SMSNotifier
from .swpc_client import FeedError, SWPCClient

__all__ = [
    # Config
    "Config",
    "ConfigError",
    "load_config",
    # Models
    "AlertSource",
    "BzReading",
    "CacheLoadStatus",
    "CategoricalAlert",
    "KpReading",
    "Notification",
    # Components
    "AlertCache",
    "fingerprint",
    "SWPCClient",
    "FeedError",
    "evaluate_alerts",
    "evaluate_kp",
    "evaluate_bz",
    "is_severe",
    "SMSNotifier",
    "SpaceWeatherMonitor",
]
