"""Data models for SWPC Space Weather Alerts."""

from dataclasses import dataclass
from enum import Enum

from .fingerprint import fingerprint


def _optional_float(value) -> float | None:
    """Convert a feed value to float, keeping JSON null as None."""
    return None if value is None else float(value)


class AlertSource(Enum):
    """Feed that produced a notification."""
    SWPC_ALERT = "swpc_alert"
    KP_INDEX = "kp_index"
    BZ_FIELD = "bz_field"


class CacheLoadStatus(Enum):
    """Outcome of loading the persisted alert cache."""
    LOADED = "loaded"
    MISSING = "missing"    # No cache file yet (first run)
    CORRUPT = "corrupt"    # Unreadable or malformed, started empty


@dataclass
class CategoricalAlert:
    """Free-text alert product from the SWPC alerts feed."""
    message: str
    product_id: str | None = None
    issue_datetime: str | None = None

    @classmethod
    def from_json(cls, record: dict) -> "CategoricalAlert":
        message = record["message"]
        if not isinstance(message, str):
            raise TypeError(f"alert message must be a string, got {type(message).__name__}")
        return cls(
            message=message,
            product_id=record.get("product_id"),
            issue_datetime=record.get("issue_datetime"),
        )


@dataclass
class KpReading:
    """Planetary K-index sample."""
    time_tag: str
    kp_index: float | None  # None during data gaps

    @classmethod
    def from_json(cls, record: dict) -> "KpReading":
        return cls(
            time_tag=str(record["time_tag"]),
            kp_index=_optional_float(record["kp_index"]),
        )


@dataclass
class BzReading:
    """Interplanetary magnetic field Bz (GSM) sample, in nT."""
    time_tag: str
    bz_gsm: float | None  # None during data gaps

    @classmethod
    def from_json(cls, record: dict) -> "BzReading":
        return cls(
            time_tag=str(record["time_tag"]),
            bz_gsm=_optional_float(record["bz_gsm"]),
        )


@dataclass
class FluxReading:
    """Particle or X-ray flux sample.

    Parsed for completeness; no evaluator uses flux readings yet.
    """
    time_tag: str
    energy: str
    flux: float

    @classmethod
    def from_json(cls, record: dict) -> "FluxReading":
        return cls(
            time_tag=str(record["time_tag"]),
            energy=str(record["energy"]),
            flux=float(record["flux"]),
        )


@dataclass
class Notification:
    """A notifiable condition rendered as SMS text."""
    source: AlertSource
    body: str
    dedupe_text: str

    @property
    def fingerprint(self) -> str:
        """Cache key for duplicate suppression."""
        return fingerprint(self.dedupe_text)
