"""Threshold evaluation for space weather feeds.

Each evaluator turns one feed's readings into the notifications that
should be considered for sending. Duplicate suppression and delivery
happen in the monitor.
"""

from .config import Config
from .models import AlertSource, BzReading, CategoricalAlert, KpReading, Notification

# NOAA scale levels 3-5 (strong to extreme) for geomagnetic storms (G),
# solar radiation storms (S) and radio blackouts (R). Levels 1-2 are ignored.
SEVERE_SCALE_CODES: tuple[str, ...] = (
    "G3", "G4", "G5",
    "S3", "S4", "S5",
    "R3", "R4", "R5",
)

SWPC_ALERT_TEMPLATE = "🌐 SWPC Alert: {message}"
KP_ALERT_TEMPLATE = (
    "🧠 K-index Alert: Kp = {kp:.2f} at {time_tag}\n"
    "Linked to sleep disruption, anxiety, and focus issues."
)
BZ_ALERT_TEMPLATE = (
    "🧠 Geomagnetic Instability Alert: Bz = {bz:.2f} nT at {time_tag}\n"
    "May disrupt sleep, mood, or focus in sensitive individuals."
)


def is_severe(message: str) -> bool:
    """Check if an alert message mentions a scale level of 3 or above."""
    return any(code in message for code in SEVERE_SCALE_CODES)


def evaluate_alerts(alerts: list[CategoricalAlert]) -> list[Notification]:
    """Select every severe alert in the batch.

    The fingerprint is taken over the source message, not the SMS body.
    """
    return [
        Notification(
            source=AlertSource.SWPC_ALERT,
            body=SWPC_ALERT_TEMPLATE.format(message=alert.message),
            dedupe_text=alert.message,
        )
        for alert in alerts
        if is_severe(alert.message)
    ]


def evaluate_kp(readings: list[KpReading], config: Config) -> Notification | None:
    """Check the latest Kp reading against the threshold (inclusive).

    A data gap (null value) in the latest reading produces no notification.
    """
    if not readings:
        return None

    latest = readings[-1]
    if latest.kp_index is None or not latest.kp_index >= config.kp_threshold:
        return None

    body = KP_ALERT_TEMPLATE.format(kp=latest.kp_index, time_tag=latest.time_tag)
    return Notification(source=AlertSource.KP_INDEX, body=body, dedupe_text=body)


def evaluate_bz(readings: list[BzReading], config: Config) -> Notification | None:
    """Check the latest Bz reading against the threshold.

    Bz alerts when the field is strictly more southward (more negative)
    than the threshold. A null latest value produces no notification.
    """
    if not readings:
        return None

    latest = readings[-1]
    if latest.bz_gsm is None or not latest.bz_gsm < config.bz_threshold:
        return None

    body = BZ_ALERT_TEMPLATE.format(bz=latest.bz_gsm, time_tag=latest.time_tag)
    return Notification(source=AlertSource.BZ_FIELD, body=body, dedupe_text=body)
