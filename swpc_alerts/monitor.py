"""Space weather monitoring service.

Polls the SWPC feeds, evaluates them against the configured thresholds
and sends an SMS for each condition not already in the alert cache.
"""

import logging
import threading

from .alert_cache import AlertCache
from .config import Config
from .evaluators import evaluate_alerts, evaluate_bz, evaluate_kp
from .models import Notification
from .notifier import SMSNotifier
from .swpc_client import FeedError, SWPCClient

logger = logging.getLogger(__name__)


class SpaceWeatherMonitor:
    """Monitors SWPC feeds and notifies on new threshold crossings."""

    def __init__(
        self,
        config: Config,
        cache: AlertCache,
        notifier: SMSNotifier | None = None,
        client: SWPCClient | None = None,
    ):
        self.config = config
        self.cache = cache
        self.notifier = notifier or SMSNotifier(config)
        self.client = client or SWPCClient()
        self.alerts_sent = 0
        self.cycles_completed = 0

    def check_swpc_alerts(self) -> int:
        """Check the categorical alerts feed. Returns notifications sent."""
        try:
            alerts = self.client.get_alerts()
        except FeedError as e:
            logger.error(f"Error fetching SWPC alerts: {e}")
            return 0

        return sum(self._dispatch(n) for n in evaluate_alerts(alerts))

    def check_kp_index(self) -> int:
        """Check the latest planetary K-index. Returns notifications sent."""
        try:
            readings = self.client.get_kp_index()
        except FeedError as e:
            logger.error(f"Error fetching Kp index: {e}")
            return 0

        notification = evaluate_kp(readings, self.config)
        return self._dispatch(notification) if notification else 0

    def check_bz_field(self) -> int:
        """Check the latest solar wind Bz. Returns notifications sent."""
        try:
            readings = self.client.get_solar_wind()
        except FeedError as e:
            logger.error(f"Error fetching Bz field: {e}")
            return 0

        notification = evaluate_bz(readings, self.config)
        return self._dispatch(notification) if notification else 0

    def _dispatch(self, notification: Notification) -> int:
        """Send a notification unless its fingerprint was already seen.

        The fingerprint is recorded before sending, so a failed send is not
        retried on later cycles.
        """
        fp = notification.fingerprint
        if self.cache.contains(fp):
            logger.debug(
                f"Skipping duplicate {notification.source.value} alert {fp[:12]}"
            )
            return 0

        self.cache.record(fp)
        logger.info(f"New {notification.source.value} alert {fp[:12]}")
        if not self.notifier.send(notification.body):
            logger.error(f"SMS failed for {notification.source.value} alert {fp[:12]}")
            return 0

        self.alerts_sent += 1
        return 1

    def run_once(self) -> int:
        """
        Run a single check cycle and persist the cache.

        Returns the number of notifications sent this cycle.
        """
        sent = 0
        sent += self.check_swpc_alerts()
        sent += self.check_kp_index()
        sent += self.check_bz_field()

        self.cache.save()
        self.cycles_completed += 1

        if sent:
            logger.info(f"Sent {sent} notification(s) this cycle")
        else:
            logger.info("No new space weather alerts")
        return sent

    def run_continuous(self, stop_event: threading.Event | None = None) -> None:
        """
        Run the monitoring loop until stopped.

        Args:
            stop_event: Setting this event ends the loop after the current
                        cycle or interrupts the wait between cycles
        """
        stop_event = stop_event or threading.Event()
        interval = self.config.check_interval_seconds

        logger.info("Starting space weather alert monitor...")
        logger.info(f"Poll interval: {self.config.check_interval_minutes} minute(s)")
        if self.config.dry_run:
            logger.info("Running in dry-run mode. No SMS will be sent.")

        try:
            while not stop_event.is_set():
                try:
                    self.run_once()
                except Exception as e:
                    logger.exception(f"Error during monitoring cycle: {e}")

                logger.debug(f"Sleeping for {interval} seconds...")
                if stop_event.wait(interval):
                    break
        except KeyboardInterrupt:
            logger.info("Monitor stopped by user")

        logger.info(
            f"Monitor exiting after {self.cycles_completed} cycle(s), "
            f"{self.alerts_sent} alert(s) sent"
        )
