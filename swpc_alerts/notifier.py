"""SMS notifier using Twilio.

In dry-run mode nothing is sent; the message is logged instead.
"""

import logging

from twilio.base.exceptions import TwilioException
from twilio.rest import Client

from .config import Config

logger = logging.getLogger(__name__)


def mask_phone(phone: str) -> str:
    """Mask all but the last four digits of a phone number."""
    return phone[-4:].rjust(len(phone), "*")


class SMSNotifier:
    """Send SMS notifications via Twilio."""

    def __init__(self, config: Config, client: Client | None = None):
        """
        Initialize the notifier.

        Args:
            config: Runtime configuration (credentials, numbers, dry-run flag)
            client: Pre-built Twilio client (built lazily when omitted)
        """
        self.config = config
        self._client = client

    @property
    def client(self) -> Client:
        """Lazy-load Twilio client."""
        if self._client is None:
            self._client = Client(self.config.twilio_sid, self.config.twilio_auth)
        return self._client

    def send(self, body: str) -> bool:
        """
        Send an SMS message to the configured recipient.

        Args:
            body: The message text

        Returns:
            True if the message was accepted (always True in dry-run mode)
        """
        if self.config.dry_run:
            logger.info(f"[DRY RUN] SMS would be sent: {body}")
            return True

        masked = mask_phone(self.config.twilio_to)
        try:
            message = self.client.messages.create(
                body=body,
                from_=self.config.twilio_from,
                to=self.config.twilio_to,
            )
        except (TwilioException, OSError) as e:
            logger.error(f"SMS failed to {masked}: {e}")
            return False

        logger.info(f"SMS sent to {masked}. SID: {message.sid}")
        return True

    def is_configured(self) -> bool:
        """Check if the notifier can deliver (or is in dry-run mode)."""
        return self.config.dry_run or self.config.is_twilio_configured()
