#!/usr/bin/env python3
"""CLI entry point for the SWPC Space Weather Alert monitor.

Usage:
    swpc-alerts            Run the continuous monitor
    swpc-alerts --test     Send one test SMS and exit
"""

import argparse
import logging
import sys

from .alert_cache import AlertCache
from .config import LOG_LEVEL, ConfigError, load_config
from .monitor import SpaceWeatherMonitor
from .notifier import SMSNotifier

logger = logging.getLogger(__name__)

TEST_MESSAGE = "🚨 Test Alert: Space weather alert system is operational."


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def send_test(notifier: SMSNotifier) -> int:
    """Send the fixed test notification. Returns a process exit code."""
    logger.info("Running in test mode - sending test SMS...")
    if not notifier.send(TEST_MESSAGE):
        logger.error("Failed to send test SMS")
        return 1
    logger.info("Test SMS sent successfully.")
    return 0


def is_test_invocation(argv: list[str]) -> bool:
    """Check for the one-shot test mode: exactly one argument, ``--test``.

    Anything else, including no arguments, selects the monitor loop.
    """
    parser = argparse.ArgumentParser(
        description="Space weather alert monitor - SMS on severe SWPC conditions",
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument(
        "--test",
        action="store_true",
        help="Send a single test SMS and exit",
    )
    try:
        args, extra = parser.parse_known_args(argv)
    except argparse.ArgumentError:
        return False
    return args.test and not extra and len(argv) == 1


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]
    test_mode = is_test_invocation(argv)

    setup_logging()

    try:
        config = load_config()
    except ConfigError as e:
        logger.error(str(e))
        return 1

    notifier = SMSNotifier(config)
    if test_mode:
        return send_test(notifier)

    if not notifier.is_configured():
        logger.warning("Twilio credentials incomplete; live SMS sends will fail")

    cache = AlertCache.load()
    monitor = SpaceWeatherMonitor(config, cache, notifier=notifier)
    monitor.run_continuous()
    return 0


if __name__ == "__main__":
    sys.exit(main())
