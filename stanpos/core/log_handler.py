"""Logging setup for the command line interface."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from stanpos.core.console import err_console

LOG_FORMAT = "%(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(log_level: str = "warning") -> None:
    """Send log messages from stanpos to stderr, formatted by rich.

    Args:
        log_level: Minimum level of messages to show.
    """
    handler = RichHandler(console=err_console, show_path=False, log_time_format=DATE_FORMAT)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger = logging.getLogger("stanpos")
    logger.setLevel(log_level.upper())
    # Replace any handler added by an earlier call
    for old_handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(old_handler)
    logger.addHandler(handler)
