"""Logging configuration for the application."""

import logging
import sys

from hradmin.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Client libraries that log every Firestore round trip at INFO/DEBUG.
_NOISY_LOGGERS = ("httpx", "httpcore", "google.auth", "urllib3")


def setup_logging() -> None:
    """Configure root logging to stdout.

    DEBUG when settings.debug is True (cache hits and misses become
    visible), otherwise INFO. HTTP client loggers stay at WARNING unless
    debugging.
    """
    debug = get_settings().debug
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if debug else logging.WARNING)
