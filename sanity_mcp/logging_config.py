"""Process-wide logging setup for the server."""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s - %(message)s"

# Chatty third-party loggers kept at WARNING unless debugging
NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str = "INFO", debug: bool = False) -> None:
    """Configure root logging to stderr.

    Args:
        level: Level name for the root logger (e.g. "INFO")
        debug: Force DEBUG and let third-party loggers through
    """
    resolved = logging.DEBUG if debug else logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(level=resolved, format=LOG_FORMAT, stream=sys.stderr, force=True)

    if not debug:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
