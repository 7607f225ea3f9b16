"""Logging setup for the vcs command line."""

import logging
import sys


LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class SafeStreamHandler(logging.StreamHandler):
    """
    Stream handler that tolerates a closed stream.

    click's test runner swaps stderr out from under long-lived handlers, so
    writes to a closed stream are dropped instead of reported.
    """

    def handleError(self, record):
        _, exc, _ = sys.exc_info()
        if isinstance(exc, ValueError) and 'closed file' in str(exc).lower():
            return
        super().handleError(record)


def configure_logging(log_level: str = 'WARNING') -> None:
    """
    Configure the ``tinyvcs`` logger hierarchy.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ...)

    Raises:
        ValueError: If log_level is not a known level name
    """
    logger = logging.getLogger('tinyvcs')
    logger.handlers.clear()

    handler = SafeStreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(log_level.upper())
    logger.propagate = False
