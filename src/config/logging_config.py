"""
Logging configuration.

Installs a single console handler on the root logger. Called once by the
launcher before the server starts.
"""

import logging
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Module-level flag to prevent duplicate handler registration
_configured = False


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging with a consistent console format.

    Repeated calls only adjust the level; the handler is installed once.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)
    """
    global _configured

    root = logging.getLogger()
    root.setLevel(level.upper())

    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    root.addHandler(handler)
    _configured = True
