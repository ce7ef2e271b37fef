"""Logging configuration.

All loggers live under the ``exercise_tracker`` namespace and share a single
stdout handler installed on the namespace logger.
"""

import logging
import sys
from config.settings import settings

LOGGER_NAMESPACE = "exercise_tracker"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _namespace_logger() -> logging.Logger:
    root = logging.getLogger(LOGGER_NAMESPACE)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        root.addHandler(handler)
        root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
        root.propagate = False
    return root


def setup_logger(name: str = __name__) -> logging.Logger:
    """Return the logger for module ``name``, e.g. ``exercise_tracker.api.routes``."""
    _namespace_logger()
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")
