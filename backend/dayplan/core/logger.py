"""
Logging setup shared by services.
"""

import logging
import sys

from dayplan.core.config import get_settings

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """
    Get a logger writing to stdout at the configured level.

    Handlers are attached once per logger name, so repeated calls
    (e.g. module reloads in tests) do not duplicate output.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(get_settings().LOG_LEVEL.upper())
    return logger
