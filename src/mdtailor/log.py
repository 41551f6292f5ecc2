"""Logging setup for the mdtailor package logger"""

import logging
from typing import Optional


LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Point the package logger at the current stderr and set its level.

    Calling again replaces the handler installed by the previous call.
    """
    global _handler
    logger = logging.getLogger("mdtailor")
    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(level.upper())
    return logger
