"""Unit tests for log.py"""

import logging

from mdtailor.log import configure_logging


def test_configure_logging_sets_level():
    logger = configure_logging("debug")
    assert logger.name == "mdtailor"
    assert logger.level == logging.DEBUG
    configure_logging("WARNING")


def test_configure_logging_replaces_handler():
    """Repeated calls keep a single package handler."""
    configure_logging()
    count = len(logging.getLogger("mdtailor").handlers)
    configure_logging()
    assert len(logging.getLogger("mdtailor").handlers) == count
