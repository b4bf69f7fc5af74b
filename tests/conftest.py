"""Shared pytest fixtures."""

import logging

import pytest

from shacore.util.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_shacore_logger():
    """Drop handlers added by configure_logging so tests never share streams."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()
    logger.setLevel(logging.NOTSET)
