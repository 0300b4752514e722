"""Shared pytest fixtures for intcalc tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_intcalc_logger():
    """Undo handlers and levels installed by CLI invocations."""
    yield
    logger = logging.getLogger("intcalc")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
