"""
Shared fixtures for promptcodec tests.
"""
import pytest

from promptcodec.utils.logging import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers installed by init() so each test starts clean."""
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(0)
