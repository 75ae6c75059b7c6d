import logging

import pytest

from better_gradient.samples.palette import SAMPLE_PALETTE


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop console handlers the CLI installs so they don't outlive captured streams."""
    logger = logging.getLogger("better_gradient")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def small_palette():
    return {
        "blue": {"500": "#3b82f6"},
        "white": "#ffffff",
    }


@pytest.fixture
def sample_palette():
    return SAMPLE_PALETTE
