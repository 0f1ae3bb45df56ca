from __future__ import annotations

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_loguru():
    # setup_logging() binds handlers to the captured stderr of the running test
    yield
    logger.remove()


@pytest.fixture
def records() -> list[str]:
    """Collects diagnostic lines passed to a solver's sink."""
    return []
