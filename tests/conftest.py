import logging
from collections.abc import Iterator

import pytest

from multi_interceptors.observability.logging import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Drop structured handlers so no test writes into another test's stream."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
