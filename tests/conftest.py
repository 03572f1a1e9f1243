from __future__ import annotations

import logging
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_iconbuild_logger() -> Iterator[None]:
    """Drop handlers the CLI attached so later tests never log into a closed capture stream."""
    yield
    logger = logging.getLogger("iconbuild")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
