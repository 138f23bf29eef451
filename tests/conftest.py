from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_loadsensor_logging():
    yield
    logger = logging.getLogger("loadsensor")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
