import logging
import os

import pytest

from metricize.config import reset_settings
from metricize.utils.logging import LOGGER_NAME


@pytest.fixture(autouse=True)
def _isolated_runtime(monkeypatch):
    for key in list(os.environ):
        if key.startswith("METRICIZE_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
