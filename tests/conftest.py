import logging

import pytest

from order_pricing.config import PACKAGE_LOGGER, load_config


@pytest.fixture(autouse=True)
def clear_order_pricing_env(monkeypatch):
    for key in [
        "ORDER_PRICING_CURRENCY",
        "ORDER_PRICING_LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
