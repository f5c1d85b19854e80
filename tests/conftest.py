import pytest
import structlog
from loguru import logger as loguru_logger

from random_wikiquote.config import reload_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Rebuild the cached settings around every test so env changes never leak."""
    reload_config()
    yield
    reload_config()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks and structlog routing that a test's configure_logging call installed."""
    yield
    loguru_logger.remove()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
