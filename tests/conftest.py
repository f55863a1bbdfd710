import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger.remove()
    logger.disable("svg2vd")


@pytest.fixture
def log_records():
    """Records of everything svg2vd logs while the test runs."""
    records = []
    logger.enable("svg2vd")
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
