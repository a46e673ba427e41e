import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Collects loguru records as "LEVEL: message" strings."""
    messages = []
    handler_id = logger.add(lambda m: messages.append(f"{m.record['level'].name}: {m.record['message']}"), level="DEBUG")
    yield messages
    logger.remove(handler_id)
