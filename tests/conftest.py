"""Shared fixtures."""

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Capture the package's log records, which are disabled by default."""
    messages = []
    logger.enable("evm_signature")
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("evm_signature")
