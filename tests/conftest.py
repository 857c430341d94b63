"""Global pytest configuration and fixtures for all tests."""

import os

import pytest
from loguru import logger

# Settings are read at import time, so the test environment must be in
# place before any userhub module is collected.
TEST_ENV_VARS = {
    "INITIALIZE_DATABASE": "false",
    "ENABLE_DOCS": "false",
    "LOG_LEVEL": "DEBUG",
    "LOG_FORMAT": "human",
    "POSTGRES_HOST": "db.test",
    "POSTGRES_USER": "userhub",
    "POSTGRES_PASSWORD": "p@ss:w/rd",
}
for _key, _value in TEST_ENV_VARS.items():
    os.environ[_key] = _value


@pytest.fixture
def log_records():
    """
    Capture loguru records emitted during a test.

    Yields:
        List of loguru record dicts (level, message, extra, ...)
    """
    records: list[dict] = []
    handler_id = logger.add(
        lambda message: records.append(message.record), level="DEBUG"
    )
    yield records
    logger.remove(handler_id)
