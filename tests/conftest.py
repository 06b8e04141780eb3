"""
Root pytest configuration file for rest-skills tests.
"""

import logging
import os
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_environment():
    """Restore os.environ after each test and start outside read-only mode.

    The CLIs export READ_ONLY_MODE and the .env fallback exports credentials,
    so every test gets its own copy of the environment.
    """
    with patch.dict(os.environ):
        os.environ.pop("READ_ONLY_MODE", None)
        yield


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the logger changes made by setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    app_loggers = [
        logging.getLogger(name)
        for name in ("rest-skills", "rest-skills.gist", "rest-skills.confluence")
    ]
    app_levels = [logger.level for logger in app_loggers]
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    for logger, app_level in zip(app_loggers, app_levels):
        logger.setLevel(app_level)
