"""Tests for logging configuration."""

import logging

from levelup_ai.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("levelup_ai")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
