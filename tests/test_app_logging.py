"""Tests for logging configuration."""

import logging

from travel_nutrition.api.app import create_app
from travel_nutrition.app_logging import configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger("travel_nutrition")
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging()
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.propagate is False


def test_configure_logging_applies_level_names() -> None:
    logger = logging.getLogger("travel_nutrition")

    configure_logging("debug")
    assert logger.level == logging.DEBUG

    configure_logging(logging.WARNING)
    assert logger.level == logging.WARNING
    configure_logging()


def test_create_app_uses_configured_log_level(container) -> None:
    container.settings.log_level = "WARNING"

    create_app(container)

    assert logging.getLogger("travel_nutrition").level == logging.WARNING
    configure_logging()
