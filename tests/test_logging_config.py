"""Tests for logger setup."""

from __future__ import annotations

import logging

import pytest

from spiral_pattern.logging_config import LOGGER_NAME, setup_logging


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_console_and_file_handlers(tmp_path):
    log_file = tmp_path / "spiral.log"

    logger = setup_logging(logging.DEBUG, str(log_file))
    logging.getLogger(f"{LOGGER_NAME}.geometry").debug("child message")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "spiral_pattern.geometry - DEBUG - child message" in text


def test_repeated_setup_does_not_duplicate_handlers():
    setup_logging(logging.INFO)
    logger = setup_logging("WARNING")

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
