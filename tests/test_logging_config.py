"""Tests for the shared logging setup."""

from __future__ import annotations

import logging

import pytest

from pitchdeck.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _clean_pitchdeck_logger():
    logger = logging.getLogger("pitchdeck")
    saved = list(logger.handlers)
    for handler in saved:
        logger.removeHandler(handler)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in saved:
        logger.addHandler(handler)
    logger.propagate = True


class TestConfigureLogging:
    def test_repeated_calls_install_one_handler(self, _clean_pitchdeck_logger) -> None:
        configure_logging("INFO")
        configure_logging("DEBUG")
        assert len(_clean_pitchdeck_logger.handlers) == 1
        assert _clean_pitchdeck_logger.level == logging.DEBUG

    def test_handler_reinstalled_after_removal(self, _clean_pitchdeck_logger) -> None:
        configure_logging()
        _clean_pitchdeck_logger.removeHandler(_clean_pitchdeck_logger.handlers[0])
        configure_logging()
        assert len(_clean_pitchdeck_logger.handlers) == 1

    def test_unknown_level_falls_back_to_info(self, _clean_pitchdeck_logger) -> None:
        configure_logging("chatty")
        assert _clean_pitchdeck_logger.level == logging.INFO
