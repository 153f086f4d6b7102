"""Tests for setup_logging (laplace_explorer.logging_config)."""

import logging

import pytest

from laplace_explorer.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_logger():
    logger = logging.getLogger("laplace_explorer")
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_single_console_handler_on_repeat_calls():
    setup_logging(logging.INFO)
    logger = setup_logging(logging.INFO)
    assert logger.name == "laplace_explorer"
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_accepts_level_names():
    logger = setup_logging("DEBUG")
    assert logger.level == logging.DEBUG


def test_file_handler(tmp_path):
    log_file = tmp_path / "explorer.log"
    logger = setup_logging(logging.INFO, log_file=str(log_file))
    assert len(logger.handlers) == 2
    logging.getLogger("laplace_explorer.sampler").info("hello")
    for handler in logger.handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "laplace_explorer.sampler - INFO - hello" in text
