"""Tests de la configuración de logging."""

import logging

import pytest

from config.logging_config import setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_console_only_by_default(root_logger):
    setup_logging(logging.INFO)
    assert root_logger.level == logging.INFO
    assert [type(h) for h in root_logger.handlers] == [logging.StreamHandler]


def test_log_file_receives_messages(root_logger, tmp_path):
    log_path = tmp_path / "calculadora.log"
    setup_logging(logging.DEBUG, log_file=str(log_path))
    assert any(isinstance(h, logging.FileHandler) for h in root_logger.handlers)

    logging.getLogger("core.calculator").info("2 + 3 = 5")
    for handler in root_logger.handlers:
        handler.flush()

    content = log_path.read_text(encoding="utf-8")
    assert "core.calculator - INFO - 2 + 3 = 5" in content


def test_repeated_setup_does_not_duplicate_handlers(root_logger):
    setup_logging(logging.INFO)
    setup_logging(logging.WARNING)
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.WARNING
