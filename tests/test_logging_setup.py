"""Tests for logging configuration."""

import logging

import pytest

from config.settings import LoggingSettings, Settings
from compounder.core import create_session, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_setup_logging_writes_file(tmp_path, restore_root_logger) -> None:
    log_file = tmp_path / "logs" / "calculator.log"
    setup_logging("debug", log_file)

    logging.getLogger("compounder.test").info("hello from the calculator")
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert restore_root_logger.level == logging.DEBUG
    content = log_file.read_text()
    assert "hello from the calculator" in content
    assert "compounder.test" in content


def test_setup_logging_is_idempotent(tmp_path, restore_root_logger) -> None:
    before = len(restore_root_logger.handlers)
    setup_logging("INFO", tmp_path / "a.log")
    setup_logging("WARNING", tmp_path / "b.log")

    assert len(restore_root_logger.handlers) == before + 2
    assert restore_root_logger.level == logging.WARNING


def test_create_session_configures_logging(tmp_path, restore_root_logger) -> None:
    log_file = tmp_path / "logs" / "calculator.log"
    settings = Settings(logging=LoggingSettings(level="DEBUG", file=log_file))

    session = create_session(settings, url="http://x.test/?trades=12", configure_logging=True)
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert session.parameters.num_trades == 12
    assert restore_root_logger.level == logging.DEBUG
    assert "Restoring parameters from share link" in log_file.read_text()


def test_create_session_leaves_logging_alone_by_default(tmp_path, restore_root_logger) -> None:
    log_file = tmp_path / "logs" / "calculator.log"
    settings = Settings(logging=LoggingSettings(file=log_file))

    create_session(settings)
    assert not log_file.exists()
