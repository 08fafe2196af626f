"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

import pytest

from src.infrastructure.logging import logger as logger_module


@pytest.fixture
def log_root(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240305"),
    )
    return tmp_path


def _detach(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_builder_writes_dated_file_in_subdir(log_root):
    """The file handler should target logs/<subdir>/<date>_<prefix>.log."""
    builder = (
        logger_module.LoggerBuilder()
        .name(f"budget.test.{log_root.name}")
        .subdir("budgets")
        .prefix("edits")
        .console(True)
        .level(logging.DEBUG)
    )

    built = builder.build()

    assert built.level == logging.DEBUG
    assert built.propagate is False
    file_handlers = [
        handler
        for handler in built.handlers
        if isinstance(handler, logging.FileHandler)
    ]
    assert [handler.baseFilename for handler in file_handlers] == [
        str(log_root / "logs" / "budgets" / "20240305_edits.log")
    ]
    assert len(built.handlers) == 2
    assert builder.build() is built
    assert len(built.handlers) == 2
    _detach(built)


def test_builder_uses_custom_factories(log_root):
    """Custom formatter and handler factories should be honored."""
    fmt = logging.Formatter("%(message)s")
    handler = logging.NullHandler()
    seen = {}

    def _file_handler(path, formatter):
        seen["path"] = path
        seen["formatter"] = formatter
        return handler

    built = (
        logger_module.LoggerBuilder()
        .name(f"budget.custom.{log_root.name}")
        .console(False)
        .formatter(lambda: fmt)
        .file_handler(_file_handler)
        .build()
    )

    assert built.handlers == [handler]
    assert seen["formatter"] is fmt
    assert seen["path"].name == "20240305_app_logs.log"
    _detach(built)


def test_default_handlers_log_info_and_above(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "budget.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    for handler in (file_handler, console_handler):
        assert handler.level == logging.INFO
        assert handler.formatter is fmt
    assert isinstance(file_handler, logging.FileHandler)
    file_handler.close()


def test_logger_wrapper_forwards_calls(monkeypatch):
    """Wrapper methods should forward arguments to the built logger."""
    wrapped = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: wrapped,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    app_logger = logger_module.Logger("budget")
    app_logger.info("saved %s lines", 3)
    app_logger.warning("skipped")
    app_logger.error("failed", exc_info=True)
    app_logger.debug("dbg")
    app_logger.critical("down")

    wrapped.info.assert_called_once_with("saved %s lines", 3)
    wrapped.warning.assert_called_once_with("skipped")
    wrapped.error.assert_called_once_with("failed", exc_info=True)
    wrapped.debug.assert_called_once_with("dbg")
    wrapped.critical.assert_called_once_with("down")
    assert logger_module.Logger("other") is app_logger


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: MagicMock(),
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert app_logger.logger is not usage_logger.logger


def test_usage_logger_writes_to_usage_dir_without_console(log_root, monkeypatch):
    """UsageLogger should log to logs/usage only."""
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    usage = logger_module.UsageLogger(f"budget.usage.{log_root.name}")

    handlers = usage.logger.handlers
    assert len(handlers) == 1
    assert handlers[0].baseFilename == str(
        log_root / "logs" / "usage" / "20240305_usage_logs.log"
    )
    _detach(usage.logger)
