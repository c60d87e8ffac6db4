from __future__ import annotations

import logging
from io import StringIO
from unittest.mock import patch

from sheetchart.logging.error_log import ErrorLogBuffer
from sheetchart.logging.init import (
    SUMMARY_LEVEL,
    LabeledFormatter,
    get_logger,
    log_summary,
    reset_logging,
    set_debug,
    setup_logging,
)
from sheetchart.models.error_record import ErrorRecord


def _capture(logger: logging.Logger) -> StringIO:
    captured = StringIO()
    logger.handlers[0].setStream(captured)
    return captured


def test_setup_logging_creates_logger_with_labeled_formatter():
    logger = setup_logging()

    assert logger.name == "sheetchart"
    assert logger.level == logging.INFO
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    handler = logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert isinstance(handler.formatter, LabeledFormatter)


def test_logging_labeled_prefixes():
    logger = setup_logging()
    captured = _capture(logger)

    logger.info("Test info message")
    logger.warning("Test warning message")
    logger.error("Test error message")
    logger.log(SUMMARY_LEVEL, "Test summary message")
    logger.debug("hidden at INFO")

    lines = captured.getvalue().strip().split("\n")
    assert lines == [
        "INFO Test info message",
        "WARN Test warning message",
        "ERROR Test error message",
        "SUMMARY Test summary message",
    ]


def test_module_loggers_share_the_package_handler():
    logger = setup_logging()
    captured = _capture(logger)

    logging.getLogger("sheetchart.services.pipeline").warning("from a module")

    assert captured.getvalue() == "WARN from a module\n"


def test_set_debug_enables_debug_lines():
    logger = setup_logging()
    captured = _capture(logger)

    set_debug(logger)
    logger.debug("details")

    assert logger.level == logging.DEBUG
    assert captured.getvalue() == "DEBUG details\n"


def test_get_logger_returns_configured_logger():
    assert get_logger() is setup_logging()
    assert get_logger().name == "sheetchart"


def test_setup_logging_idempotent():
    logger1 = setup_logging()
    logger2 = setup_logging()
    assert logger1 is logger2
    assert len(logger1.handlers) == 1


def test_reset_logging_drops_handlers():
    logger = setup_logging()
    reset_logging()
    assert logger.handlers == []
    assert setup_logging() is logger
    assert len(logger.handlers) == 1


def test_summary_level_name():
    setup_logging()
    assert logging.getLevelName(SUMMARY_LEVEL) == "SUMMARY"


def test_log_summary_convenience_function():
    logger = setup_logging()
    captured = _capture(logger)

    log_summary("sources=2/2 success=2 failed=0 records=60 columns=14 elapsed_sec=0.5")

    assert captured.getvalue() == (
        "SUMMARY sources=2/2 success=2 failed=0 records=60 columns=14 elapsed_sec=0.5\n"
    )


def test_logging_with_progress_bar_disabled():
    with patch("sys.stdout.isatty", return_value=False):
        logger = setup_logging()
        logger.info("Test message when not TTY")
        assert logger.level == logging.INFO


def test_error_log_buffer_coexists_with_logger():
    logger = setup_logging()
    buffer = ErrorLogBuffer()
    buffer.append(ErrorRecord.create("sales.json", -1, "UPSTREAM_RESPONSE", "No data found in the sheet"))
    logger.info("Processing sales.json")
    assert len(buffer) == 1
