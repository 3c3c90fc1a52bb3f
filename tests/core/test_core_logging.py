"""Tests for the logging helpers with correlation ids."""

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, cast

from pythonjsonlogger import jsonlogger

from banana_stand.core.logging import (
    LOG_FILE_PATH,
    LOG_SCHEMA_VERSION,
    CorrelationIdFilter,
    VersionedJsonFormatter,
    bind_correlation_id,
    bind_log_user_id,
    correlation_id_context,
    get_correlation_id,
    get_log_user_id,
    get_logger,
    log_user_id_context,
    reset_correlation_id,
    reset_log_user_id,
)


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=None,
        exc_info=None,
    )


def test_correlation_filter_attaches_context():
    """Filter should attach the current correlation and user ids onto log records."""
    cid_token = bind_correlation_id("abc123")
    user_token = bind_log_user_id("safe-user")
    try:
        record = _record()
        assert CorrelationIdFilter().filter(record) is True
        record_any = cast(Any, record)
        assert record_any.__dict__["correlation_id"] == "abc123"
        assert record_any.__dict__["log_user_id"] == "safe-user"
    finally:
        reset_log_user_id(user_token)
        reset_correlation_id(cid_token)


def test_correlation_filter_defaults_to_dash():
    record = _record()
    CorrelationIdFilter().filter(record)
    record_any = cast(Any, record)
    assert record_any.__dict__["correlation_id"] == "-"
    assert record_any.__dict__["log_user_id"] == "-"


def test_context_managers_restore_state():
    """Nested contexts restore the original values."""
    with (
        correlation_id_context("ctx"),
        correlation_id_context("nested"),
        log_user_id_context("user-a"),
    ):
        assert get_correlation_id() == "nested"
        assert get_log_user_id() == "user-a"
    assert get_correlation_id() is None
    assert get_log_user_id() is None


def test_get_logger_installs_shared_handlers_once():
    """Module loggers rely on one shared stream handler and one rotating file handler."""
    first = get_logger("banana_stand.tests.logging.first")
    second = get_logger("banana_stand.tests.logging.second")

    assert not first.handlers
    assert not second.handlers

    shared = [
        handler
        for handler in logging.getLogger().handlers
        if any(isinstance(flt, CorrelationIdFilter) for flt in handler.filters)
    ]
    rotating = [handler for handler in shared if isinstance(handler, RotatingFileHandler)]
    assert len(shared) == 2
    assert len(rotating) == 1
    assert Path(rotating[0].baseFilename) == LOG_FILE_PATH
    assert all(isinstance(handler.formatter, jsonlogger.JsonFormatter) for handler in shared)


def test_versioned_formatter_emits_schema_version():
    formatter = VersionedJsonFormatter(
        "%(levelname)s %(message)s", schema_version=LOG_SCHEMA_VERSION
    )

    entry = json.loads(formatter.format(_record("structured")))

    assert entry["message"] == "structured"
    assert entry["schema_version"] == LOG_SCHEMA_VERSION
