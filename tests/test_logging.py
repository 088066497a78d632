"""Tests for the structured logging system (rental_kernel/logging_config.py)."""

import json
import logging
from decimal import Decimal
from io import StringIO
from uuid import uuid4

import pytest

from rental_kernel.domain.category import AssetCategory
from rental_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    get_logger,
    reset_logging,
)


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()


def _make_handler() -> tuple[logging.Handler, StringIO]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    return handler, stream


def _parse_log(stream: StringIO) -> dict:
    """Parse the first JSON log line from a stream."""
    line = stream.getvalue().strip().split("\n")[0]
    return json.loads(line)


def _parse_all_logs(stream: StringIO) -> list[dict]:
    lines = stream.getvalue().strip().split("\n")
    return [json.loads(line) for line in lines if line]


# ---------------------------------------------------------------------------
# StructuredFormatter tests
# ---------------------------------------------------------------------------


class TestStructuredFormatter:
    """Tests for JSON log output format."""

    def test_basic_json_output(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        logger.info("hello")

        record = _parse_log(stream)
        assert record["level"] == "INFO"
        assert record["message"] == "hello"
        assert record["logger"] == "rental_kernel.test"
        assert "ts" in record

    def test_extra_fields_included(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        logger.info("asset_reserved", extra={"asset_id": 7, "category": "car"})

        record = _parse_log(stream)
        assert record["asset_id"] == 7
        assert record["category"] == "car"

    def test_decimal_uuid_enum_serialized(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        sid = uuid4()
        get_logger("test").info("typed", extra={
            "charge": Decimal("300"),
            "sid": sid,
            "kind": AssetCategory.MOTORCYCLE,
        })

        record = _parse_log(stream)
        assert record["charge"] == "300"
        assert record["sid"] == str(sid)
        assert record["kind"] == "motorcycle"

    def test_context_fields_included(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        LogContext.set(session_id="sess-1", username="alice")
        logger.info("test_msg")

        record = _parse_log(stream)
        assert record["session_id"] == "sess-1"
        assert record["username"] == "alice"

    def test_exception_fields(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        try:
            raise ValueError("boom")
        except ValueError:
            logger.error("failed", exc_info=True)

        record = _parse_log(stream)
        assert record["exc_type"] == "ValueError"
        assert record["exc_message"] == "boom"
        assert "traceback" in record

    def test_kernel_exception_code_extracted(self):
        """Rental kernel exceptions carry .code and structured attributes."""
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        from rental_kernel.exceptions import AssetNotAvailableError

        try:
            raise AssetNotAvailableError(42)
        except AssetNotAvailableError:
            logger.error("reserve_failed", exc_info=True)

        record = _parse_log(stream)
        assert record["exc_code"] == "ASSET_NOT_AVAILABLE"
        assert record["exc_type"] == "AssetNotAvailableError"
        assert record["exc_asset_id"] == 42

    def test_plain_exception_has_no_code(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        try:
            raise KeyError("missing")
        except KeyError:
            get_logger("test").error("failed", exc_info=True)

        record = _parse_log(stream)
        assert record["exc_type"] == "KeyError"
        assert "exc_code" not in record


# ---------------------------------------------------------------------------
# LogContext tests
# ---------------------------------------------------------------------------


class TestLogContext:

    def test_set_ignores_none(self):
        LogContext.set(username="alice")
        LogContext.set(username=None, command="reserve")
        assert LogContext.get_all() == {"username": "alice", "command": "reserve"}

    def test_clear(self):
        LogContext.set(session_id="s", username="u", command="c")
        LogContext.clear()
        assert LogContext.get_all() == {}

    def test_bind_restores_previous_values(self):
        LogContext.set(command="outer")
        with LogContext.bind(command="inner"):
            assert LogContext.get_all()["command"] == "inner"
        assert LogContext.get_all()["command"] == "outer"

    def test_bind_only_tags_command(self):
        with pytest.raises(TypeError):
            LogContext.bind(username="mallory")

    def test_bind_restores_after_clear_inside_block(self):
        LogContext.set(username="alice")
        with LogContext.bind(command="logout"):
            LogContext.clear()
        assert LogContext.get_all() == {}


# ---------------------------------------------------------------------------
# configure_logging tests
# ---------------------------------------------------------------------------


class TestConfigureLogging:

    def test_idempotent(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        second, second_stream = _make_handler()
        configure_logging(handler=second)

        get_logger("test").info("once")
        assert len(_parse_all_logs(stream)) == 1
        assert second_stream.getvalue() == ""

    def test_level_filters(self):
        handler, stream = _make_handler()
        configure_logging(level=logging.WARNING, handler=handler)
        logger = get_logger("test")
        logger.info("dropped")
        logger.warning("kept")

        records = _parse_all_logs(stream)
        assert [r["message"] for r in records] == ["kept"]

    def test_reset_allows_reconfigure(self):
        handler, _ = _make_handler()
        configure_logging(handler=handler)
        reset_logging()
        assert logging.getLogger("rental_kernel").handlers == []
