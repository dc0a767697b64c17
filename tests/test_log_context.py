"""Tests for ContextVar-based log enrichment."""

from __future__ import annotations

import logging

import pytest

from recursive_madness.log_context import (
    ContextFilter,
    ctx_operation,
    ctx_session_id,
    log_context,
)
from recursive_madness.recursion import render_trace


def _record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.DEBUG, "", 0, "msg", (), None)


def _prefix() -> str:
    record = _record()
    assert ContextFilter().filter(record) is True
    return record.ctx


def test_empty_context_gives_empty_prefix() -> None:
    assert _prefix() == ""


def test_operation_and_truncated_session_id() -> None:
    with log_context(operation="bar", session_id="0123456789abcdef"):
        assert _prefix() == "[bar:01234567] "
    assert _prefix() == ""


def test_nested_block_restores_outer_values() -> None:
    with log_context(operation="foo", session_id="abcdefgh"):
        with log_context(operation="bar"):
            assert _prefix() == "[bar:abcdefgh] "
        assert _prefix() == "[foo:abcdefgh] "
    assert ctx_operation.get() is None
    assert ctx_session_id.get() is None


def test_context_restored_when_block_raises() -> None:
    with pytest.raises(RuntimeError), log_context(operation="start", session_id="deadbeef"):
        raise RuntimeError("boom")
    assert _prefix() == ""


def test_trace_leaves_no_context_behind() -> None:
    render_trace(4)
    assert ctx_operation.get() is None
    assert ctx_session_id.get() is None


def test_recursion_tags_records(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="recursive_madness.recursion")
    seen: list[tuple[str, str]] = []

    class _Collect(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            seen.append((record.getMessage(), record.ctx))

    handler = _Collect()
    handler.addFilter(ContextFilter())
    logging.getLogger("recursive_madness.recursion").addHandler(handler)
    try:
        render_trace(1)
    finally:
        logging.getLogger("recursive_madness.recursion").removeHandler(handler)

    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["start x=1", "foo level=1", "bar count=0 limit=2", "foo level=-1"]
    assert [ctx.split(":")[0] for _, ctx in seen] == ["[start", "[foo", "[bar", "[foo"]
