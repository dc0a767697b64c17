"""Logging context: ContextVar-based log enrichment.

Every log record is enriched with a ``[op:sid]`` prefix via a
`ContextFilter` attached to the root logger handlers.

Operation codes: ``start`` (entry banner), ``foo`` (recursion head),
``bar`` (loop body).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

ctx_session_id: ContextVar[str | None] = ContextVar("ctx_session_id", default=None)
ctx_operation: ContextVar[str | None] = ContextVar("ctx_operation", default=None)


class ContextFilter(logging.Filter):
    """Inject ContextVar values into every LogRecord as ``record.ctx``."""

    def filter(self, record: logging.LogRecord) -> bool:
        op = ctx_operation.get(None)
        sid = ctx_session_id.get(None)
        parts: list[str] = []
        if op:
            parts.append(op)
        if sid:
            parts.append(sid[:8])
        record.ctx = f"[{':'.join(parts)}] " if parts else ""
        return True


@contextmanager
def log_context(
    *,
    operation: str | None = None,
    session_id: str | None = None,
) -> Iterator[None]:
    """Tag log records emitted inside the block; previous values come back on exit.

    ``None`` leaves the corresponding value untouched.
    """
    tokens: list[tuple[ContextVar[str | None], Token[str | None]]] = []
    if operation is not None:
        tokens.append((ctx_operation, ctx_operation.set(operation)))
    if session_id is not None:
        tokens.append((ctx_session_id, ctx_session_id.set(session_id)))
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)
