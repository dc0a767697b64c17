"""Shared test fixtures."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator

import pytest

from recursive_madness.session import Session


@pytest.fixture
def buffer() -> io.StringIO:
    """In-memory trace sink."""
    return io.StringIO()


@pytest.fixture
def session(buffer: io.StringIO) -> Session:
    """Session writing into ``buffer``."""
    return Session(session_id="feedfacecafebeef", stream=buffer)


@pytest.fixture(autouse=True)
def _reset_logging_state() -> Iterator[None]:
    """Keep root handlers and level from leaking between tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
