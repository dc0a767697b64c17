"""Mutual recursion between ``foo`` and ``bar``.

``foo`` is the recursion head, ``bar`` loops up to ``limit(count)`` and hands
``count - 1`` back to ``foo``. Each ``foo -> bar -> foo`` cycle lowers the
argument by one, so any non-negative start reaches the base case.
"""

from __future__ import annotations

import io
import logging

from recursive_madness.log_context import log_context
from recursive_madness.session import Session

logger = logging.getLogger(__name__)

BANNER = "Starting madness with {x}"
BAR_LINE = "bar loop i={i}, count={count}"
BASE_LINE = "Reached base in foo"


def limit(x: int) -> int:
    """Inclusive loop bound for ``bar``: 0 for negatives, else ``x % 4 + 2``."""
    if x < 0:
        return 0
    return x % 4 + 2


def foo(session: Session, level: int) -> None:
    """Delegate to ``bar(level - 1)`` while positive, else emit the base line."""
    with log_context(operation="foo"):
        logger.debug("foo level=%d", level)
        if level > 0:
            bar(session, level - 1)
        else:
            session.emit(BASE_LINE)


def bar(session: Session, count: int) -> None:
    """Emit ``limit(count) + 1`` loop lines, then recurse into ``foo(count - 1)``.

    The printed ``count`` is the loop index, not the argument.
    """
    with log_context(operation="bar"):
        bound = limit(count)
        logger.debug("bar count=%d limit=%d", count, bound)
        for i in range(bound + 1):
            shadowed = i
            session.emit(BAR_LINE.format(i=i, count=shadowed))
        foo(session, count - 1)


def start(session: Session, x: int) -> None:
    """Print the banner and enter the recursion at ``foo(x)``."""
    with log_context(operation="start", session_id=session.session_id):
        logger.debug("start x=%d", x)
        session.emit(BANNER.format(x=x))
        foo(session, x)


def render_trace(x: int) -> list[str]:
    """Run ``start(x)`` against an in-memory session and return the trace lines."""
    buf = io.StringIO()
    start(Session(stream=buf), x)
    return buf.getvalue().splitlines()
