"""Logging setup: one colored console handler on stderr.

Call ``setup_logging()`` once at startup.  All modules use ``logging.getLogger(__name__)``.
stdout carries only the trace, so no handler ever writes there.
"""

from __future__ import annotations

import logging
import sys

CONSOLE_FMT = "%(asctime)s %(levelname)s %(name)s: %(ctx)s%(message)s"
DATE_FMT = "%H:%M:%S"

logger = logging.getLogger(__name__)

_LEVEL_COLORS = {
    logging.DEBUG: "\x1b[36m",
    logging.INFO: "\x1b[32m",
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[35m",
}
_RESET = "\x1b[0m"


class _ColorFormatter(logging.Formatter):
    """Padded level names, colored when the console is a terminal."""

    def __init__(self, fmt: str, datefmt: str | None = None, use_color: bool = True) -> None:
        super().__init__(fmt, datefmt)
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        original = record.levelname
        padded = f"{original:<8}"
        if self._use_color:
            padded = f"{_LEVEL_COLORS.get(record.levelno, '')}{padded}{_RESET}"
        record.levelname = padded
        try:
            return super().format(record)
        finally:
            record.levelname = original


def setup_logging(level: int = logging.WARNING, verbose: bool = False) -> None:
    """Replace the root handlers with a single stderr console handler.

    Args:
        level: Minimum log level. WARNING keeps stderr quiet on a normal run.
        verbose: If True, sets DEBUG level so every recursive call is logged.
    """
    if verbose:
        level = logging.DEBUG

    from recursive_madness.log_context import ContextFilter

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    # sys.stderr can be None under pythonw
    if sys.stderr is None:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(ContextFilter())
    use_color = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    handler.setFormatter(_ColorFormatter(CONSOLE_FMT, datefmt=DATE_FMT, use_color=use_color))
    root.addHandler(handler)

    logger.debug("Logging initialized (level=%s)", logging.getLevelName(level))
