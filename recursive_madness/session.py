"""Run handle: identity plus the stream the trace is written to."""

from __future__ import annotations

import sys
import uuid
from dataclasses import dataclass, field
from typing import TextIO

from recursive_madness.errors import TraceError


def _new_session_id() -> str:
    return uuid.uuid4().hex


@dataclass
class Session:
    """One program run.

    ``stream=None`` writes to whatever ``sys.stdout`` is at emit time.
    """

    session_id: str = field(default_factory=_new_session_id)
    stream: TextIO | None = None
    lines_written: int = 0

    def emit(self, line: str) -> None:
        """Write one newline-terminated trace line."""
        out = self.stream if self.stream is not None else sys.stdout
        try:
            out.write(f"{line}\n")
        except OSError as exc:
            msg = f"Failed to write trace line {line!r}"
            raise TraceError(msg) from exc
        self.lines_written += 1
