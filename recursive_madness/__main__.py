"""Entry point: python -m recursive_madness."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from recursive_madness.config import (
    DEFAULT_START_VALUE,
    MAX_START_VALUE,
    MadnessConfig,
    load_config,
)
from recursive_madness.errors import MadnessError, TraceError, UsageError
from recursive_madness.logging_config import setup_logging
from recursive_madness.recursion import start
from recursive_madness.session import Session

logger = logging.getLogger(__name__)

_console = Console()
_err_console = Console(stderr=True)

EXIT_FAILURE = 1
EXIT_USAGE = 2

_VERBOSE_FLAGS = frozenset({"-v", "--verbose"})
_HELP_FLAGS = frozenset({"help", "-h", "--help"})


# ---------------------------------------------------------------------------
# Argument handling
# ---------------------------------------------------------------------------


def _parse_start_value(arg: str) -> int:
    """Validate a positional start value against ``0..MAX_START_VALUE``."""
    if not (arg.isascii() and arg.isdigit()):
        msg = f"Unknown argument: {arg}"
        raise UsageError(msg)
    value = int(arg)
    if value > MAX_START_VALUE:
        msg = f"Start value must be between 0 and {MAX_START_VALUE}, got {value}"
        raise UsageError(msg)
    return value


def _parse_options(args: list[str]) -> tuple[bool, Path | None, int | None]:
    """Extract ``(show_help, config_path, start_override)`` from CLI args.

    The value after ``--config`` is always a path, even if it reads ``help``.
    """
    show_help = False
    config_path: Path | None = None
    start_override: int | None = None
    it = iter(args)
    for arg in it:
        if arg in _VERBOSE_FLAGS:
            continue
        if arg in _HELP_FLAGS:
            show_help = True
        elif arg == "--config":
            value = next(it, None)
            if value is None:
                msg = "--config requires a path"
                raise UsageError(msg)
            config_path = Path(value).expanduser()
        elif arg.startswith("--config="):
            config_path = Path(arg.split("=", 1)[1]).expanduser()
        else:
            if start_override is not None:
                msg = "Only one start value may be given"
                raise UsageError(msg)
            start_override = _parse_start_value(arg)
    return show_help, config_path, start_override


def _print_usage() -> None:
    """Print the command table."""
    _console.print()
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold green", min_width=30)
    table.add_column()
    table.add_row("recursive-madness", f"Run the trace from {DEFAULT_START_VALUE}")
    table.add_row("recursive-madness N", f"Run the trace from N (0 <= N <= {MAX_START_VALUE})")
    table.add_row("--config PATH", "Load settings from a JSON file")
    table.add_row("-v, --verbose", "Log every recursive call to stderr")
    table.add_row("help, -h, --help", "Show this message")
    _console.print(
        Panel(table, title="[bold]Commands[/bold]", border_style="blue", padding=(1, 0)),
    )
    _console.print()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------


def _resolve_config(config_path: Path | None, start_override: int | None) -> MadnessConfig:
    """Load the config file (if any) and apply the positional start value."""
    config = load_config(config_path)
    if start_override is not None:
        config = config.model_copy(update={"start_value": start_override})
    return config


def run(config: MadnessConfig, *, verbose: bool = False) -> None:
    """Configure logging for *config* and write one trace to stdout."""
    setup_logging(level=config.level, verbose=verbose)
    session = Session()
    start(session, config.start_value)
    try:
        sys.stdout.flush()
    except OSError as exc:
        msg = "Failed to flush trace to stdout"
        raise TraceError(msg) from exc
    logger.info("Trace complete (%d lines, session=%s)", session.lines_written, session.session_id)


def main() -> None:
    """CLI entry point."""
    args = sys.argv[1:]
    verbose = bool(_VERBOSE_FLAGS.intersection(args))
    setup_logging(verbose=verbose)

    try:
        show_help, config_path, start_override = _parse_options(args)
    except UsageError as exc:
        _err_console.print(f"[bold red]{exc}[/bold red]")
        _err_console.print("Run [bold]recursive-madness help[/bold] for usage.")
        sys.exit(EXIT_USAGE)

    if show_help:
        _print_usage()
        return

    try:
        config = _resolve_config(config_path, start_override)
        run(config, verbose=verbose)
    except MadnessError:
        logger.exception("Run failed")
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    main()
