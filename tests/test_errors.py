"""Tests for the exception hierarchy."""

from recursive_madness.errors import ConfigError, MadnessError, TraceError, UsageError


def test_base_error_is_exception() -> None:
    assert issubclass(MadnessError, Exception)


def test_config_error_inherits_base() -> None:
    err = ConfigError("bad config")
    assert isinstance(err, MadnessError)
    assert str(err) == "bad config"


def test_trace_error_inherits_base() -> None:
    assert isinstance(TraceError("pipe closed"), MadnessError)


def test_catch_all_with_base() -> None:
    """All subclasses catchable via MadnessError."""
    for cls in (ConfigError, TraceError, UsageError):
        try:
            raise cls("test")
        except MadnessError:
            pass
