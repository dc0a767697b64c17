"""Mutual recursion demo: ``foo`` and ``bar`` tracing their way down to a base case."""

from recursive_madness.recursion import bar as bar
from recursive_madness.recursion import foo as foo
from recursive_madness.recursion import limit as limit
from recursive_madness.recursion import render_trace as render_trace
from recursive_madness.recursion import start as start
from recursive_madness.session import Session as Session

__all__ = ["Session", "bar", "foo", "limit", "render_trace", "start"]
