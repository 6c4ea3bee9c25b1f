"""Shared testing utilities for formatter and projection tests.

Purpose:
    Avoid duplicating small assertion helpers and fake loggers across test
    modules while keeping explicit AssertionError semantics (no bare `assert`
    in helpers, satisfying Bandit B101).

Exports:
    - assert_true(condition: bool, message: str) -> None
    - RecordingLogger: full-capability logger that records every call
    - ErrorOnlyLogger: logger exposing only the mandatory ``error`` method
"""
from __future__ import annotations

from typing import Any, List, Tuple


def assert_true(condition: bool, message: str) -> None:
    """Raise AssertionError with the provided message if condition is False.

    Parameters
    ----------
    condition: bool
        Boolean expression under test.
    message: str
        Rich, contextual diagnostic message to display on failure.

    Raises
    ------
    AssertionError
        If `condition` evaluates false.
    """
    if not condition:
        raise AssertionError(message)


class ErrorOnlyLogger:
    """Logger with just the mandatory capability."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Any, str, Tuple[Any, ...]]] = []

    def error(self, err: BaseException, msg: str, *key_values: Any) -> None:
        self.calls.append(("error", err, msg, key_values))

    def count(self, level: str) -> int:
        return sum(1 for call in self.calls if call[0] == level)


class RecordingLogger(ErrorOnlyLogger):
    """Logger with every capability; optional levels record ``None`` as the error."""

    def warn(self, msg: str, *key_values: Any) -> None:
        self.calls.append(("warn", None, msg, key_values))

    def info(self, msg: str, *key_values: Any) -> None:
        self.calls.append(("info", None, msg, key_values))

    def debug(self, msg: str, *key_values: Any) -> None:
        self.calls.append(("debug", None, msg, key_values))

    def trace(self, msg: str, *key_values: Any) -> None:
        self.calls.append(("trace", None, msg, key_values))
