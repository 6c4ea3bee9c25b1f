"""
Log levels accepted by ``Formatter.new_with_log_level``.

Numeric values are a stable contract (``OFF`` sorts below every real level).
``Formatter.new`` always uses ``ERROR``.
"""
from __future__ import annotations

from enum import IntEnum


class LogLevel(IntEnum):
    """Severity at which a newly created error is logged."""

    OFF = -1
    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3
    TRACE = 4


__all__ = ["LogLevel"]
