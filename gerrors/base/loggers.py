"""
Logger capabilities public surface.

This module re-exports ``gerrors.base.logger_parts`` to keep imports stable for
code that plugs its own logger into a formatter.
"""

from __future__ import annotations

from .logger_parts import (
    DebugLogger,
    ErrorLogger,
    InfoLogger,
    LoggingAdapter,
    LogLevel,
    TraceLogger,
    WarnLogger,
    dispatch_log,
)

__all__ = [
    "LogLevel",
    "ErrorLogger",
    "WarnLogger",
    "InfoLogger",
    "DebugLogger",
    "TraceLogger",
    "LoggingAdapter",
    "dispatch_log",
]
