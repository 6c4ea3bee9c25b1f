"""Logger parts package public surface.

Re-exports log levels, capability Protocols, dispatch and the stdlib adapter.
Prefer importing from `gerrors.base.loggers` for the stable surface.
"""

from .log_level import LogLevel
from .capabilities import DebugLogger, ErrorLogger, InfoLogger, TraceLogger, WarnLogger
from .dispatch import dispatch_log, resolve_log_method
from .stdlib_adapter import LoggingAdapter, pairs_to_dict

__all__ = [
    "LogLevel",
    "ErrorLogger",
    "WarnLogger",
    "InfoLogger",
    "DebugLogger",
    "TraceLogger",
    "dispatch_log",
    "resolve_log_method",
    "LoggingAdapter",
    "pairs_to_dict",
]
