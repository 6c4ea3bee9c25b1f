"""
Level-based dispatch onto capability loggers.

``dispatch_log`` selects the logger method matching a :class:`LogLevel` by
checking the optional capability Protocols. It is called exactly once per error
created by a formatter.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Type

from .capabilities import DebugLogger, ErrorLogger, InfoLogger, TraceLogger, WarnLogger
from .log_level import LogLevel

_OPTIONAL_CAPABILITIES: Dict[LogLevel, Tuple[Type[Any], str]] = {
    LogLevel.WARN: (WarnLogger, "warn"),
    LogLevel.INFO: (InfoLogger, "info"),
    LogLevel.DEBUG: (DebugLogger, "debug"),
    LogLevel.TRACE: (TraceLogger, "trace"),
}


def resolve_log_method(logger: Any, level: LogLevel) -> Optional[Callable[..., None]]:
    """Return the bound method for ``level`` or ``None`` when unsupported.

    ``ERROR`` (and any level outside the optional set other than ``OFF``)
    resolves to the mandatory ``error`` method.
    """
    if logger is None or level == LogLevel.OFF:
        return None
    capability = _OPTIONAL_CAPABILITIES.get(level)
    if capability is None:
        return logger.error
    protocol, method = capability
    if not isinstance(logger, protocol):
        return None
    return getattr(logger, method)


def dispatch_log(
    logger: Optional[ErrorLogger],
    level: LogLevel,
    original_error: BaseException,
    message: str,
    key_values: Sequence[Any],
) -> bool:
    """Emit one log line for a created error.

    Returns ``True`` when a logger method was invoked.
    """
    method = resolve_log_method(logger, level)
    if method is None:
        return False
    if level in _OPTIONAL_CAPABILITIES:
        method(message, *key_values)
    else:
        method(original_error, message, *key_values)
    return True


__all__ = ["dispatch_log", "resolve_log_method"]
