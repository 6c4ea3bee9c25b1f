"""Logger capability Protocols.

A formatter logger must satisfy :class:`ErrorLogger`. Each of the other
Protocols is an optional capability: when a logger lacks the method for a
requested level, that log line is silently skipped. There is no fallback to
``error``.

Key/value arguments always arrive flattened as ``k1, v1, k2, v2, ...``.

Note that ``logging.Logger`` structurally matches several of these Protocols
by method name but not by signature; wrap it in
:class:`~gerrors.base.logger_parts.stdlib_adapter.LoggingAdapter` (``with_logger``
does this automatically).
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ErrorLogger(Protocol):
    """Mandatory capability; receives the original error as a distinct argument."""

    def error(self, err: BaseException, msg: str, *key_values: Any) -> None:  # pragma: no cover - structural
        ...


@runtime_checkable
class WarnLogger(Protocol):
    def warn(self, msg: str, *key_values: Any) -> None:  # pragma: no cover - structural
        ...


@runtime_checkable
class InfoLogger(Protocol):
    def info(self, msg: str, *key_values: Any) -> None:  # pragma: no cover - structural
        ...


@runtime_checkable
class DebugLogger(Protocol):
    def debug(self, msg: str, *key_values: Any) -> None:  # pragma: no cover - structural
        ...


@runtime_checkable
class TraceLogger(Protocol):
    def trace(self, msg: str, *key_values: Any) -> None:  # pragma: no cover - structural
        ...


__all__ = ["ErrorLogger", "WarnLogger", "InfoLogger", "DebugLogger", "TraceLogger"]
