"""Lookuper Protocol (single-class module).

A lookuper translates a classification code into a :class:`CoreError` record.
Formatters accept any object satisfying this Protocol.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from .code import CodeLike
from .core_error import CoreError


@runtime_checkable
class Lookuper(Protocol):
    """Resolver from code to descriptive record."""

    def lookup(self, code: CodeLike) -> Optional[CoreError]:
        """Return the record describing ``code``.

        Implementations should fall back to an "unknown" record rather than
        return ``None``; ``None`` is reserved for misconfigured tables.
        """
        ...


__all__ = ["Lookuper"]
