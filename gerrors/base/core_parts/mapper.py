"""
Table-backed and callable-backed lookupers.

``Mapper`` resolves codes through a fixed table with a designated unknown code
as fallback. ``FuncLookuper`` adapts a standalone ``func(code)`` callable to the
same :class:`Lookuper` contract.

Both are read-only after construction. ``Mapper`` snapshots the provided table
into a ``MappingProxyType`` so later mutation of the caller's dict has no effect
and concurrent ``lookup`` calls need no locking.

Degenerate case: when the table lacks an entry for the unknown code itself,
``lookup`` of an absent code returns ``None``. No exception is raised.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Tuple

from .code import CodeLike
from .core_error import CoreError

LookupFunc = Callable[[CodeLike], Optional[CoreError]]


class Mapper:
    """Map classification codes to :class:`CoreError` records."""

    def __init__(self, unknown_code: CodeLike, mapping: Mapping[CodeLike, CoreError]) -> None:
        self._mapping: Mapping[CodeLike, CoreError] = MappingProxyType(dict(mapping))
        self._unknown_code = unknown_code

    @property
    def unknown_code(self) -> CodeLike:
        return self._unknown_code

    @property
    def mapping(self) -> Mapping[CodeLike, CoreError]:
        """Read-only view of the backing table."""
        return self._mapping

    def lookup(self, code: CodeLike) -> Optional[CoreError]:
        """Return the record for ``code`` or the unknown-code record."""
        record = self._mapping.get(code)
        if record is not None:
            return record
        return self._mapping.get(self._unknown_code)

    def __reduce__(self) -> Tuple[Any, ...]:
        return (Mapper, (self._unknown_code, dict(self._mapping)))

    def __contains__(self, code: object) -> bool:
        return code in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Mapper(unknown_code={int(self._unknown_code)}, entries={len(self._mapping)})"


class FuncLookuper:
    """Wrap an ``(unknown_code, func)`` pair as a :class:`Lookuper`.

    ``func`` is called with the requested code; when it yields ``None`` it is
    called once more with ``unknown_code`` and that result is returned as-is.
    """

    def __init__(self, unknown_code: CodeLike, func: LookupFunc) -> None:
        self._unknown_code = unknown_code
        self._func = func

    @property
    def unknown_code(self) -> CodeLike:
        return self._unknown_code

    def lookup(self, code: CodeLike) -> Optional[CoreError]:
        record = self._func(code)
        if record is not None:
            return record
        return self._func(self._unknown_code)


__all__ = ["Mapper", "FuncLookuper", "LookupFunc"]
