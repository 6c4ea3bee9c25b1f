"""CoreError and CoreGrpcError Protocols (structural contracts).

Every lookuper translates a code into an object satisfying :class:`CoreError`.
Records that additionally satisfy :class:`CoreGrpcError` can be projected into
a gRPC status with their own status code; records without that capability are
projected as ``UNKNOWN``.

Capability checks use ``isinstance(record, CoreGrpcError)`` so callers never
need ``getattr`` probing on custom record types.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

import grpc

from .code import CodeLike


@runtime_checkable
class CoreError(Protocol):
    """Descriptive record for one classification code."""

    @property
    def internal_code(self) -> CodeLike:  # pragma: no cover - structural
        """Classification code this record describes."""

    @property
    def identifier(self) -> str:  # pragma: no cover - structural
        """Short human-readable label, one or two words (e.g. ``not-found``)."""

    @property
    def default_message(self) -> str:  # pragma: no cover - structural
        """Longer explanation used when no original error is supplied."""


@runtime_checkable
class CoreGrpcError(Protocol):
    """Optional capability: the record maps to a gRPC status code."""

    @property
    def grpc_code(self) -> grpc.StatusCode:  # pragma: no cover - structural
        """gRPC status code matching the record's classification."""


def grpc_code_of(record: object) -> Optional[grpc.StatusCode]:
    """Return the record's gRPC code, or ``None`` without the capability."""
    if not isinstance(record, CoreGrpcError):
        return None
    code = record.grpc_code
    return code if isinstance(code, grpc.StatusCode) else None


__all__ = ["CoreError", "CoreGrpcError", "grpc_code_of"]
