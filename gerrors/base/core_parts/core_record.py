"""
Default CoreError implementation.

``CoreRecord`` is a frozen dataclass satisfying both :class:`CoreError` and
:class:`CoreGrpcError`. The default mapping is built from these records, and
callers can reuse the type for their own tables.
"""
from __future__ import annotations

from dataclasses import dataclass

import grpc

from .code import CodeLike


@dataclass(frozen=True)
class CoreRecord:
    """Immutable descriptive data for one classification code.

    Attributes:
        internal_code: Classification code (built-in :class:`Code` or custom int).
        identifier: Short label such as ``"not-found"``.
        default_message: Prose used when an error has no original error.
        grpc_code: gRPC status code the classification translates to.
    """

    internal_code: CodeLike
    identifier: str
    default_message: str
    grpc_code: grpc.StatusCode = grpc.StatusCode.UNKNOWN

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.identifier}({int(self.internal_code)})"


__all__ = ["CoreRecord"]
