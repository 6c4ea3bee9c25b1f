"""
Projection of errors into gRPC rich statuses (Google AIP-193).

``grpc_status`` turns any exception into a ``google.rpc.Status`` message:

1. A :class:`GeneralError` is searched on the exception and its ``__cause__``
   chain. Without one, the status is ``UNKNOWN`` carrying ``str(exc)`` and no
   details.
2. When the error's record lacks the gRPC capability (or the lookup was
   degenerate), the status is ``UNKNOWN`` carrying the rendered message and no
   details.
3. Otherwise the status uses the record's gRPC code and the rendered message,
   with one packed ``google.rpc.ErrorInfo`` detail holding the reason, domain
   and metadata. If packing fails the status is returned without details.

``to_rpc_status`` wraps the result as a ``grpc.Status`` suitable for
``ServicerContext.abort_with_status``. Receivers can recover the ``ErrorInfo``
with ``grpc_status.rpc_status.from_call``.

Neither function raises for any input exception.
"""
from __future__ import annotations

import logging
from typing import Optional

import grpc
from google.protobuf import any_pb2
from google.rpc import code_pb2, status_pb2
from grpc_status import rpc_status

from .core_parts.core_error import grpc_code_of
from .general_error import GeneralError

logger = logging.getLogger(__name__)


def find_general_error(exc: Optional[BaseException]) -> Optional[GeneralError]:
    """Return the first :class:`GeneralError` on ``exc``'s cause chain."""
    seen = set()
    while exc is not None and id(exc) not in seen:
        if isinstance(exc, GeneralError):
            return exc
        seen.add(id(exc))
        exc = exc.__cause__
    return None


def _safe_str(x: BaseException) -> str:
    try:
        return str(x)
    except Exception:  # noqa: BLE001 - arbitrary __str__ implementations
        return type(x).__name__


def grpc_status(exc: BaseException) -> status_pb2.Status:
    """Build a ``google.rpc.Status`` for ``exc``."""
    err = find_general_error(exc)
    if err is None:
        return status_pb2.Status(code=code_pb2.UNKNOWN, message=_safe_str(exc))

    message = err.message
    code = grpc_code_of(err.core_error)
    if code is None:
        return status_pb2.Status(code=code_pb2.UNKNOWN, message=message)

    status_code = code.value[0]
    try:
        detail = any_pb2.Any()
        detail.Pack(err.error_info())
    except Exception as e:  # noqa: BLE001 - projection must not raise
        logger.debug("unable to attach error details: %r", e)
        return status_pb2.Status(code=status_code, message=message)
    return status_pb2.Status(code=status_code, message=message, details=[detail])


def to_rpc_status(exc: BaseException) -> grpc.Status:
    """Return ``grpc_status(exc)`` as a ``grpc.Status`` object."""
    return rpc_status.to_status(grpc_status(exc))


def status_code_of(status: status_pb2.Status) -> grpc.StatusCode:
    """Map the numeric code of a ``google.rpc.Status`` to ``grpc.StatusCode``."""
    for candidate in grpc.StatusCode:
        if candidate.value[0] == status.code:
            return candidate
    return grpc.StatusCode.UNKNOWN


__all__ = ["grpc_status", "to_rpc_status", "find_general_error", "status_code_of"]
