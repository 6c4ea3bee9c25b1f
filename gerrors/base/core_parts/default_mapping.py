"""
Canonical default classification table.

The identifiers, default messages and gRPC codes below are a compatibility
contract: services exchanging gerrors-formatted statuses rely on them.

``DEFAULT_MAPPING`` is a read-only constant. ``get_default_mapping`` returns a
fresh dict for callers that want to extend or override entries before passing
the result to :class:`~gerrors.base.core_parts.mapper.Mapper`.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping

import grpc

from .code import Code, CodeLike
from .core_error import CoreError
from .core_record import CoreRecord
from .mapper import Mapper

DEFAULT_UNKNOWN_CODE: Code = Code.UNKNOWN

_DEFAULT_RECORDS = (
    CoreRecord(
        internal_code=Code.UNKNOWN,
        identifier="unknown",
        default_message="no information is available for this type of error",
        grpc_code=grpc.StatusCode.UNKNOWN,
    ),
    CoreRecord(
        internal_code=Code.NOT_FOUND,
        identifier="not-found",
        default_message="no record was found with given information",
        grpc_code=grpc.StatusCode.NOT_FOUND,
    ),
    CoreRecord(
        internal_code=Code.INVALID_ARGUMENT,
        identifier="invalid-argument",
        default_message="some of the arguments in the request are invalid",
        grpc_code=grpc.StatusCode.INVALID_ARGUMENT,
    ),
    CoreRecord(
        internal_code=Code.MARSHAL,
        identifier="marshal",
        default_message="unable to marshal/unmarshal provided data",
        grpc_code=grpc.StatusCode.INTERNAL,
    ),
    CoreRecord(
        internal_code=Code.STORAGE,
        identifier="storage",
        default_message="unable to perform storage-related operation",
        grpc_code=grpc.StatusCode.INTERNAL,
    ),
    CoreRecord(
        internal_code=Code.THRESHOLD,
        identifier="out-of-range",
        default_message="provided argument is out of valid range",
        grpc_code=grpc.StatusCode.OUT_OF_RANGE,
    ),
    CoreRecord(
        internal_code=Code.UNIMPLEMENTED,
        identifier="unimplemented",
        default_message="provided argument led to an unimplemented operation",
        grpc_code=grpc.StatusCode.UNIMPLEMENTED,
    ),
    CoreRecord(
        internal_code=Code.UNAUTHORIZED,
        identifier="unauthorized",
        default_message="requester is not authorized to perform the requested operation",
        grpc_code=grpc.StatusCode.UNAUTHENTICATED,
    ),
    CoreRecord(
        internal_code=Code.INTERNAL,
        identifier="internal",
        default_message="there is an internal error in the system",
        grpc_code=grpc.StatusCode.INTERNAL,
    ),
    CoreRecord(
        internal_code=Code.UNAVAILABLE,
        identifier="unavailable",
        default_message="requested action is not available to the requester",
        grpc_code=grpc.StatusCode.UNAVAILABLE,
    ),
    CoreRecord(
        internal_code=Code.EXTERNAL_REQUEST,
        identifier="external-request",
        default_message="system failed during the request to external service",
        grpc_code=grpc.StatusCode.INTERNAL,
    ),
)

DEFAULT_MAPPING: Mapping[CodeLike, CoreError] = MappingProxyType(
    {record.internal_code: record for record in _DEFAULT_RECORDS}
)


def get_default_mapping() -> Dict[CodeLike, CoreError]:
    """Return a caller-owned copy of the canonical table."""
    return dict(DEFAULT_MAPPING)


def default_mapper() -> Mapper:
    """Build a :class:`Mapper` over the canonical table with ``UNKNOWN`` fallback."""
    return Mapper(DEFAULT_UNKNOWN_CODE, DEFAULT_MAPPING)


__all__ = [
    "DEFAULT_MAPPING",
    "DEFAULT_UNKNOWN_CODE",
    "get_default_mapping",
    "default_mapper",
]
