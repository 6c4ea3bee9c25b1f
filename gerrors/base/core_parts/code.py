"""
Built-in gerrors classification codes.

Defines the :class:`Code` enumeration used to classify errors created by a
:class:`~gerrors.base.formatter.Formatter`. Integer values are a stable public
contract: they are stringified into error metadata and rendered templates.

Custom lookupers may define private codes beyond the built-in set. Every API
accepting a code therefore accepts a plain ``int`` as well (see ``CodeLike``).
"""
from __future__ import annotations

from enum import IntEnum
from typing import Union


class Code(IntEnum):
    """Enumerated classification codes for the default mapping."""

    # Unhandled error whose category is unknown. Non-gerrors exceptions are
    # projected with this classification. Maps to gRPC UNKNOWN.
    UNKNOWN = 1
    # Lookup failed because no record exists. Maps to gRPC NOT_FOUND.
    NOT_FOUND = 2
    # Caller supplied an argument that cannot be processed. Maps to gRPC INVALID_ARGUMENT.
    INVALID_ARGUMENT = 3
    # Marshaling or unmarshaling of data failed. Maps to gRPC INTERNAL.
    MARSHAL = 4
    # File-system, database or cache operation failed. Maps to gRPC INTERNAL.
    STORAGE = 5
    # Argument is well-formed but outside the expected range. Maps to gRPC OUT_OF_RANGE.
    THRESHOLD = 6
    # Requested operation is not implemented yet. Maps to gRPC UNIMPLEMENTED.
    UNIMPLEMENTED = 7
    # Requester is missing or not permitted. Maps to gRPC UNAUTHENTICATED.
    UNAUTHORIZED = 8
    # Non user-facing failure caused by the system itself. Maps to gRPC INTERNAL.
    INTERNAL = 9
    # Requested action is not available to the requester. Maps to gRPC UNAVAILABLE.
    UNAVAILABLE = 10
    # A call to a third-party service failed. Maps to gRPC INTERNAL.
    EXTERNAL_REQUEST = 11


CodeLike = Union[Code, int]


def code_text(code: CodeLike) -> str:
    """Return the stable string form of ``code`` (its integer value)."""
    return str(int(code))


__all__ = ["Code", "CodeLike", "code_text"]
