"""
The error value produced by :class:`~gerrors.base.formatter.Formatter`.

A :class:`GeneralError` is an ordinary ``Exception`` subclass: it can be raised,
chained, caught, copied and pickled. ``str(err)`` re-renders the formatter
template against the error's data every time, so rendering stays deterministic
for the same inputs; ``err.args`` holds the message rendered at creation.
Pickling needs a picklable formatter (lookup functions must be module-level).

Metadata
--------
Each error carries an :class:`ErrorDetails` payload: a ``reason`` (identifier
upper-cased, spaces replaced by ``_``) and a metadata mapping assembled in this
precedence, later entries winning on key collision:

1. the formatter's default labels;
2. system fields (``_identifier``, ``_error_code``, ``_default_message``,
   ``_original_error``);
3. call-site key/values.

Degenerate lookups
------------------
When the formatter's lookuper returns ``None`` (a table missing its own
unknown-code entry) the error keeps ``core_error = None``: identifier and
default message render empty, the code falls back to the requested one, and
status projection treats the error as not gRPC-capable.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Sequence, Tuple

from google.rpc import error_details_pb2

from ..config.defaults import (
    METADATA_DEFAULT_MESSAGE,
    METADATA_ERROR_CODE,
    METADATA_IDENTIFIER,
    METADATA_ORIGINAL_ERROR,
)
from .core_parts.code import CodeLike, code_text
from .core_parts.core_error import CoreError, grpc_code_of
from .core_parts.sentinel import NO_ORIGINAL_ERROR, is_no_original_error
from .labels import MissingValuePolicy, flatten_labels, ingest_labels
from .template import TemplateData

if TYPE_CHECKING:  # pragma: no cover - typing only
    import grpc
    from google.rpc import status_pb2

    from .formatter import Formatter


def _safe_str(x: Any) -> str:
    try:
        return str(x)
    except Exception:  # noqa: BLE001 - arbitrary __str__ implementations
        return "<unstringifiable>"


def make_reason(identifier: str) -> str:
    """Return the machine-readable reason for an identifier."""
    return identifier.upper().replace(" ", "_")


@dataclass(frozen=True)
class ErrorDetails:
    """Structured payload attached to projected statuses (``ErrorInfo``)."""

    reason: str
    metadata: Mapping[str, str] = field(default_factory=dict)

    def __reduce__(self) -> Tuple[Any, ...]:
        return (_restore_details, (self.reason, dict(self.metadata)))

    @classmethod
    def build(
        cls,
        record: Optional[CoreError],
        code: CodeLike,
        original_error: BaseException,
        default_labels: Mapping[str, str],
        key_values: Sequence[Any],
        policy: MissingValuePolicy,
    ) -> "ErrorDetails":
        identifier = record.identifier if record is not None else ""
        metadata: Dict[str, str] = dict(default_labels)
        metadata[METADATA_IDENTIFIER] = identifier
        metadata[METADATA_ERROR_CODE] = code_text(record.internal_code if record is not None else code)
        metadata[METADATA_DEFAULT_MESSAGE] = record.default_message if record is not None else ""
        metadata[METADATA_ORIGINAL_ERROR] = _safe_str(original_error)
        ingest_labels(key_values, policy, into=metadata)
        return cls(reason=make_reason(identifier), metadata=MappingProxyType(metadata))


def _restore_details(reason: str, metadata: Dict[str, str]) -> ErrorDetails:
    return ErrorDetails(reason=reason, metadata=MappingProxyType(metadata))


class GeneralError(Exception):
    """Classified, template-rendered error created by a formatter.

    Do not instantiate directly; use ``Formatter.new`` or
    ``Formatter.new_with_log_level``.
    """

    def __init__(
        self,
        original_error: Optional[BaseException],
        core_error: Optional[CoreError],
        formatter: "Formatter",
        details: ErrorDetails,
        requested_code: CodeLike,
    ) -> None:
        self._original_error: BaseException = NO_ORIGINAL_ERROR if original_error is None else original_error
        self._core_error = core_error
        self._formatter = formatter
        self._details = details
        self._requested_code = requested_code
        super().__init__(self.message)
        if isinstance(original_error, BaseException) and not is_no_original_error(original_error):
            self.__cause__ = original_error

    def __reduce__(self) -> Tuple[Any, ...]:
        return (
            type(self),
            (self.original_error, self._core_error, self._formatter, self._details, self._requested_code),
        )

    # -------- accessors --------

    @property
    def original_error(self) -> Optional[BaseException]:
        """The originating error, or ``None`` when none was supplied."""
        if is_no_original_error(self._original_error):
            return None
        return self._original_error

    @property
    def core_error(self) -> Optional[CoreError]:
        return self._core_error

    @property
    def formatter(self) -> "Formatter":
        return self._formatter

    @property
    def details(self) -> ErrorDetails:
        return self._details

    @property
    def code(self) -> CodeLike:
        """Resolved record's code; the requested code for degenerate lookups."""
        if self._core_error is None:
            return self._requested_code
        return self._core_error.internal_code

    @property
    def identifier(self) -> str:
        return self._core_error.identifier if self._core_error is not None else ""

    @property
    def default_message(self) -> str:
        return self._core_error.default_message if self._core_error is not None else ""

    @property
    def reason(self) -> str:
        return self._details.reason

    @property
    def metadata(self) -> Dict[str, str]:
        """Copy of the merged metadata mapping."""
        return dict(self._details.metadata)

    def metadata_slice(self) -> List[str]:
        """Metadata as an alternating ``[k1, v1, k2, v2, ...]`` list."""
        return flatten_labels(self._details.metadata)

    # -------- rendering --------

    def template_data(self) -> TemplateData:
        if is_no_original_error(self._original_error):
            message = self.default_message
        else:
            message = _safe_str(self._original_error)
        grpc_code = grpc_code_of(self._core_error)
        return TemplateData(
            identifier=self.identifier,
            code=code_text(self.code),
            grpc_code=str(grpc_code.value[0]) if grpc_code is not None else "",
            message=message,
            default_message=self.default_message,
            labels=self._details.metadata,
        )

    @property
    def message(self) -> str:
        """Rendered message; never raises."""
        return self._formatter.template.render(self.template_data())

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"GeneralError(identifier={self.identifier!r}, code={code_text(self.code)})"

    # -------- projection --------

    def error_info(self) -> error_details_pb2.ErrorInfo:
        """Return the details as a ``google.rpc.ErrorInfo`` message."""
        return error_details_pb2.ErrorInfo(
            reason=self._details.reason,
            domain=self._formatter.domain,
            metadata=dict(self._details.metadata),
        )

    def grpc(self) -> "status_pb2.Status":
        """Project this error into a ``google.rpc.Status``; see :func:`grpc_status`."""
        from .grpc_status import grpc_status

        return grpc_status(self)

    def rpc_status(self) -> "grpc.Status":
        """Project this error into a ``grpc.Status`` for ``abort_with_status``."""
        from .grpc_status import to_rpc_status

        return to_rpc_status(self)


__all__ = ["GeneralError", "ErrorDetails", "make_reason"]
