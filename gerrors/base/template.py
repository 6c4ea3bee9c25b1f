"""
Brace-style error message templates.

Templates use Python's ``str.format`` syntax and are rendered against a
:class:`TemplateData` view of one error. Available fields:

- ``{identifier}`` (alias ``{id}``): record identifier, e.g. ``internal``.
- ``{code}``: stringified classification code, e.g. ``9``.
- ``{grpc_code}``: stringified numeric gRPC status code, empty when the record
  has no gRPC capability.
- ``{message}``: original error text, or the default message when there is no
  original error.
- ``{default_message}``: the record's default message.
- ``{labels}`` (alias ``{metadata}``): merged metadata mapping; index single keys
  with ``{labels[request_id]}``; a key the error does not carry renders as
  ``<no value>``.

Compilation happens once, when the formatter is built. Syntax errors, positional
fields, unknown field names and invalid conversions raise
:class:`TemplateConfigError` then. Rendering never raises: a fault while
executing a compiled template (bad format spec, failing attribute access) yields a
diagnostic string that still carries the message.
"""
from __future__ import annotations

import logging
import re
import string
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Mapping

from ..config.defaults import MISSING_LABEL_TEXT, RENDER_FAILURE_FORMAT
from .core_parts.config_error import TemplateConfigError

logger = logging.getLogger(__name__)

FIELD_ALIASES: Mapping[str, str] = {"id": "identifier", "metadata": "labels"}

TEMPLATE_FIELDS: FrozenSet[str] = frozenset(
    {"identifier", "code", "grpc_code", "message", "default_message", "labels"}
) | frozenset(FIELD_ALIASES)

_ROOT_RE = re.compile(r"[^.\[]*")
_CONVERSIONS = (None, "r", "s", "a")


class LabelView(dict):
    """Label mapping that renders absent keys as ``MISSING_LABEL_TEXT``."""

    def __missing__(self, key: str) -> str:
        return MISSING_LABEL_TEXT


@dataclass(frozen=True)
class TemplateData:
    """Values exposed to a template for one error."""

    identifier: str
    code: str
    grpc_code: str
    message: str
    default_message: str
    labels: Mapping[str, str] = field(default_factory=dict)

    def as_mapping(self) -> Dict[str, Any]:
        values: Dict[str, Any] = {
            "identifier": self.identifier,
            "code": self.code,
            "grpc_code": self.grpc_code,
            "message": self.message,
            "default_message": self.default_message,
            "labels": LabelView(self.labels),
        }
        for alias, target in FIELD_ALIASES.items():
            values[alias] = values[target]
        return values


def _check_fields(text: str, source: str) -> None:
    """Parse ``source`` and validate every replacement field, recursively."""
    try:
        parsed = list(string.Formatter().parse(source))
    except ValueError as exc:
        raise TemplateConfigError(text, str(exc)) from exc

    for _literal, field_name, format_spec, conversion in parsed:
        if field_name is None:
            continue
        root = _ROOT_RE.match(field_name).group(0)  # type: ignore[union-attr]
        if not root or root.isdigit():
            raise TemplateConfigError(text, "positional fields are not supported")
        if root not in TEMPLATE_FIELDS:
            raise TemplateConfigError(text, f"unknown field {root!r}")
        if conversion not in _CONVERSIONS:
            raise TemplateConfigError(text, f"unknown conversion {conversion!r}")
        if format_spec:
            _check_fields(text, format_spec)


class ErrorTemplate:
    """A compiled, immutable message template."""

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TemplateConfigError(repr(text), "template must be a string")
        _check_fields(text, text)
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def render(self, data: TemplateData) -> str:
        """Render ``data``; falls back to a diagnostic string on execution faults."""
        try:
            return self._text.format_map(data.as_mapping())
        except Exception as exc:  # noqa: BLE001 - rendering must not raise
            logger.debug("template execution failed: %r", exc)
            return RENDER_FAILURE_FORMAT.format(fault=_describe(exc), message=data.message)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ErrorTemplate({self._text!r})"


def _describe(exc: Exception) -> str:
    return f"{type(exc).__name__}: {exc}"


__all__ = ["ErrorTemplate", "TemplateData", "LabelView", "TEMPLATE_FIELDS", "FIELD_ALIASES"]
