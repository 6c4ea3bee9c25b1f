"""
Formatter: error factory and rendering configuration.

A :class:`Formatter` bundles a compiled message template, a lookuper, default
labels, a missing-value policy, an optional logger and an ``ErrorInfo`` domain.
It is configured once through option functions and then used to create
:class:`~gerrors.base.general_error.GeneralError` values::

    f = Formatter(
        with_template("{identifier}: {message}"),
        with_labels("service", "billing"),
        with_logger(logging.getLogger("billing")),
    )
    err = f.new(exc, Code.STORAGE, "table", "invoices")

Options are applied in the order given; a later option touching the same
setting replaces the earlier one. ``with_labels`` ingests its pairs with the
missing-value policy active at that point.

Concurrency
-----------
``add_labels`` mutates the formatter in place without locking. Derive a
per-request formatter with ``clone()`` before attaching request-scoped labels;
creating and rendering errors on a formatter nobody mutates is thread-safe.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from ..config.defaults import DEFAULT_MISSING_VALUE, DEFAULT_TEMPLATE
from .core_parts.code import CodeLike
from .core_parts.config_error import FormatterConfigError
from .core_parts.default_mapping import default_mapper
from .core_parts.lookuper import Lookuper
from .core_parts.mapper import FuncLookuper, LookupFunc
from .core_parts.sentinel import NO_ORIGINAL_ERROR
from .general_error import ErrorDetails, GeneralError
from .labels import MissingValuePolicy, flatten_labels, ingest_labels
from .logger_parts.capabilities import ErrorLogger
from .logger_parts.dispatch import dispatch_log
from .logger_parts.log_level import LogLevel
from .logger_parts.stdlib_adapter import LoggingAdapter
from .template import ErrorTemplate

FormatterOption = Callable[["Formatter"], None]

_DEFAULT_TEMPLATE = ErrorTemplate(DEFAULT_TEMPLATE)


class Formatter:
    """Configuration object and factory for :class:`GeneralError`."""

    def __init__(self, *options: FormatterOption) -> None:
        self._template: ErrorTemplate = _DEFAULT_TEMPLATE
        self._lookuper: Lookuper = default_mapper()
        self._labels: Dict[str, str] = {}
        self._missing_value = MissingValuePolicy(DEFAULT_MISSING_VALUE)
        self._logger: Optional[ErrorLogger] = None
        self._domain = ""
        for option in options:
            option(self)

    # -------- accessors --------

    @property
    def template(self) -> ErrorTemplate:
        return self._template

    @property
    def template_text(self) -> str:
        return self._template.text

    @property
    def lookuper(self) -> Lookuper:
        return self._lookuper

    @property
    def logger(self) -> Optional[ErrorLogger]:
        return self._logger

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def missing_value_policy(self) -> MissingValuePolicy:
        return self._missing_value

    @property
    def missing_value_replacement(self) -> Optional[str]:
        """Replacement token for trailing keys, ``None`` when disabled."""
        return self._missing_value.token

    def labels_map(self) -> Dict[str, str]:
        """Copy of the default labels."""
        return dict(self._labels)

    def labels_slice(self) -> List[str]:
        """Default labels as an alternating ``[k1, v1, ...]`` list."""
        return flatten_labels(self._labels)

    # -------- derivation --------

    def clone(self) -> "Formatter":
        """Return a formatter with its own copy of the labels.

        Template, lookuper, logger, domain and missing-value policy are shared
        by reference; all of them are immutable or externally owned.
        """
        twin = type(self).__new__(type(self))
        twin._template = self._template
        twin._lookuper = self._lookuper
        twin._labels = dict(self._labels)
        twin._missing_value = self._missing_value
        twin._logger = self._logger
        twin._domain = self._domain
        return twin

    def add_labels(self, *key_values: Any) -> "Formatter":
        """Merge key/values into this formatter's labels; returns ``self``."""
        ingest_labels(key_values, self._missing_value, into=self._labels)
        return self

    # -------- error creation --------

    def new(self, original_error: Optional[BaseException], code: CodeLike, *key_values: Any) -> GeneralError:
        """Create an error and log it at ``LogLevel.ERROR``.

        ``original_error`` may be ``None``; the rendered message then falls back
        to the record's default message.
        """
        return self.new_with_log_level(original_error, code, LogLevel.ERROR, *key_values)

    def new_with_log_level(
        self,
        original_error: Optional[BaseException],
        code: CodeLike,
        level: LogLevel,
        *key_values: Any,
    ) -> GeneralError:
        """Create an error and log it at ``level`` (``LogLevel.OFF`` skips logging)."""
        err = self._create_error(original_error, code, key_values)
        if self._logger is not None:
            cause = original_error if original_error is not None else NO_ORIGINAL_ERROR
            dispatch_log(self._logger, level, cause, err.message, err.metadata_slice())
        return err

    def _create_error(self, original_error: Optional[BaseException], code: CodeLike, key_values: Any) -> GeneralError:
        record = self._lookuper.lookup(code)
        details = ErrorDetails.build(
            record,
            code,
            original_error if original_error is not None else NO_ORIGINAL_ERROR,
            self._labels,
            key_values,
            self._missing_value,
        )
        return GeneralError(original_error, record, self, details, code)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Formatter(template={self._template.text!r}, labels={len(self._labels)})"


# ---------------------------------------------------------------- options --


def with_template(text: str) -> FormatterOption:
    """Use ``text`` as the message template; compiled immediately.

    Raises:
        TemplateConfigError: when the template does not compile.
    """
    compiled = ErrorTemplate(text)

    def apply(f: Formatter) -> None:
        f._template = compiled

    return apply


def with_lookuper(lookuper: Lookuper) -> FormatterOption:
    """Resolve codes through ``lookuper`` instead of the default table."""
    if not isinstance(lookuper, Lookuper):
        raise FormatterConfigError(f"lookuper must provide lookup(code), got {type(lookuper).__name__}")

    def apply(f: Formatter) -> None:
        f._lookuper = lookuper

    return apply


def with_lookup_func(unknown_code: CodeLike, func: LookupFunc) -> FormatterOption:
    """Resolve codes through a standalone callable with ``unknown_code`` fallback."""
    if not callable(func):
        raise FormatterConfigError(f"lookup function must be callable, got {type(func).__name__}")
    return with_lookuper(FuncLookuper(unknown_code, func))


def with_labels(*key_values: Any) -> FormatterOption:
    """Add default labels attached to every error the formatter creates."""

    def apply(f: Formatter) -> None:
        f.add_labels(*key_values)

    return apply


def with_missing_value_replacement(token: str) -> FormatterOption:
    """Pair trailing keys that have no value with ``token``."""

    def apply(f: Formatter) -> None:
        f._missing_value = MissingValuePolicy(str(token))

    return apply


def with_disabled_missing_value_replacement() -> FormatterOption:
    """Drop trailing keys that have no value."""

    def apply(f: Formatter) -> None:
        f._missing_value = MissingValuePolicy.disabled()

    return apply


def with_logger(logger: Any) -> FormatterOption:
    """Log every created error through ``logger``.

    Accepts an object satisfying :class:`ErrorLogger` (optionally the other
    level capabilities), a stdlib ``logging.Logger`` (wrapped in
    :class:`LoggingAdapter`), or ``None`` to disable logging.
    """
    if isinstance(logger, (logging.Logger, logging.LoggerAdapter)):
        resolved: Optional[ErrorLogger] = LoggingAdapter(logger)  # type: ignore[arg-type]
    elif logger is None or isinstance(logger, ErrorLogger):
        resolved = logger
    else:
        raise FormatterConfigError(f"logger must provide error(err, msg, *kv), got {type(logger).__name__}")

    def apply(f: Formatter) -> None:
        f._logger = resolved

    return apply


def with_domain(domain: str) -> FormatterOption:
    """Set the ``ErrorInfo.domain`` carried by projected statuses."""

    def apply(f: Formatter) -> None:
        f._domain = str(domain)

    return apply


__all__ = [
    "Formatter",
    "FormatterOption",
    "with_template",
    "with_lookuper",
    "with_lookup_func",
    "with_labels",
    "with_missing_value_replacement",
    "with_disabled_missing_value_replacement",
    "with_logger",
    "with_domain",
]
