"""
Adapter exposing a stdlib ``logging.Logger`` through every logger capability.

``logging.Logger`` cannot be used as a formatter logger directly: its
``error(msg, *args)`` signature treats the key/values as %-format arguments.
``LoggingAdapter`` translates the capability calls instead:

- key/values are attached as ``extra={"labels": {...}}`` so the
  :class:`~gerrors.base.log_support.JsonFormatter` emits them as one object;
- ``error`` also attaches the original error text, and its traceback when the
  error was actually raised;
- ``trace`` logs at the registered ``TRACE`` level (numeric 5).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Sequence

from ...config.defaults import TRACE_LEVEL_NUM
from ..core_parts.sentinel import is_no_original_error

logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")


def pairs_to_dict(key_values: Sequence[Any]) -> Dict[str, Any]:
    """Fold an alternating key/value sequence into a dict (odd tail ignored)."""
    return {str(key_values[i]): key_values[i + 1] for i in range(0, len(key_values) - 1, 2)}


class LoggingAdapter:
    """Capability logger backed by a stdlib logger."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def error(self, err: BaseException, msg: str, *key_values: Any) -> None:
        extra: Dict[str, Any] = {"labels": pairs_to_dict(key_values)}
        exc_info = None
        if not is_no_original_error(err):
            extra["original_error"] = str(err)
            if isinstance(err, BaseException) and err.__traceback__ is not None:
                exc_info = err
        self._logger.error(msg, exc_info=exc_info, extra=extra)

    def warn(self, msg: str, *key_values: Any) -> None:
        self._logger.warning(msg, extra={"labels": pairs_to_dict(key_values)})

    def info(self, msg: str, *key_values: Any) -> None:
        self._logger.info(msg, extra={"labels": pairs_to_dict(key_values)})

    def debug(self, msg: str, *key_values: Any) -> None:
        self._logger.debug(msg, extra={"labels": pairs_to_dict(key_values)})

    def trace(self, msg: str, *key_values: Any) -> None:
        self._logger.log(TRACE_LEVEL_NUM, msg, extra={"labels": pairs_to_dict(key_values)})

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"LoggingAdapter({self._logger.name!r})"


__all__ = ["LoggingAdapter", "pairs_to_dict"]
