"""Base structured logging utilities for gerrors.

Rationale:
- Central place to configure consistent JSON (or plain) logging for errors
  created by formatters wired with ``with_logger(get_logger(...))``.
- Library modules only call ``logging.getLogger(__name__)``; handlers are
  attached here, on demand, never at import time.

The shared base logger is named ``gerrors``. Child loggers (``gerrors.x``)
propagate to its single stderr handler. The level can be overridden with the
``GERRORS_LOG_LEVEL`` environment variable.
"""
from __future__ import annotations

import contextlib
import logging
import os
import sys

from ..config.defaults import ENV_LOG_LEVEL, LOGGER_NAME, TRACE_LEVEL_NUM
from .log_support import JsonFormatter

_BASE_LOGGER_ATTR = "_gerrors_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_gerrors_console_handler"

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level string into an integer constant.

    Accepts common names (TRACE, DEBUG, INFO, WARN, WARNING, ERROR, CRITICAL)
    case-insensitively. Falls back to ``default`` on unknown values.
    """
    if not value:
        return default
    mapping = {
        "TRACE": TRACE_LEVEL_NUM,
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize and return the shared ``gerrors`` logger."""
    logger = logging.getLogger(LOGGER_NAME)
    desired_level = _parse_level(os.getenv(ENV_LOG_LEVEL), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if logger.level != desired_level:
            logger.setLevel(desired_level)
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False):
                # pytest capture swaps sys.stderr between tests
                logger.removeHandler(existing)
                with contextlib.suppress(Exception):
                    existing.close()
                logger.addHandler(_console_handler(json_mode, desired_level))
                continue
            existing.setLevel(desired_level)
            existing.setFormatter(_make_formatter(json_mode))
        return logger

    logger.setLevel(desired_level)
    logger.handlers[:] = [_console_handler(json_mode, desired_level)]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def _console_handler(json_mode: bool, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def get_logger(name: str = LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``name`` after ensuring the shared ``gerrors`` handler exists.

    Use dotted children (``gerrors.billing``) so records reach that handler.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == LOGGER_NAME:
        return base_logger

    logger = logging.getLogger(name)
    # Drop previously managed console handlers to avoid duplicate emissions.
    for handler in list(logger.handlers):
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            with contextlib.suppress(Exception):
                handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    json_mode: bool = True,
    logger_name: str = LOGGER_NAME,
) -> logging.Logger:
    """Reconfigure the shared gerrors logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired logging level. Accepts numeric levels or names (e.g., "DEBUG").
        When ``None``, the current level is preserved.
    json_mode: bool
        Whether managed console handlers use the JSON formatter or a
        human-readable plain text formatter.
    logger_name: str
        Name of the logger to configure. Defaults to the shared "gerrors" logger.

    Returns
    -------
    logging.Logger
        The configured logger instance.
    """
    logger = get_logger(logger_name, json_mode=json_mode)
    if level is not None:
        if isinstance(level, str):
            logger.setLevel(_parse_level(level, default=logger.level))
        else:
            logger.setLevel(level)
    for h in logger.handlers:
        if getattr(h, _CONSOLE_HANDLER_ATTR, False):
            h.setLevel(logger.level)
            h.setFormatter(_make_formatter(json_mode))
    return logger


__all__ = ["get_logger", "configure_logger", "PLAIN_FORMAT"]
