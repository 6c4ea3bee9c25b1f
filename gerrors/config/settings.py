"""Typed settings object for formatter construction.

Purpose
-------
Capture the declarative part of a formatter configuration (template,
missing-value policy, default labels, ``ErrorInfo`` domain, log level) in one
validated object that can be loaded from the environment or a config file.
Lookupers and loggers are code, not data, and are passed separately to
:func:`gerrors.config.formatter_from_settings`.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and `.model_copy()` convenience.

Failure modes & side effects
----------------------------
- Pure data container: no I/O side effects. Pydantic raises
  ``ValidationError`` for wrongly typed inputs. Template syntax is checked
  when the formatter is built, not here.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .defaults import DEFAULT_MISSING_VALUE, DEFAULT_TEMPLATE


class FormatterSettings(BaseModel):
    """Declarative formatter configuration.

    Attributes
    ----------
    template:
        Brace-style message template.
    missing_value:
        Token paired with trailing keys when replacement is enabled.
    replace_missing_value:
        ``False`` drops trailing keys instead of pairing them with the token.
    labels:
        Default labels attached to every error. Values are stringified by the
        formatter.
    domain:
        ``ErrorInfo.domain`` for projected statuses.
    log_level:
        Level name for the shared ``gerrors`` logger when the settings also
        enable logging (``None`` leaves logging off).
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    template: str = DEFAULT_TEMPLATE
    missing_value: str = DEFAULT_MISSING_VALUE
    replace_missing_value: bool = True
    labels: Dict[str, Any] = Field(default_factory=dict)
    domain: str = ""
    log_level: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip().upper()
        return value or None


__all__ = ["FormatterSettings"]
