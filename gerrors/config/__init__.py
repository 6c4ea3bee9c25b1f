"""Unified configuration layer for formatters.

Goals
-----
* Centralize defaults (template, missing-value token, label rules).
* Merge sources in a predictable order:
    1. Built-in defaults (``FormatterSettings`` field defaults)
    2. Environment variables (``GERRORS_TEMPLATE``, ``GERRORS_LABELS``, ...)
    3. Optional external config file (JSON or YAML) pointed to by
       ``GERRORS_CONFIG_FILE``
    4. In-code overrides passed to helper
* Build formatters explicitly from the merged settings; there is no
  process-wide default formatter.

External Config File (Optional)
-------------------------------
JSON is tried first, then YAML. Settings may sit at the top level or under a
``gerrors`` key::

    gerrors:
      template: "{identifier}: {message}"
      replace_missing_value: false
      labels:
        service: billing
      domain: billing.example.com

Public API
----------
* get_formatter_settings(overrides: dict | None = None) -> FormatterSettings
* formatter_from_settings(settings=None, *, lookuper=None, logger=None) -> Formatter
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

import yaml

from .env import get_config_file_path, read_env_settings
from .settings import FormatterSettings

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..base.core_parts.lookuper import Lookuper
    from ..base.formatter import Formatter


def load_config_file(path: Optional[str]) -> Dict[str, Any]:
    """Load settings from a JSON or YAML file; missing paths yield ``{}``."""
    if not path:
        return {}
    p = Path(path)
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = yaml.safe_load(text)
    if not isinstance(data, Mapping):
        return {}
    section = data.get("gerrors", data)
    return dict(section) if isinstance(section, Mapping) else {}


def get_formatter_settings(overrides: Optional[Mapping[str, Any]] = None) -> FormatterSettings:
    """Return merged formatter settings (defaults → env → file → overrides)."""
    merged: Dict[str, Any] = {}
    merged.update(read_env_settings())
    merged.update(load_config_file(get_config_file_path()))
    if overrides:
        merged.update({k: v for k, v in overrides.items() if v is not None})
    return FormatterSettings(**merged)


def formatter_from_settings(
    settings: Optional[FormatterSettings] = None,
    *,
    lookuper: Optional["Lookuper"] = None,
    logger: Any = None,
) -> "Formatter":
    """Build a :class:`~gerrors.base.formatter.Formatter` from ``settings``.

    ``settings`` defaults to :func:`get_formatter_settings`. When ``logger`` is
    omitted and ``settings.log_level`` is set, the shared ``gerrors`` logger is
    configured at that level and attached.

    Raises:
        TemplateConfigError: when ``settings.template`` does not compile.
    """
    from ..base import formatter as fmt
    from ..base.logging import configure_logger

    settings = settings if settings is not None else get_formatter_settings()

    options: List[fmt.FormatterOption] = []
    if settings.replace_missing_value:
        options.append(fmt.with_missing_value_replacement(settings.missing_value))
    else:
        options.append(fmt.with_disabled_missing_value_replacement())
    options.append(fmt.with_template(settings.template))
    if settings.labels:
        flat: List[Any] = []
        for k, v in settings.labels.items():
            flat.extend((k, v))
        options.append(fmt.with_labels(*flat))
    if settings.domain:
        options.append(fmt.with_domain(settings.domain))
    if lookuper is not None:
        options.append(fmt.with_lookuper(lookuper))
    if logger is None and settings.log_level:
        logger = configure_logger(level=settings.log_level)
    if logger is not None:
        options.append(fmt.with_logger(logger))
    return fmt.Formatter(*options)


__all__ = [
    "FormatterSettings",
    "get_formatter_settings",
    "formatter_from_settings",
    "load_config_file",
]
