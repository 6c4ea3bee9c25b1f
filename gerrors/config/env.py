"""gerrors.config.env
==================

Environment variable helpers for formatter settings.

Purpose
-------
- Provide a single source of truth for the environment variable names that
  influence formatter construction (see ``ENV_FIELD_MAP``).
- Parse the few non-trivial encodings (booleans, ``k=v,k2=v2`` label lists).

Failure Modes
-------------
- Helpers never raise on unset or malformed variables; malformed label
  entries are skipped and unknown boolean spellings count as false.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

from .defaults import (
    ENV_CONFIG_FILE,
    ENV_DISABLE_MISSING_VALUE,
    ENV_DOMAIN,
    ENV_LABELS,
    ENV_LOG_LEVEL,
    ENV_MISSING_VALUE,
    ENV_TEMPLATE,
)

# Settings field → env var name
ENV_FIELD_MAP: Dict[str, str] = {
    "template": ENV_TEMPLATE,
    "missing_value": ENV_MISSING_VALUE,
    "disable_missing_value": ENV_DISABLE_MISSING_VALUE,
    "labels": ENV_LABELS,
    "domain": ENV_DOMAIN,
    "log_level": ENV_LOG_LEVEL,
}

_TRUTHY = {"1", "true", "yes", "on"}


def is_truthy(val: Optional[str]) -> bool:
    """Return True for ``1``/``true``/``yes``/``on`` (case-insensitive)."""
    if val is None:
        return False
    return val.strip().lower() in _TRUTHY


def parse_labels(raw: Optional[str]) -> Dict[str, str]:
    """Parse ``"k1=v1,k2=v2"`` into an ordered dict.

    Entries without ``=`` or with an empty key are skipped. Whitespace around
    keys and values is stripped.
    """
    labels: Dict[str, str] = {}
    if not raw:
        return labels
    for entry in raw.split(","):
        if "=" not in entry:
            continue
        k, v = entry.split("=", 1)
        k = k.strip()
        if k:
            labels[k] = v.strip()
    return labels


def read_env_settings(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Collect formatter settings present in the environment.

    Only variables that are set (and non-empty) appear in the result, so the
    mapping can be layered over defaults without clobbering them.
    """
    env = os.environ if environ is None else environ
    out: Dict[str, Any] = {}
    for field_name, var in ENV_FIELD_MAP.items():
        raw = env.get(var)
        if raw is None or raw == "":
            continue
        if field_name == "disable_missing_value":
            out["replace_missing_value"] = not is_truthy(raw)
        elif field_name == "labels":
            out["labels"] = parse_labels(raw)
        else:
            out[field_name] = raw
    return out


def get_config_file_path(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    env = os.environ if environ is None else environ
    return env.get(ENV_CONFIG_FILE) or None


__all__ = [
    "ENV_FIELD_MAP",
    "is_truthy",
    "parse_labels",
    "read_env_settings",
    "get_config_file_path",
]
