"""
Label ingestion for formatter defaults and per-error metadata.

Labels arrive as a flat ``key, value, key, value, ...`` sequence (the shape
used by structured loggers). ``pair_up`` groups that sequence into
:class:`LabelPair` objects whose :class:`PairStatus` states explicitly whether a
pair was accepted, paired with the missing-value token, or dropped.

Key rules
---------
- ``None`` keys are rejected; any other key is converted with ``str()``.
- Keys must be non-empty, at most ``MAX_LABEL_KEY_LENGTH`` characters and
  match ``LABEL_KEY_PATTERN`` (ASCII letters, digits, ``_``, ``.``, ``-``).
- Values of any type are stored as ``str(value)``; a value whose ``str()``
  raises drops the pair.

Failure modes
-------------
Nothing in this module raises for bad input. Rejected pairs are dropped and
reported at DEBUG level on the module logger; the rest of the list is kept.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Mapping, MutableMapping, Optional, Sequence

from ..config.defaults import DEFAULT_MISSING_VALUE, LABEL_KEY_PATTERN, MAX_LABEL_KEY_LENGTH

logger = logging.getLogger(__name__)

_KEY_RE = re.compile(LABEL_KEY_PATTERN)


class PairStatus(str, Enum):
    """Validation outcome of one key/value pair."""

    ACCEPTED = "accepted"
    REPLACED_MISSING_VALUE = "replaced_missing_value"
    DROPPED_MISSING_VALUE = "dropped_missing_value"
    INVALID_KEY = "invalid_key"
    INVALID_VALUE = "invalid_value"


@dataclass(frozen=True)
class MissingValuePolicy:
    """What to do with a trailing key that has no value.

    ``token`` is the replacement stored for the key; ``None`` disables
    replacement so the key is dropped instead.
    """

    token: Optional[str] = DEFAULT_MISSING_VALUE

    @classmethod
    def disabled(cls) -> "MissingValuePolicy":
        return cls(token=None)

    @property
    def enabled(self) -> bool:
        return self.token is not None


@dataclass(frozen=True)
class LabelPair:
    """One grouped key/value pair and its validation outcome."""

    key: Optional[str]
    value: Optional[str]
    status: PairStatus

    @property
    def accepted(self) -> bool:
        return self.status in (PairStatus.ACCEPTED, PairStatus.REPLACED_MISSING_VALUE)


def _safe_str(x: Any) -> Optional[str]:
    try:
        return str(x)
    except Exception:  # noqa: BLE001 - arbitrary __str__ implementations
        return None


def stringify_key(raw: Any) -> Optional[str]:
    """Return the validated string form of ``raw`` or ``None`` when invalid."""
    if raw is None:
        return None
    key = _safe_str(raw)
    if not key or len(key) > MAX_LABEL_KEY_LENGTH:
        return None
    if not _KEY_RE.match(key):
        return None
    return key


def pair_up(key_values: Sequence[Any], policy: MissingValuePolicy) -> Iterator[LabelPair]:
    """Group a flat sequence into classified :class:`LabelPair` objects."""
    for index in range(0, len(key_values), 2):
        raw_key = key_values[index]
        key = stringify_key(raw_key)
        if key is None:
            yield LabelPair(_safe_str(raw_key), None, PairStatus.INVALID_KEY)
            continue

        if index + 1 >= len(key_values):
            if policy.enabled:
                yield LabelPair(key, policy.token, PairStatus.REPLACED_MISSING_VALUE)
            else:
                yield LabelPair(key, None, PairStatus.DROPPED_MISSING_VALUE)
            continue

        value = _safe_str(key_values[index + 1])
        if value is None:
            yield LabelPair(key, None, PairStatus.INVALID_VALUE)
            continue
        yield LabelPair(key, value, PairStatus.ACCEPTED)


def ingest_labels(
    key_values: Sequence[Any],
    policy: MissingValuePolicy,
    into: Optional[MutableMapping[str, str]] = None,
) -> MutableMapping[str, str]:
    """Merge the accepted pairs of ``key_values`` into ``into`` (later wins).

    Returns the target mapping; a new dict when ``into`` is ``None``.
    """
    target: MutableMapping[str, str] = {} if into is None else into
    for pair in pair_up(key_values, policy):
        if pair.accepted:
            target[pair.key] = pair.value  # type: ignore[index]
        else:
            logger.debug("dropped label pair key=%r status=%s", pair.key, pair.status.value)
    return target


def flatten_labels(labels: Mapping[str, str]) -> List[str]:
    """Return ``labels`` as an alternating ``[k1, v1, k2, v2, ...]`` list."""
    flat: List[str] = []
    for k, v in labels.items():
        flat.extend((k, v))
    return flat


__all__ = [
    "PairStatus",
    "MissingValuePolicy",
    "LabelPair",
    "stringify_key",
    "pair_up",
    "ingest_labels",
    "flatten_labels",
]
