"""Label ingestion: pairing, key validation and missing-value policy."""

from __future__ import annotations

import pytest

from gerrors.base.labels import (
    LabelPair,
    MissingValuePolicy,
    PairStatus,
    flatten_labels,
    ingest_labels,
    pair_up,
    stringify_key,
)


class Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no text form")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("request_id", "request_id"),
        ("svc.name-1", "svc.name-1"),
        (False, "False"),
        (42, "42"),
        (None, None),
        ("", None),
        ("k" * 64, "k" * 64),
        ("k" * 65, None),
        ("$key%3", None),
        ("with space", None),
        (Unprintable(), None),
    ],
)
def test_stringify_key(raw, expected):
    assert stringify_key(raw) == expected  # nosec B101 - assert is appropriate in unit tests


def test_pair_up_reports_each_outcome():
    pairs = list(
        pair_up(["a", 1, "$bad", "x", "b", Unprintable(), "tail"], MissingValuePolicy())
    )
    assert [p.status for p in pairs] == [  # nosec B101
        PairStatus.ACCEPTED,
        PairStatus.INVALID_KEY,
        PairStatus.INVALID_VALUE,
        PairStatus.REPLACED_MISSING_VALUE,
    ]
    assert pairs[0] == LabelPair("a", "1", PairStatus.ACCEPTED)  # nosec B101
    assert pairs[3].value == "(MISSING)"  # nosec B101


def test_trailing_key_dropped_when_replacement_disabled():
    pairs = list(pair_up(["only"], MissingValuePolicy.disabled()))
    assert pairs == [LabelPair("only", None, PairStatus.DROPPED_MISSING_VALUE)]  # nosec B101
    assert not pairs[0].accepted  # nosec B101


def test_ingest_labels_later_keys_win_and_values_are_stringified():
    labels = ingest_labels(["k", 1, "k", True, "n", None], MissingValuePolicy())
    assert labels == {"k": "True", "n": "None"}  # nosec B101


def test_ingest_labels_merges_into_existing_mapping():
    target = {"keep": "1"}
    out = ingest_labels(["add", "2", "bad key", "3"], MissingValuePolicy("?"), into=target)
    assert out is target  # nosec B101
    assert target == {"keep": "1", "add": "2"}  # nosec B101


def test_policy_flags():
    assert MissingValuePolicy().enabled  # nosec B101
    assert not MissingValuePolicy.disabled().enabled  # nosec B101
    assert MissingValuePolicy("N/A").token == "N/A"  # nosec B101


def test_flatten_labels_preserves_order():
    assert flatten_labels({"a": "1", "b": "2"}) == ["a", "1", "b", "2"]  # nosec B101
