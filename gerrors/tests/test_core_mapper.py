"""Classification vocabulary: codes, records, lookupers and the default table."""

from __future__ import annotations

from dataclasses import dataclass

import grpc
import pytest

from gerrors.base.core import (
    DEFAULT_MAPPING,
    DEFAULT_UNKNOWN_CODE,
    Code,
    CoreError,
    CoreGrpcError,
    CoreRecord,
    FuncLookuper,
    Lookuper,
    Mapper,
    code_text,
    default_mapper,
    get_default_mapping,
    grpc_code_of,
)


@dataclass(frozen=True)
class PlainRecord:
    internal_code: int
    identifier: str
    default_message: str


@dataclass(frozen=True)
class BadGrpcRecord:
    internal_code: int
    identifier: str
    default_message: str
    grpc_code: int = 13


def test_code_values_are_stable():
    assert [int(c) for c in Code] == list(range(1, 12))  # nosec B101 - assert is appropriate in unit tests
    assert Code.INTERNAL == 9  # nosec B101
    assert code_text(Code.STORAGE) == "5"  # nosec B101
    assert code_text(42) == "42"  # nosec B101


@pytest.mark.parametrize(
    "code, identifier, status",
    [
        (Code.UNKNOWN, "unknown", grpc.StatusCode.UNKNOWN),
        (Code.NOT_FOUND, "not-found", grpc.StatusCode.NOT_FOUND),
        (Code.INVALID_ARGUMENT, "invalid-argument", grpc.StatusCode.INVALID_ARGUMENT),
        (Code.MARSHAL, "marshal", grpc.StatusCode.INTERNAL),
        (Code.STORAGE, "storage", grpc.StatusCode.INTERNAL),
        (Code.THRESHOLD, "out-of-range", grpc.StatusCode.OUT_OF_RANGE),
        (Code.UNIMPLEMENTED, "unimplemented", grpc.StatusCode.UNIMPLEMENTED),
        (Code.UNAUTHORIZED, "unauthorized", grpc.StatusCode.UNAUTHENTICATED),
        (Code.INTERNAL, "internal", grpc.StatusCode.INTERNAL),
        (Code.UNAVAILABLE, "unavailable", grpc.StatusCode.UNAVAILABLE),
        (Code.EXTERNAL_REQUEST, "external-request", grpc.StatusCode.INTERNAL),
    ],
)
def test_default_mapping_entries(code, identifier, status):
    record = DEFAULT_MAPPING[code]
    assert record.internal_code == code  # nosec B101
    assert record.identifier == identifier  # nosec B101
    assert record.default_message  # nosec B101
    assert grpc_code_of(record) is status  # nosec B101


def test_default_mapping_is_read_only_and_copy_is_independent():
    with pytest.raises(TypeError):
        DEFAULT_MAPPING[Code.INTERNAL] = None  # type: ignore[index]
    copy = get_default_mapping()
    copy[Code.INTERNAL] = CoreRecord(Code.INTERNAL, "mine", "overridden")
    assert DEFAULT_MAPPING[Code.INTERNAL].identifier == "internal"  # nosec B101
    assert len(copy) == len(DEFAULT_MAPPING) == 11  # nosec B101


def test_mapper_falls_back_to_unknown_record():
    mapper = default_mapper()
    assert mapper.unknown_code == DEFAULT_UNKNOWN_CODE  # nosec B101
    assert mapper.lookup(Code.STORAGE).identifier == "storage"  # nosec B101
    assert mapper.lookup(9).identifier == "internal"  # nosec B101 - plain ints resolve too
    assert mapper.lookup(999).identifier == "unknown"  # nosec B101


def test_mapper_snapshots_its_table():
    table = {Code.UNKNOWN: CoreRecord(Code.UNKNOWN, "unknown", "?")}
    mapper = Mapper(Code.UNKNOWN, table)
    table[Code.INTERNAL] = CoreRecord(Code.INTERNAL, "internal", "!")
    assert Code.INTERNAL not in mapper  # nosec B101
    assert len(mapper) == 1  # nosec B101
    assert mapper.lookup(Code.INTERNAL).identifier == "unknown"  # nosec B101


def test_mapper_with_custom_codes():
    table = get_default_mapping()
    table[100] = CoreRecord(100, "quota", "quota exhausted", grpc.StatusCode.RESOURCE_EXHAUSTED)
    mapper = Mapper(Code.UNKNOWN, table)
    assert mapper.lookup(100).identifier == "quota"  # nosec B101
    assert grpc_code_of(mapper.lookup(100)) is grpc.StatusCode.RESOURCE_EXHAUSTED  # nosec B101


def test_mapper_without_unknown_entry_returns_none():
    mapper = Mapper(Code.UNKNOWN, {Code.INTERNAL: DEFAULT_MAPPING[Code.INTERNAL]})
    assert mapper.lookup(Code.INTERNAL) is not None  # nosec B101
    assert mapper.lookup(Code.STORAGE) is None  # nosec B101


def test_capability_protocols():
    record = CoreRecord(Code.INTERNAL, "internal", "msg")
    assert isinstance(record, CoreError)  # nosec B101
    assert isinstance(record, CoreGrpcError)  # nosec B101
    plain = PlainRecord(7, "plain", "no grpc")
    assert isinstance(plain, CoreError)  # nosec B101
    assert not isinstance(plain, CoreGrpcError)  # nosec B101
    assert grpc_code_of(plain) is None  # nosec B101
    assert grpc_code_of(BadGrpcRecord(7, "bad", "int grpc code")) is None  # nosec B101
    assert grpc_code_of(None) is None  # nosec B101


def test_func_lookuper_retries_with_unknown_code():
    seen = []

    def find(code):
        seen.append(int(code))
        return DEFAULT_MAPPING.get(code) if code != Code.STORAGE else None

    lookuper = FuncLookuper(Code.UNAVAILABLE, find)
    assert isinstance(lookuper, Lookuper)  # nosec B101
    assert lookuper.lookup(Code.INTERNAL).identifier == "internal"  # nosec B101
    assert lookuper.lookup(Code.STORAGE).identifier == "unavailable"  # nosec B101
    assert seen == [9, 5, 10]  # nosec B101
