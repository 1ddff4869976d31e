"""Tests for Firestore REST value encoding."""

from datetime import UTC, date, datetime
from decimal import Decimal

import pytest

from hradmin.infrastructure.firebase._rest_encoding import decode_document, encode_document


def test_scalar_encoding() -> None:
    fields = encode_document(
        {"n": None, "b": True, "i": 3, "f": 1.5, "d": Decimal("2.25"), "s": "x"}
    )["fields"]
    assert fields == {
        "n": {"nullValue": None},
        "b": {"booleanValue": True},
        "i": {"integerValue": "3"},
        "f": {"doubleValue": 1.5},
        "d": {"doubleValue": 2.25},
        "s": {"stringValue": "x"},
    }


def test_calendar_date_stored_as_iso_string() -> None:
    fields = encode_document({"joinDate": date(2024, 4, 1)})["fields"]
    assert fields["joinDate"] == {"stringValue": "2024-04-01"}


def test_timestamp_decodes_to_aware_datetime() -> None:
    ts = datetime(2024, 4, 1, 10, 30, tzinfo=UTC)
    decoded = decode_document(encode_document({"createdAt": ts}))
    assert decoded["createdAt"] == ts


def test_nested_map_and_array() -> None:
    data = {"tenthStandard": {"board": "CBSE", "marks": [90, 85]}}
    assert decode_document(encode_document(data)) == data


def test_decode_empty_document() -> None:
    assert decode_document(None) == {}
    assert decode_document({"name": "projects/p/databases/(default)/documents/a/b"}) == {}


def test_unsupported_type_rejected() -> None:
    with pytest.raises(TypeError):
        encode_document({"x": object()})
