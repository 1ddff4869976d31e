"""Conversion between Python values and Firestore REST typed values.

Firestore REST wraps every field in a one-key object naming its type
({"stringValue": "x"}, {"integerValue": "3"}, ...). Calendar dates have
no Firestore type; they are stored as YYYY-MM-DD strings, which is how
the web client writes joining dates and effective dates.
"""

import base64
from collections.abc import Callable
from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Any


def _timestamp(v: datetime) -> str:
    if v.tzinfo is None:
        v = v.replace(tzinfo=UTC)
    return v.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def _encode_value(v: Any) -> dict:
    # bool before int (bool is an int subclass); datetime before date.
    if v is None:
        return {"nullValue": None}
    if isinstance(v, bool):
        return {"booleanValue": v}
    if isinstance(v, int):
        return {"integerValue": str(v)}
    if isinstance(v, (float, Decimal)):
        return {"doubleValue": float(v)}
    if isinstance(v, str):
        return {"stringValue": v}
    if isinstance(v, datetime):
        return {"timestampValue": _timestamp(v)}
    if isinstance(v, date):
        return {"stringValue": v.isoformat()}
    if isinstance(v, bytes):
        return {"bytesValue": base64.b64encode(v).decode("ascii")}
    if isinstance(v, (list, tuple)):
        return {"arrayValue": {"values": [_encode_value(x) for x in v]}}
    if isinstance(v, dict):
        return {"mapValue": encode_document(v)}
    raise TypeError(f"Unsupported Firestore value type: {type(v)}")


_DECODERS: dict[str, Callable[[Any], Any]] = {
    "nullValue": lambda _: None,
    "booleanValue": bool,
    "integerValue": int,
    "doubleValue": float,
    "stringValue": str,
    "timestampValue": lambda s: datetime.fromisoformat(s.replace("Z", "+00:00")),
    "bytesValue": base64.b64decode,
    "referenceValue": str,
    "arrayValue": lambda a: [_decode_value(x) for x in a.get("values") or []],
    "mapValue": lambda m: decode_document(m),
}


def _decode_value(obj: dict) -> Any:
    for kind, raw in obj.items():
        decoder = _DECODERS.get(kind)
        if decoder is not None:
            return decoder(raw)
    return None


def encode_document(data: dict[str, Any]) -> dict:
    """Return the REST body ({"fields": ...}) for a dict of field values."""
    return {"fields": {k: _encode_value(v) for k, v in data.items()}}


def decode_document(document: dict | None) -> dict:
    """Return the field values of a REST document (or mapValue) as a plain dict."""
    if not document:
        return {}
    return {k: _decode_value(v) for k, v in (document.get("fields") or {}).items()}
