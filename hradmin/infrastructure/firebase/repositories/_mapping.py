"""Field-name mapping between DTO attributes and Firestore document keys.

The web client writes camelCase keys; DTOs and API schemas use snake_case.
"""

from __future__ import annotations

import dataclasses
from datetime import date, datetime
from typing import Any, TypeVar

from pydantic.alias_generators import to_camel

R = TypeVar("R")

# Keys whose stored spelling is not the plain camelCase of the attribute.
_IRREGULAR_KEYS: dict[str, str] = {
    "employer_pf": "employerPF",
    "is_it": "isIT",
    "voter_id": "voterID",
}


def document_key(field_name: str) -> str:
    """Return the Firestore key for a snake_case attribute name."""
    return _IRREGULAR_KEYS.get(field_name) or to_camel(field_name)


def _stored_value(value: Any) -> Any:
    # Calendar dates are stored as YYYY-MM-DD strings, as the web client writes them.
    if isinstance(value, date) and not isinstance(value, datetime):
        return value.isoformat()
    return value


def to_document(data: dict[str, Any]) -> dict[str, Any]:
    """Rename snake_case keys to document keys; 'id' is never stored as a field."""
    return {document_key(k): _stored_value(v) for k, v in data.items() if k != "id"}


def from_document(result_type: type[R], doc_id: str, data: dict[str, Any]) -> R:
    """Build a DTO from a document, ignoring keys the DTO does not declare."""
    values: dict[str, Any] = {"id": doc_id}
    for field in dataclasses.fields(result_type):  # type: ignore[arg-type]
        if field.name == "id":
            continue
        key = document_key(field.name)
        if key in data:
            values[field.name] = data[key]
    return result_type(**values)
