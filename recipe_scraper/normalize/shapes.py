"""Collapse the shape variants schema.org allows for a property into one form.

Each normalizer takes the raw JSON value and the JSON key it came from.
None (key absent or JSON null) always normalizes to None; a present value
that matches none of the accepted shapes raises FieldShapeMismatchError.
"""

from __future__ import annotations

from typing import Any, List, Optional

from recipe_scraper.errors import FieldShapeMismatchError
from recipe_scraper.models.recipe_schema import StepRecord


def json_kind(value: Any) -> str:
    """Name the JSON type of a decoded value."""
    if value is None:
        return "null"
    # bool is an int subclass
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def normalize_scalar(value: Any, field: str) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    raise FieldShapeMismatchError(field, "string", json_kind(value))


def normalize_scalar_or_array(value: Any, field: str) -> Optional[List[str]]:
    """A bare string becomes a one-element list; an array of strings is kept as is."""
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        for item in value:
            if not isinstance(item, str):
                raise FieldShapeMismatchError(
                    field, "string or array of strings", f"array containing {json_kind(item)}"
                )
        return list(value)
    raise FieldShapeMismatchError(field, "string or array of strings", json_kind(value))


def normalize_nested_or_scalar(value: Any, field: str, key: str) -> Optional[str]:
    """Return a bare string, or the string under `key` of a nested object."""
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return _nested_string(value, field, key)
    raise FieldShapeMismatchError(field, f"string or object with {key!r}", json_kind(value))


def normalize_array_of_nested(value: Any, field: str, key: str) -> Optional[List[str]]:
    """Accept one entry or an array of entries, each a string or an object with `key`."""
    if value is None:
        return None
    entries = value if isinstance(value, list) else [value]
    results: List[str] = []
    for entry in entries:
        if isinstance(entry, str):
            results.append(entry)
        elif isinstance(entry, dict):
            results.append(_nested_string(entry, field, key))
        else:
            raise FieldShapeMismatchError(
                field, f"string or object with {key!r}", json_kind(entry)
            )
    return results


def normalize_adaptive_step_sequence(value: Any, field: str) -> Optional[List[StepRecord]]:
    """Decode a bare string, a single step object, or a mixed array of both."""
    if value is None:
        return None
    entries = value if isinstance(value, list) else [value]
    steps: List[StepRecord] = []
    for entry in entries:
        if isinstance(entry, str):
            steps.append(StepRecord(text=entry))
        elif isinstance(entry, dict):
            steps.append(_step_from_object(entry, field))
        else:
            raise FieldShapeMismatchError(field, "string or step object", json_kind(entry))
    return steps


def _nested_string(obj: dict, field: str, key: str) -> str:
    inner = obj.get(key)
    if not isinstance(inner, str):
        raise FieldShapeMismatchError(
            field, f"object with string {key!r}", f"object with {key!r} as {json_kind(inner)}"
        )
    return inner


def _step_from_object(obj: dict, field: str) -> StepRecord:
    return StepRecord(
        text=normalize_scalar(obj.get("text"), f"{field}.text"),
        name=normalize_scalar(obj.get("name"), f"{field}.name"),
        image=normalize_scalar(obj.get("url"), f"{field}.url"),
    )
