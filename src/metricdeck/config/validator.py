"""Validation error formatting for authored content files."""

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError


def _record_label(loc: tuple[Any, ...], records: Sequence[Any] | None) -> str | None:
    """Name the authored record an error location points into, if known.

    Locations from a collection file start with the record index, so
    ``(3, "sections", 2, "rows")`` maps to the slug of the fourth record.
    """
    if not records or not loc or not isinstance(loc[0], int):
        return None
    index = loc[0]
    if index >= len(records):
        return None
    record = records[index]
    if isinstance(record, dict) and isinstance(record.get("slug"), str):
        return record["slug"]
    return None


def flatten_pydantic_errors(
    exc: PydanticValidationError,
    records: Sequence[Any] | None = None,
) -> list[str]:
    """Flatten Pydantic ValidationError into author-friendly messages.

    Each message names the field path (for example ``3.sections.2.rows``)
    and, when the raw records are supplied, the slug of the record the
    error belongs to, so authors can find it in a long YAML file.

    Args:
        exc: Pydantic ValidationError exception
        records: Raw authored records the error locations index into

    Returns:
        List of human-readable error messages, one per field error
    """
    errors: list[str] = []

    for error in exc.errors():
        loc = tuple(error.get("loc", ()))
        field_path = ".".join(str(item) for item in loc) if loc else "unknown"

        msg = error.get("msg", "Unknown error")
        label = _record_label(loc, records)
        prefix = f"Record '{label}', field" if label else "Field"

        if error.get("type", "") == "value_error":
            input_val = error.get("input")
            formatted = f"{prefix} '{field_path}': {msg} (received: {input_val!r})"
        else:
            formatted = f"{prefix} '{field_path}': {msg}"

        errors.append(formatted)

    return errors if errors else ["Validation failed with unknown error"]
