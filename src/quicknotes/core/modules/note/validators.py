"""Payload validators for notes, bulk operations and imports.

Each validator accepts the decoded request body as-is and either returns the
normalized model (defaults applied) or raises ValidationError carrying the
message of the first violation found, in field declaration order.
"""

import re
from collections.abc import Mapping
from typing import Any, TypeVar

import pydantic

from quicknotes.core.modules.note.models import BulkOperation, NoteImport, NoteInput
from quicknotes.errors import ValidationError

_QUOTED_RE = re.compile(r"'([^']*)'")

M = TypeVar("M", bound=pydantic.BaseModel)


def format_location(loc: tuple[int | str, ...]) -> str:
    """Render an error location as a dotted path, e.g. ``notes[0].title``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else part
    return path or "value"


def describe_error(error: Mapping[str, Any]) -> str:
    """Turn a single pydantic error into a client-facing message."""
    label = f'"{format_location(error["loc"])}"'
    ctx = error.get("ctx") or {}
    error_type = error["type"]

    if error_type == "missing":
        return f"{label} is required"
    if error_type == "string_type":
        return f"{label} must be a string"
    if error_type == "string_too_short":
        if ctx.get("min_length") == 1:
            return f"{label} is not allowed to be empty"
        return f"{label} length must be at least {ctx.get('min_length')} characters long"
    if error_type == "string_too_long":
        return f"{label} length must be less than or equal to {ctx.get('max_length')} characters long"
    if error_type in ("bool_type", "bool_parsing"):
        return f"{label} must be a boolean"
    if error_type == "list_type":
        return f"{label} must be an array"
    if error_type == "too_short":
        return f"{label} must contain at least {ctx.get('min_length')} items"
    if error_type in ("enum", "literal_error"):
        allowed = ", ".join(_QUOTED_RE.findall(str(ctx.get("expected", ""))))
        return f"{label} must be one of [{allowed}]"
    if error_type == "extra_forbidden":
        return f"{label} is not allowed"
    if error_type in ("model_type", "model_attributes_type", "dict_type"):
        return f"{label} must be of type object"
    if error_type == "json_invalid":
        return "Malformed JSON request body"
    return f"{label} {error['msg']}"


def _validate(model: type[M], payload: Any) -> M:
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as e:
        raise ValidationError(describe_error(e.errors()[0])) from e


def validate_note(payload: Any) -> NoteInput:
    """Validate a note payload.

    Raises:
        ValidationError: If the payload violates the note schema
    """
    return _validate(NoteInput, payload)


def validate_bulk_operation(payload: Any) -> BulkOperation:
    """Validate a bulk operation payload ({action, noteIds}).

    Raises:
        ValidationError: If the action is unknown or noteIds is empty
    """
    return _validate(BulkOperation, payload)


def validate_import(payload: Any) -> NoteImport:
    """Validate an import payload; every entry must satisfy the note schema.

    Raises:
        ValidationError: If the payload or any of its notes is invalid
    """
    return _validate(NoteImport, payload)
