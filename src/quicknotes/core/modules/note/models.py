from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, StrictBool

from quicknotes.utils import now

TagValue = Annotated[str, Field(min_length=1, max_length=50)]
NoteId = Annotated[str, Field(min_length=1)]


def _parse_bool_string(value: Any) -> Any:
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    return value


# Only real booleans and the strings "true"/"false"
Flag = Annotated[StrictBool, BeforeValidator(_parse_bool_string)]


class Note(BaseModel):
    """Note held by the in-memory store."""

    model_config = ConfigDict(populate_by_name=True)

    id: int  # Sequential, len(notes) + 1 at creation
    title: str
    content: str
    created_at: datetime = Field(default_factory=now, alias="createdAt")


class NoteInput(BaseModel):
    """Validated note payload with defaults applied."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    category: str = Field("General", min_length=1, max_length=50)
    tags: list[TagValue] = Field(default_factory=list)
    is_pinned: Flag = Field(False, alias="isPinned")
    is_archived: Flag = Field(False, alias="isArchived")


class BulkAction(StrEnum):
    """Actions accepted by a bulk operation payload."""

    ARCHIVE = "archive"
    UNARCHIVE = "unarchive"
    DELETE = "delete"


class BulkOperation(BaseModel):
    """Validated bulk operation payload."""

    model_config = ConfigDict(extra="forbid")

    action: BulkAction
    note_ids: list[NoteId] = Field(..., min_length=1, alias="noteIds")


class NoteImport(BaseModel):
    """Validated import payload."""

    model_config = ConfigDict(extra="forbid")

    notes: list[NoteInput] = Field(..., min_length=1)
