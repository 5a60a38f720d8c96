from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from quicknotes.core.modules.note.models import Note
from quicknotes.web.deps import AppDep, NoteImportDep, RawBody
from quicknotes.web.openapi import ErrorResponse

router: APIRouter = APIRouter(tags=["notes"])


def _raw_text(body: dict[str, Any], key: str) -> str | None:
    """Read a body value as text; falsy values are left for the store defaults."""
    value = body.get(key)
    if not value:
        return None
    return value if isinstance(value, str) else str(value)


class NoteResponse(BaseModel):
    """Single note envelope."""

    success: bool = True
    data: Note


class NoteListResponse(BaseModel):
    """Note list envelope."""

    success: bool = True
    count: int = Field(..., ge=0, description="Number of notes in data")
    data: list[Note]


@router.get(
    "/notes",
    summary="List notes",
    description="Get every note in insertion order. No filtering or pagination.",
    operation_id="listNotes",
    responses={200: {"description": "All notes"}},
)
async def list_notes(app: AppDep) -> NoteListResponse:
    notes = await app.get_notes()
    return NoteListResponse(count=len(notes), data=notes)


@router.post(
    "/notes",
    summary="Create new note",
    description=(
        "Append a note built from the raw title and content. The body is not checked against the note schema: "
        'a missing or empty title becomes "Untitled", a missing or empty content becomes an empty string, '
        "other values are stored as text and a body that is not an object counts as empty."
    ),
    operation_id="createNote",
    status_code=201,
    responses={
        201: {"description": "Note created successfully"},
        400: {"model": ErrorResponse, "description": "Malformed JSON body"},
    },
)
async def create_note(app: AppDep, payload: RawBody = None) -> NoteResponse:
    body = payload if isinstance(payload, dict) else {}
    note = await app.create_note(_raw_text(body, "title"), _raw_text(body, "content"))
    return NoteResponse(data=note)


@router.post(
    "/notes/import",
    summary="Import notes",
    description="Validate every note of the payload against the note schema, then append them in order.",
    operation_id="importNotes",
    status_code=201,
    responses={
        201: {"description": "Notes imported successfully"},
        400: {"model": ErrorResponse, "description": "Payload or one of its notes failed validation"},
    },
)
async def import_notes(app: AppDep, notes_import: NoteImportDep) -> NoteListResponse:
    notes = await app.import_notes(notes_import)
    return NoteListResponse(count=len(notes), data=notes)
