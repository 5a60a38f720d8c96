from typing import Annotated, Any, cast

from fastapi import Body, Depends, Request

from quicknotes.app import App
from quicknotes.core.modules.note.models import BulkOperation, NoteImport, NoteInput
from quicknotes.core.modules.note.validators import validate_bulk_operation, validate_import, validate_note

# Whole JSON body; None when the request has none
RawBody = Annotated[Any, Body()]


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_valid_note(payload: RawBody = None) -> NoteInput:
    """Require a body satisfying the note schema."""
    return validate_note({} if payload is None else payload)


async def get_valid_bulk_operation(payload: RawBody = None) -> BulkOperation:
    """Require a body satisfying the bulk operation schema."""
    return validate_bulk_operation({} if payload is None else payload)


async def get_valid_import(payload: RawBody = None) -> NoteImport:
    """Require a body satisfying the import schema."""
    return validate_import({} if payload is None else payload)


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
ValidNoteDep = Annotated[NoteInput, Depends(get_valid_note)]
BulkOperationDep = Annotated[BulkOperation, Depends(get_valid_bulk_operation)]
NoteImportDep = Annotated[NoteImport, Depends(get_valid_import)]
