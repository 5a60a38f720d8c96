from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from quicknotes.config import Config
from quicknotes.core.core import Core
from quicknotes.core.modules.note.models import Note, NoteImport


class App:
    """Facade for all application operations used by the web layer."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def get_notes(self) -> list[Note]:
        """Get all notes in insertion order."""
        return self._core.services.note.list_notes()

    async def create_note(self, title: str | None, content: str | None) -> Note:
        """Create note from raw title/content, falling back to defaults."""
        return self._core.services.note.create_note(title, content)

    async def import_notes(self, notes_import: NoteImport) -> list[Note]:
        """Append every validated note of an import payload, in order."""
        return [self._core.services.note.create_note(item.title, item.content) for item in notes_import.notes]
