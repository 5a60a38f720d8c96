import threading

import structlog

from quicknotes.core.core import Service
from quicknotes.core.modules.note.models import Note

logger = structlog.get_logger(__name__)

SEED_NOTES = [
    ("First Note", "This is my first note"),
    ("Second Note", "This is another note"),
]


class NoteService(Service):
    """Holds every note in memory for the lifetime of the process.

    Ids are derived from the current length, so they stay unique only
    because notes are never removed.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._notes: list[Note] = [
            Note(id=number, title=title, content=content) for number, (title, content) in enumerate(SEED_NOTES, start=1)
        ]

    async def on_start(self) -> None:
        logger.info("notes_ready", count=self.count)

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._notes)

    def list_notes(self) -> list[Note]:
        """Get all notes in insertion order."""
        with self._lock:
            return list(self._notes)

    def create_note(self, title: str | None, content: str | None) -> Note:
        """Append a note; a falsy title becomes "Untitled" and a falsy content an empty string."""
        with self._lock:
            note = Note(id=len(self._notes) + 1, title=title or "Untitled", content=content or "")
            self._notes.append(note)
        logger.info("note_created", note_id=note.id)
        return note
