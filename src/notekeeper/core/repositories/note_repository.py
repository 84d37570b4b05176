"""Note repository over the notes record store."""

import time
from typing import Optional

from ..storage import Record, RecordStore


def _current_millis() -> int:
    return int(time.time() * 1000)


class NoteRepository:
    """Repository for note records."""

    def __init__(self, store: RecordStore):
        self.store = store

    async def list_notes(self) -> list[Record]:
        """All notes in insertion order."""
        return await self.store.load()

    async def get_by_id(self, note_id: int) -> Optional[Record]:
        """Get note by ID."""
        notes = await self.store.load()
        return next((n for n in notes if n.get("id") == note_id), None)

    async def create_note(self, note_data: dict) -> Record:
        """Append a note; the id is a millisecond timestamp, kept strictly increasing."""
        async with self.store.transaction() as notes:
            last_id = max((n["id"] for n in notes if isinstance(n.get("id"), int)), default=0)
            note = {"id": max(_current_millis(), last_id + 1), **note_data}
            notes.append(note)
        return note

    async def update_note(self, note_id: int, update_data: dict) -> Optional[Record]:
        """Shallow-merge ``update_data`` into the stored note."""
        async with self.store.transaction() as notes:
            for index, note in enumerate(notes):
                if note.get("id") == note_id:
                    notes[index] = {**note, **update_data, "id": note_id}
                    return notes[index]
        return None

    async def delete_note(self, note_id: int) -> bool:
        """Delete note; the store is only rewritten when something was removed."""
        async with self.store.transaction() as notes:
            remaining = [n for n in notes if n.get("id") != note_id]
            if len(remaining) == len(notes):
                return False
            notes[:] = remaining
        return True
