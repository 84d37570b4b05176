"""Note service implementation."""

from typing import List

from ...config import Settings
from ..exceptions import NotFoundError
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from ..storage import get_record_store
from .interfaces import INoteService


class NoteService(INoteService):
    """Note service implementation.

    Any authenticated user may read and change any note; the routers take
    care of authentication.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.note_repo = NoteRepository(get_record_store(settings.notes_path))

    async def list_notes(self) -> List[NoteResponse]:
        notes = await self.note_repo.list_notes()
        return [NoteResponse.model_validate(n) for n in notes]

    async def get_note(self, note_id: int) -> NoteResponse:
        note = await self.note_repo.get_by_id(note_id)
        if not note:
            raise NotFoundError("Note not found")
        return NoteResponse.model_validate(note)

    async def create_note(self, request: NoteCreate) -> NoteResponse:
        note_data = {"title": request.title, "content": request.content}
        # createdBy/lastEditedBy are only stored when the caller sent them
        if request.created_by is not None:
            note_data["createdBy"] = request.created_by
        if request.last_edited_by is not None:
            note_data["lastEditedBy"] = request.last_edited_by

        note = await self.note_repo.create_note(note_data)
        return NoteResponse.model_validate(note)

    async def update_note(self, note_id: int, request: NoteUpdate) -> NoteResponse:
        note = await self.note_repo.update_note(note_id, request.changes())
        if not note:
            raise NotFoundError("Note not found")
        return NoteResponse.model_validate(note)

    async def delete_note(self, note_id: int) -> None:
        if not await self.note_repo.delete_note(note_id):
            raise NotFoundError("Note not found")
