"""Notes API endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from ..config import Settings, get_settings
from ..core.schemas.notes import NoteCreate, NoteResponse, NoteUpdate
from ..core.services import NoteService
from ..middleware.auth import get_current_username

router = APIRouter(
    prefix="/notes", tags=["notes"], dependencies=[Depends(get_current_username)]
)


@router.get("", response_model=List[NoteResponse], response_model_exclude_none=True)
async def list_notes(settings: Settings = Depends(get_settings)):
    """List all notes."""
    note_service = NoteService(settings)
    return await note_service.list_notes()


@router.get("/{note_id}", response_model=NoteResponse, response_model_exclude_none=True)
async def get_note(note_id: int, settings: Settings = Depends(get_settings)):
    """Get a specific note."""
    note_service = NoteService(settings)
    return await note_service.get_note(note_id)


@router.post(
    "", response_model=NoteResponse, status_code=201, response_model_exclude_none=True
)
async def create_note(request: NoteCreate, settings: Settings = Depends(get_settings)):
    """Create a new note."""
    note_service = NoteService(settings)
    return await note_service.create_note(request)


@router.put("/{note_id}", response_model=NoteResponse, response_model_exclude_none=True)
async def update_note(
    note_id: int,
    request: NoteUpdate,
    settings: Settings = Depends(get_settings),
):
    """Update the fields sent; everything else is kept."""
    note_service = NoteService(settings)
    return await note_service.update_note(note_id, request)


@router.delete("/{note_id}", status_code=204)
async def delete_note(note_id: int, settings: Settings = Depends(get_settings)):
    """Delete a note."""
    note_service = NoteService(settings)
    await note_service.delete_note(note_id)
