"""
Unit tests for Note schemas (NoteCreate, NoteUpdate, NoteResponse).
"""

import pytest
from pydantic import ValidationError

from notekeeper.core.schemas.notes import NoteCreate, NoteResponse, NoteUpdate


class TestNoteSchemas:
    def test_note_create_accepts_wire_names(self):
        note = NoteCreate(**{"title": "t", "content": "c", "createdBy": "alice"})
        assert note.created_by == "alice"
        assert note.last_edited_by is None

    @pytest.mark.parametrize("missing", ["title", "content"])
    def test_note_create_requires_title_and_content(self, missing):
        data = {"title": "t", "content": "c"}
        del data[missing]
        with pytest.raises(ValidationError):
            NoteCreate(**data)

    def test_note_create_allows_empty_content(self):
        assert NoteCreate(title="t", content="").content == ""

    def test_note_update_changes_only_sent_fields(self):
        update = NoteUpdate(**{"content": "milk, eggs", "lastEditedBy": "bob"})
        assert update.changes() == {"content": "milk, eggs", "lastEditedBy": "bob"}

    def test_note_update_empty(self):
        assert NoteUpdate().changes() == {}

    @pytest.mark.parametrize("field", ["title", "content", "createdBy", "lastEditedBy"])
    def test_note_update_rejects_null(self, field):
        with pytest.raises(ValidationError):
            NoteUpdate(**{field: None})

    def test_note_update_ignores_id(self):
        update = NoteUpdate(**{"id": 5, "title": "x"})
        assert update.changes() == {"title": "x"}

    def test_note_response_passes_unknown_keys_through(self):
        note = NoteResponse(**{"id": 1, "title": "t", "pinned": True})
        dumped = note.model_dump(by_alias=True, exclude_none=True)
        assert dumped == {"id": 1, "title": "t", "pinned": True}
