"""
Note schemas.

Field names on the wire are camelCase (``createdBy``, ``lastEditedBy``) to
match the stored records.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    created_by: Optional[str] = Field(default=None, alias="createdBy")
    last_edited_by: Optional[str] = Field(default=None, alias="lastEditedBy")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "shopping",
                "content": "milk",
                "createdBy": "alice",
            }
        },
    )


class NoteUpdate(BaseModel):
    """Partial update: only the fields sent are changed."""

    title: Optional[str] = Field(default=None, description="Note title")
    content: Optional[str] = Field(default=None, description="Note content")
    created_by: Optional[str] = Field(default=None, alias="createdBy")
    last_edited_by: Optional[str] = Field(default=None, alias="lastEditedBy")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"content": "milk, eggs", "lastEditedBy": "bob"}},
    )

    @field_validator("title", "content", "created_by", "last_edited_by")
    @classmethod
    def reject_null(cls, value: Optional[str]) -> str:
        # Leave a field out to keep it; null would erase it
        if value is None:
            raise ValueError("must not be null")
        return value

    def changes(self) -> dict:
        """Fields present in the request, keyed by their stored names."""
        return self.model_dump(exclude_unset=True, by_alias=True)


class NoteResponse(BaseModel):
    """Stored note. Unknown keys already in the store are passed through."""

    id: int = Field(description="Millisecond timestamp assigned at creation")
    title: Optional[str] = None
    content: Optional[str] = None
    created_by: Optional[str] = Field(default=None, alias="createdBy")
    last_edited_by: Optional[str] = Field(default=None, alias="lastEditedBy")

    model_config = ConfigDict(populate_by_name=True, extra="allow")
