"""
Note and sharing schemas.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _not_blank(value: Optional[str], label: str) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError(f"{label} cannot be empty")
    return value


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: str = Field(min_length=1, max_length=200, description="Note title")
    content: str = Field(min_length=1, description="Note content")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        return _not_blank(v, "Title")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        return _not_blank(v, "Content")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"title": "Groceries", "content": "milk, eggs, test strips"}
        }
    )


class NoteUpdate(BaseModel):
    """Partial note update; fields left out keep their value."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        return _not_blank(v, "Title")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        return _not_blank(v, "Content")

    @model_validator(mode="after")
    def at_least_one_field(self):
        if self.title is None and self.content is None:
            raise ValueError("Provide a title or content to update")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)


class NoteResponse(BaseModel):
    """Note as returned by the API: ``{_id, title, content, createdAt, ownerId}``."""

    id: uuid.UUID = Field(alias="_id")
    title: str
    content: str
    created_at: datetime = Field(alias="createdAt")
    owner_id: uuid.UUID = Field(alias="ownerId")

    model_config = ConfigDict(populate_by_name=True)


class ShareRequest(BaseModel):
    receiver_id: uuid.UUID = Field(alias="receiverId", description="User to share the note with")

    model_config = ConfigDict(populate_by_name=True)


class ShareResponse(BaseModel):
    """Result of a share; ``userId`` is always the recipient."""

    message: str
    note_id: uuid.UUID = Field(alias="noteId")
    user_id: uuid.UUID = Field(alias="userId")

    model_config = ConfigDict(populate_by_name=True)
