from typing import Optional

from pydantic import BaseModel


class NoteCreate(BaseModel):
    # title rules are enforced by smartnotes.validation, not by the schema,
    # so that a missing or blank title can be derived from the content
    title: Optional[str] = None
    content: str


class NoteUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None


class NoteOut(BaseModel):
    id: str
    owner_user_id: str
    title: str
    content: str
    created_at: str
    updated_at: str
    version: int
