from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class TitleErrorKind(str, Enum):
    EMPTY = "empty"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"


class ContentErrorKind(str, Enum):
    EMPTY = "empty"


class AppError(Exception):
    """Base class for every client-visible failure of the notes backend.

    Subclasses hold structured data only; the human message and the error
    envelope are derived from it.
    """

    code = "APP_ERROR"
    error_type = "CLIENT_ERROR"
    status_code = 400
    field: Optional[str] = None

    def __init__(self) -> None:
        super().__init__(self.message)

    @property
    def message(self) -> str:
        raise NotImplementedError

    def details(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "code": self.code,
            "type": self.error_type,
            "message": self.message,
        }
        if self.field is not None:
            out["field"] = self.field
        out.update(self.details())
        return out


class InvalidTitle(AppError):
    code = "INVALID_TITLE"
    status_code = 422
    field = "title"

    def __init__(self, reason: TitleErrorKind, length: int, limit: int) -> None:
        self.reason = reason
        self.length = length
        self.limit = limit
        super().__init__()

    @property
    def message(self) -> str:
        if self.reason is TitleErrorKind.EMPTY:
            return "Title cannot be empty or contain only whitespace"
        if self.reason is TitleErrorKind.TOO_SHORT:
            return f"Title must be at least {self.limit} character(s), got {self.length}"
        return f"Title must be at most {self.limit} characters, got {self.length}"

    def details(self) -> dict[str, Any]:
        return {"reason": self.reason.value, "length": self.length, "limit": self.limit}


class InvalidContent(AppError):
    code = "INVALID_CONTENT"
    status_code = 422
    field = "content"

    def __init__(self, reason: ContentErrorKind = ContentErrorKind.EMPTY) -> None:
        self.reason = reason
        super().__init__()

    @property
    def message(self) -> str:
        return "Content cannot be empty or contain only whitespace"

    def details(self) -> dict[str, Any]:
        return {"reason": self.reason.value}


class InvalidIdentifier(AppError):
    code = "INVALID_UUID"
    status_code = 422

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__()

    @property
    def message(self) -> str:
        return f"Invalid UUID format: '{self.value}'"

    def details(self) -> dict[str, Any]:
        return {"invalid_uuid": self.value}


class NoteNotFound(AppError):
    code = "NOTE_NOT_FOUND"
    status_code = 404

    def __init__(self, note_id: str) -> None:
        self.note_id = note_id
        super().__init__()

    @property
    def message(self) -> str:
        return "Note not found"

    def details(self) -> dict[str, Any]:
        return {"note_id": self.note_id}


# failures raised by the input processor
ValidationError = (InvalidTitle, InvalidContent)
