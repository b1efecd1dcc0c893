from __future__ import annotations

import uuid

from smartnotes.errors import (
    ContentErrorKind,
    InvalidContent,
    InvalidIdentifier,
    InvalidTitle,
    TitleErrorKind,
)
from smartnotes.validation.rules import DEFAULT_RULES, ValidationRules


def validate_title(title: str, rules: ValidationRules = DEFAULT_RULES) -> None:
    """Raise InvalidTitle unless the trimmed title fits the configured bounds."""
    trimmed = title.strip()
    length = len(trimmed)

    if not trimmed:
        raise InvalidTitle(TitleErrorKind.EMPTY, length=0, limit=rules.title_min_length)

    if length < rules.title_min_length:
        raise InvalidTitle(TitleErrorKind.TOO_SHORT, length=length, limit=rules.title_min_length)

    if length > rules.title_max_length:
        raise InvalidTitle(TitleErrorKind.TOO_LONG, length=length, limit=rules.title_max_length)


def validate_content(content: str, rules: ValidationRules = DEFAULT_RULES) -> None:
    # no upper bound on content yet; only blank content is rejected
    if not content.strip():
        raise InvalidContent(ContentErrorKind.EMPTY)


def validate_uuid(value: str) -> uuid.UUID:
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise InvalidIdentifier(value=str(value)) from None
