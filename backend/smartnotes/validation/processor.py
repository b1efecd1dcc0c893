from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from smartnotes.validation.fields import validate_content, validate_title
from smartnotes.validation.rules import DEFAULT_RULES, ValidationRules
from smartnotes.validation.title import extract_title


@dataclass(frozen=True)
class RawInput:
    content: str
    title: Optional[str] = None


@dataclass(frozen=True)
class ValidatedNote:
    title: str
    content: str

    def __iter__(self) -> Iterator[str]:
        # allows: title, content = process_create(...)
        yield self.title
        yield self.content


@dataclass(frozen=True)
class NoteChanges:
    title: Optional[str] = None
    content: Optional[str] = None

    def is_empty(self) -> bool:
        return self.title is None and self.content is None


def process_create(
    title: Optional[str],
    content: str,
    rules: ValidationRules = DEFAULT_RULES,
) -> ValidatedNote:
    """Validate a new note and settle its title.

    A missing or blank title is derived from the content. The returned
    content is the input with only outer whitespace removed.
    Raises InvalidContent or InvalidTitle.
    """
    validate_content(content, rules)

    if title is not None and title.strip():
        validate_title(title, rules)
        final_title = title.strip()
    else:
        final_title = extract_title(content, rules)
        validate_title(final_title, rules)

    return ValidatedNote(title=final_title, content=content.strip())


def process(raw: RawInput, rules: ValidationRules = DEFAULT_RULES) -> ValidatedNote:
    return process_create(raw.title, raw.content, rules)


def process_update(
    title: Optional[str],
    content: Optional[str],
    rules: ValidationRules = DEFAULT_RULES,
) -> NoteChanges:
    """Validate the fields present in a partial update; absent fields stay None."""
    if title is not None:
        validate_title(title, rules)
    if content is not None:
        validate_content(content, rules)

    return NoteChanges(
        title=title.strip() if title is not None else None,
        content=content.strip() if content is not None else None,
    )
