import pytest

from smartnotes.errors import InvalidContent, InvalidTitle, TitleErrorKind
from smartnotes.validation.processor import (
    NoteChanges,
    RawInput,
    ValidatedNote,
    process,
    process_create,
    process_update,
)


def test_extracted_title_preserves_content():
    content = "Great day today. Had lots of fun coding with unlimited content length!"
    title, final_content = process_create(None, content)
    assert title == "Great day today"
    assert final_content == content


def test_explicit_title_overrides_extraction():
    content = "Auto title here. But user wants custom title."
    note = process_create("  Custom User Title ", content)
    assert note == ValidatedNote(title="Custom User Title", content=content)


def test_empty_title_is_treated_as_missing():
    assert process_create("", "My Note Title\nBody text here.").title == "My Note Title"
    assert process_create("   ", "Wow! This is amazing.").title == "Wow!"


def test_whitespace_content_fails_regardless_of_title():
    with pytest.raises(InvalidContent):
        process_create(None, "   ")
    with pytest.raises(InvalidContent):
        process_create("Valid title", "   ")
    # content is checked first, even when the title is bad too
    with pytest.raises(InvalidContent):
        process_create("x" * 500, "")


def test_title_too_long_is_rejected():
    with pytest.raises(InvalidTitle) as exc:
        process_create("x" * 201, "fine content")
    assert exc.value.reason is TitleErrorKind.TOO_LONG


def test_content_is_only_trimmed():
    content = "\n  First line.\n\n  indented   body\twith tabs  \n\n"
    note = process_create(None, content)
    assert note.content == content.strip()
    assert note.title == "First line"


@pytest.mark.parametrize(
    "title, content",
    [
        (None, "x" * 10_000),
        (None, "Question? " * 100),
        ("t", "Some body. More body!"),
        ("", "   héllo wörld 😀 " * 40),
        (None, '"unterminated quote. still going\nnext line'),
    ],
)
def test_content_preserved_and_title_valid(title, content):
    note = process_create(title, content)
    assert note.content == content.strip()
    assert 1 <= len(note.title) <= 200


def test_process_raw_input():
    raw = RawInput(content="How does this work? Let me explain.")
    assert process(raw) == ValidatedNote("How does this work?", raw.content)
    assert process(RawInput(content="body", title="Given")).title == "Given"


def test_update_validates_only_present_fields():
    assert process_update(None, None) == NoteChanges()
    assert process_update(None, None).is_empty()

    changes = process_update(" New title ", None)
    assert changes == NoteChanges(title="New title", content=None)

    changes = process_update(None, "  new body  ")
    assert changes == NoteChanges(title=None, content="new body")
    assert not changes.is_empty()


def test_update_rejects_invalid_fields():
    with pytest.raises(InvalidTitle):
        process_update("", None)
    with pytest.raises(InvalidTitle):
        process_update("x" * 201, "fine")
    with pytest.raises(InvalidContent):
        process_update("fine", "  ")
