from smartnotes.errors import (
    AppError,
    InvalidContent,
    InvalidIdentifier,
    InvalidTitle,
    NoteNotFound,
    TitleErrorKind,
    ValidationError,
)


def test_invalid_title_envelope():
    err = InvalidTitle(TitleErrorKind.TOO_LONG, length=250, limit=200)
    assert isinstance(err, AppError)
    assert isinstance(err, ValidationError)
    assert err.status_code == 422
    assert str(err) == "Title must be at most 200 characters, got 250"
    assert err.to_dict() == {
        "code": "INVALID_TITLE",
        "type": "CLIENT_ERROR",
        "message": "Title must be at most 200 characters, got 250",
        "field": "title",
        "reason": "too_long",
        "length": 250,
        "limit": 200,
    }


def test_invalid_content_envelope():
    err = InvalidContent()
    assert isinstance(err, ValidationError)
    d = err.to_dict()
    assert d["code"] == "INVALID_CONTENT"
    assert d["field"] == "content"
    assert d["reason"] == "empty"


def test_identifier_and_not_found_are_client_errors():
    bad_id = InvalidIdentifier("xyz")
    assert bad_id.status_code == 422
    assert bad_id.to_dict()["code"] == "INVALID_UUID"
    assert "field" not in bad_id.to_dict()
    assert not isinstance(bad_id, ValidationError)

    missing = NoteNotFound("abc")
    assert missing.status_code == 404
    assert missing.to_dict()["type"] == "CLIENT_ERROR"
    assert missing.to_dict()["note_id"] == "abc"
