import uuid

import pytest

from smartnotes.errors import (
    ContentErrorKind,
    InvalidContent,
    InvalidIdentifier,
    InvalidTitle,
    TitleErrorKind,
)
from smartnotes.validation.fields import validate_content, validate_title, validate_uuid
from smartnotes.validation.rules import TITLE_MAX_LENGTH, ValidationRules


def test_valid_title_passes():
    validate_title("A title")
    validate_title("  padded  ")
    validate_title("x")


def test_empty_title_fails():
    for bad in ("", "   ", "\n\t"):
        with pytest.raises(InvalidTitle) as exc:
            validate_title(bad)
        assert exc.value.reason is TitleErrorKind.EMPTY


def test_title_max_length_is_inclusive():
    validate_title("x" * TITLE_MAX_LENGTH)

    with pytest.raises(InvalidTitle) as exc:
        validate_title("x" * (TITLE_MAX_LENGTH + 1))
    assert exc.value.reason is TitleErrorKind.TOO_LONG
    assert exc.value.length == 201
    assert exc.value.limit == 200


def test_title_length_ignores_outer_whitespace():
    validate_title("  " + "x" * TITLE_MAX_LENGTH + "  ")


def test_title_length_counts_codepoints_not_bytes():
    # 200 codepoints, 800 bytes in UTF-8
    validate_title("😀" * TITLE_MAX_LENGTH)
    with pytest.raises(InvalidTitle):
        validate_title("é" * (TITLE_MAX_LENGTH + 1))


def test_title_min_length_is_configurable():
    rules = ValidationRules(title_min_length=3)
    validate_title("abc", rules)
    with pytest.raises(InvalidTitle) as exc:
        validate_title(" ab ", rules)
    assert exc.value.reason is TitleErrorKind.TOO_SHORT
    assert exc.value.length == 2
    assert exc.value.limit == 3


def test_validating_a_valid_trimmed_title_again_is_a_noop():
    title = "  Hello there  ".strip()
    validate_title(title)
    validate_title(title.strip())


def test_empty_content_fails():
    for bad in ("", "   ", "\n\n"):
        with pytest.raises(InvalidContent) as exc:
            validate_content(bad)
        assert exc.value.reason is ContentErrorKind.EMPTY


def test_long_content_has_no_limit():
    validate_content("x" * 100_000)


def test_validate_uuid():
    u = uuid.uuid4()
    assert validate_uuid(str(u)) == u

    with pytest.raises(InvalidIdentifier) as exc:
        validate_uuid("not-a-uuid")
    assert exc.value.value == "not-a-uuid"


def test_rules_reject_inconsistent_limits():
    with pytest.raises(ValueError):
        ValidationRules(title_min_length=0)
    with pytest.raises(ValueError):
        ValidationRules(title_max_length=40, truncate_length=50)
    with pytest.raises(ValueError):
        ValidationRules(truncate_length=3)
