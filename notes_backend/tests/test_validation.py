import pytest

from notes_api.errors import ValidationError
from notes_api.validation import (
    validate_category,
    validate_content,
    validate_email,
    validate_note_fields,
    validate_password,
    validate_title,
)


def test_validate_email_returns_normalized_address():
    assert validate_email("  user@Example.COM ") == "user@example.com"


@pytest.mark.parametrize("value", [None, "", "   ", "not-an-email", "user@", 42])
def test_validate_email_rejects_bad_values(value):
    with pytest.raises(ValidationError):
        validate_email(value)


def test_validate_password_minimum_length():
    assert validate_password("secret") == "secret"
    with pytest.raises(ValidationError) as exc:
        validate_password("12345")
    assert "at least 6" in exc.value.message


def test_validate_title_trims_and_limits_length():
    assert validate_title("  Hello  ") == "Hello"
    assert validate_title("a" * 200) == "a" * 200
    with pytest.raises(ValidationError):
        validate_title("a" * 201)


@pytest.mark.parametrize("value", [None, "", "    "])
def test_validate_title_required(value):
    with pytest.raises(ValidationError) as exc:
        validate_title(value)
    assert exc.value.message == "Title is required"


def test_validate_content_limits():
    assert validate_content("") == ""
    assert validate_content("x" * 10000) == "x" * 10000
    with pytest.raises(ValidationError):
        validate_content("x" * 10001)
    with pytest.raises(ValidationError):
        validate_content(None)


def test_validate_category_empty_becomes_none():
    assert validate_category(None) is None
    assert validate_category("") is None
    assert validate_category("Work") == "Work"
    with pytest.raises(ValidationError):
        validate_category("c" * 51)


def test_validate_note_fields_skips_absent_fields():
    assert validate_note_fields({"content": "body"}) == {"content": "body"}
    assert validate_note_fields({}) == {}


def test_validate_note_fields_reports_title_before_content():
    with pytest.raises(ValidationError) as exc:
        validate_note_fields({"content": "x" * 10001, "title": ""})
    assert exc.value.message == "Title is required"
