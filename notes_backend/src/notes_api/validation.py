"""
Field validation for auth and note payloads.

Each validator returns the cleaned value or raises ValidationError for the
first constraint it finds violated.
"""
from typing import Any, Dict, Optional

from email_validator import EmailNotValidError, validate_email as check_email

from notes_api.errors import ValidationError

PASSWORD_MIN_LENGTH = 6
TITLE_MAX_LENGTH = 200
CONTENT_MAX_LENGTH = 10000
CATEGORY_MAX_LENGTH = 50

NOTE_FIELDS = ("title", "content", "category")


def validate_email(value: Any) -> str:
    """Check email syntax (no DNS lookups) and return its normalized form."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Email is required")
    try:
        return check_email(value.strip(), check_deliverability=False).normalized
    except EmailNotValidError:
        raise ValidationError("Invalid email address")


def validate_password(value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise ValidationError("Password is required")
    if len(value) < PASSWORD_MIN_LENGTH:
        raise ValidationError(f"Password must be at least {PASSWORD_MIN_LENGTH} characters")
    return value


def validate_title(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Title is required")
    title = value.strip()
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(f"Title must not exceed {TITLE_MAX_LENGTH} characters")
    return title


def validate_content(value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError("Content must be a string")
    if len(value) > CONTENT_MAX_LENGTH:
        raise ValidationError(f"Content must not exceed {CONTENT_MAX_LENGTH} characters")
    return value


def validate_category(value: Any) -> Optional[str]:
    """Empty or missing categories are stored as null."""
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise ValidationError("Category must be a string")
    if len(value) > CATEGORY_MAX_LENGTH:
        raise ValidationError(f"Category must not exceed {CATEGORY_MAX_LENGTH} characters")
    return value


_VALIDATORS = {
    "title": validate_title,
    "content": validate_content,
    "category": validate_category,
}


# PUBLIC_INTERFACE
def validate_note_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate the note fields present in `fields`, in the order title, content,
    category, and return their cleaned values. Absent fields are skipped.
    """
    cleaned = {}
    for name in NOTE_FIELDS:
        if name in fields:
            cleaned[name] = _VALIDATORS[name](fields[name])
    return cleaned
