import logging
import uuid
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from notes_api.errors import ForbiddenError, NotFoundError, UnauthorizedError
from notes_api.models import Note
from notes_api.validation import validate_note_fields

logger = logging.getLogger(__name__)


def _require_caller(caller_id: Optional[str]) -> str:
    if not caller_id:
        raise UnauthorizedError("Authentication required")
    return caller_id


def _load_owned_note(db: Session, caller_id: str, note_id: str, forbidden_message: str) -> Note:
    """Fetch a note and run the ownership check against the caller."""
    try:
        key = str(uuid.UUID(note_id))
    except (TypeError, ValueError):
        raise NotFoundError("Note not found")
    note = db.get(Note, key)
    if note is None:
        raise NotFoundError("Note not found")
    if note.user_id != caller_id:
        raise ForbiddenError(forbidden_message)
    return note


def list_notes(
    db: Session,
    caller_id: Optional[str],
    category: Optional[str] = None,
    search: Optional[str] = None,
) -> List[Note]:
    """
    List the caller's notes, newest first.

    Args:
        category: exact, case-sensitive category match
        search: case-insensitive substring matched against title or content;
            notes matching in the title are ranked before content-only matches
    """
    caller_id = _require_caller(caller_id)
    query = db.query(Note).filter(Note.user_id == caller_id)
    if category:
        query = query.filter(Note.category == category)
    notes = query.order_by(Note.created_at.desc()).all()

    if search:
        # matched in Python: SQLite's lower() only folds ASCII
        needle = search.casefold()
        title_hits = [n for n in notes if needle in n.title.casefold()]
        content_hits = [
            n for n in notes
            if needle not in n.title.casefold() and needle in n.content.casefold()
        ]
        notes = title_hits + content_hits
    return notes


def get_note(db: Session, caller_id: Optional[str], note_id: str) -> Note:
    caller_id = _require_caller(caller_id)
    return _load_owned_note(db, caller_id, note_id, "You do not have access to this note")


def create_note(
    db: Session,
    caller_id: Optional[str],
    title: Optional[str],
    content: Optional[str] = None,
    category: Optional[str] = None,
) -> Note:
    """
    Create a note owned by the caller. Missing content defaults to "" and a
    missing category to null.
    """
    caller_id = _require_caller(caller_id)
    fields = validate_note_fields({
        "title": title,
        "content": "" if content is None else content,
        "category": category,
    })
    note = Note(user_id=caller_id, **fields)
    db.add(note)
    db.commit()
    db.refresh(note)
    logger.debug("Created note %s for user %s", note.id, caller_id)
    return note


def update_note(db: Session, caller_id: Optional[str], note_id: str, changes: Dict[str, Any]) -> Note:
    """
    Apply a partial update. Only keys present in `changes` are validated and
    written; an empty `changes` returns the note untouched.
    """
    caller_id = _require_caller(caller_id)
    note = _load_owned_note(db, caller_id, note_id, "You do not have permission to modify this note")
    fields = validate_note_fields(changes)
    if not fields:
        return note
    for name, value in fields.items():
        setattr(note, name, value)
    db.commit()
    db.refresh(note)
    return note


def delete_note(db: Session, caller_id: Optional[str], note_id: str) -> bool:
    caller_id = _require_caller(caller_id)
    note = _load_owned_note(db, caller_id, note_id, "You do not have permission to delete this note")
    db.delete(note)
    db.commit()
    logger.debug("Deleted note %s", note_id)
    return True


def list_categories(db: Session, caller_id: Optional[str]) -> List[str]:
    """Distinct non-empty categories used by the caller, sorted."""
    caller_id = _require_caller(caller_id)
    rows = (
        db.query(Note.category)
        .filter(Note.user_id == caller_id, Note.category.isnot(None), Note.category != "")
        .distinct()
        .all()
    )
    return sorted(row[0] for row in rows)
