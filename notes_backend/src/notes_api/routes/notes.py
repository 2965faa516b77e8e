from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from notes_api.auth import get_caller_id
from notes_api.database import get_db
from notes_api.schemas import DeleteResponse, NoteCreateRequest, NoteResponse, NoteUpdateRequest
from notes_api.services import notes_service

router = APIRouter(tags=["Notes"])


# PUBLIC_INTERFACE
@router.get("/notes", response_model=List[NoteResponse], summary="List notes with filter and search")
def list_notes(
    category: Optional[str] = Query(None, description="Exact category to filter by"),
    search: Optional[str] = Query(None, description="Search text for title/content"),
    caller_id: Optional[str] = Depends(get_caller_id),
    db: Session = Depends(get_db),
):
    """
    List notes belonging to the current user.

    Query params:
        category: optional exact category
        search: optional text to match in title or content, title matches first

    Returns:
        Notes ordered by creation time, newest first.
    """
    return notes_service.list_notes(db, caller_id, category=category, search=search)


# PUBLIC_INTERFACE
@router.get("/notes/{note_id}", response_model=NoteResponse, summary="Get a note by ID")
def get_note(
    note_id: str,
    caller_id: Optional[str] = Depends(get_caller_id),
    db: Session = Depends(get_db),
):
    """
    Retrieve a single note by ID. Only the owner can access it.
    """
    return notes_service.get_note(db, caller_id, note_id)


# PUBLIC_INTERFACE
@router.post(
    "/notes",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new note",
)
def create_note(
    payload: NoteCreateRequest,
    caller_id: Optional[str] = Depends(get_caller_id),
    db: Session = Depends(get_db),
):
    """
    Create a new note for the authenticated user.

    Body:
        title: note title, 1-200 characters
        content: note content, up to 10000 characters
        category: optional category, up to 50 characters
    """
    return notes_service.create_note(
        db, caller_id, payload.title, content=payload.content, category=payload.category
    )


# PUBLIC_INTERFACE
@router.patch("/notes/{note_id}", response_model=NoteResponse, summary="Update a note by ID")
def update_note(
    note_id: str,
    payload: NoteUpdateRequest,
    caller_id: Optional[str] = Depends(get_caller_id),
    db: Session = Depends(get_db),
):
    """
    Update a note. Only the owner can modify it, and only the fields sent are changed.
    """
    changes = payload.model_dump(exclude_unset=True)
    return notes_service.update_note(db, caller_id, note_id, changes)


# PUBLIC_INTERFACE
@router.delete("/notes/{note_id}", response_model=DeleteResponse, summary="Delete a note by ID")
def delete_note(
    note_id: str,
    caller_id: Optional[str] = Depends(get_caller_id),
    db: Session = Depends(get_db),
):
    """
    Delete a note permanently. Only the owner can delete it.
    """
    return DeleteResponse(success=notes_service.delete_note(db, caller_id, note_id))


@router.get("/categories", response_model=List[str], summary="Categories used by the current user")
def list_categories(caller_id: Optional[str] = Depends(get_caller_id), db: Session = Depends(get_db)):
    return notes_service.list_categories(db, caller_id)
