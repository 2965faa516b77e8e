from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from notes_api.auth import get_caller_id, get_settings
from notes_api.config import Settings
from notes_api.database import get_db
from notes_api.schemas import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    UserProfile,
    VerifyRequest,
    VerifyResponse,
)
from notes_api.services import auth_service

router = APIRouter(prefix="/auth", tags=["Auth"])


# PUBLIC_INTERFACE
@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register_user(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Register a new user.

    Body:
        email: valid email address
        password: plaintext password, at least 6 characters

    Returns:
        Token and public user info.

    Raises:
        400 if the payload is invalid or the email is already in use.
    """
    return auth_service.register(db, settings, payload.email, payload.password)


# PUBLIC_INTERFACE
@router.post("/login", response_model=AuthResponse, summary="Login and obtain JWT access token")
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Login with email and password.

    Raises:
        401 on invalid credentials.
    """
    return auth_service.login(db, settings, payload.email, payload.password)


@router.post(
    "/verify",
    response_model=VerifyResponse,
    response_model_exclude_none=True,
    summary="Check whether a token is valid",
)
def verify_token(payload: VerifyRequest, settings: Settings = Depends(get_settings)):
    return auth_service.verify(settings, payload.token)


# PUBLIC_INTERFACE
@router.get("/me", response_model=UserProfile, summary="Current user profile")
def me(caller_id: Optional[str] = Depends(get_caller_id), db: Session = Depends(get_db)):
    """Return the profile of the authenticated user."""
    return auth_service.me(db, caller_id)
