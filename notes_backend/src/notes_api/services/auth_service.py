import logging
import uuid
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from notes_api.auth import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from notes_api.config import Settings
from notes_api.errors import AppError, NotFoundError, UnauthorizedError, ValidationError
from notes_api.models import User
from notes_api.schemas import AuthResponse, PublicUser, UserProfile, VerifyResponse
from notes_api.validation import validate_email, validate_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def _auth_response(user: User, settings: Settings) -> AuthResponse:
    token = create_access_token(user.id, user.email, settings)
    return AuthResponse(token=token, user=PublicUser(id=user.id, email=user.email))


def register(db: Session, settings: Settings, email: str, password: str) -> AuthResponse:
    """
    Register a new user and issue a token.

    Raises:
        ValidationError if the email or password is invalid or the email is
        already registered.
    """
    email = validate_email(email)
    password = validate_password(password)

    if db.query(User).filter(User.email == email).first():
        raise ValidationError("Email already registered")

    user = User(email=email, password_hash=get_password_hash(password, settings))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError("Email already registered")
    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return _auth_response(user, settings)


def login(db: Session, settings: Settings, email: str, password: str) -> AuthResponse:
    """
    Check credentials and issue a token. Every failure gets the same message
    so callers cannot tell unknown emails from wrong passwords.
    """
    if not isinstance(email, str) or not isinstance(password, str) or not password:
        raise UnauthorizedError(INVALID_CREDENTIALS)
    try:
        email = validate_email(email)
    except ValidationError:
        raise UnauthorizedError(INVALID_CREDENTIALS)

    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(password, user.password_hash, settings):
        logger.info("Failed login attempt")
        raise UnauthorizedError(INVALID_CREDENTIALS)
    return _auth_response(user, settings)


def verify(settings: Settings, token: str) -> VerifyResponse:
    """Non-throwing token check."""
    try:
        claims = decode_access_token(token, settings)
    except AppError:
        return VerifyResponse(valid=False)
    return VerifyResponse(valid=True, user_id=claims.user_id, email=claims.email)


def me(db: Session, caller_id: Optional[str]) -> UserProfile:
    if not caller_id:
        raise UnauthorizedError("Authentication required")
    try:
        user_id = str(uuid.UUID(caller_id))
    except ValueError:
        raise NotFoundError("User not found")
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return UserProfile.model_validate(user)
