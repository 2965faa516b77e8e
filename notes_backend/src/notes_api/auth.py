from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import NamedTuple, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from notes_api.config import Settings
from notes_api.errors import UnauthorizedError

# Bearer scheme; a missing header yields None so handlers decide what to do
bearer_scheme = HTTPBearer(auto_error=False)


class TokenClaims(NamedTuple):
    user_id: str
    email: str


@lru_cache(maxsize=None)
def password_context(rounds: int) -> CryptContext:
    """Password hashing context; one per configured bcrypt cost."""
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def verify_password(plain_password: str, hashed_password: str, settings: Settings) -> bool:
    """Verify a plaintext password against its hash."""
    return password_context(settings.bcrypt_rounds).verify(plain_password, hashed_password)


def get_password_hash(password: str, settings: Settings) -> str:
    """Hash a plaintext password."""
    return password_context(settings.bcrypt_rounds).hash(password)


def create_access_token(user_id: str, email: str, settings: Settings) -> str:
    """Create a signed JWT access token carrying the user id and email."""
    now = datetime.now(tz=timezone.utc)
    to_encode = {
        "userId": user_id,
        "email": email,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expires_minutes),
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> TokenClaims:
    """
    Verify signature and expiry and return the token claims.

    Raises:
        UnauthorizedError if the token is expired, tampered with or malformed.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError:
        raise UnauthorizedError("Token expired")
    except JWTError:
        raise UnauthorizedError("Invalid token")
    user_id = payload.get("userId")
    email = payload.get("email")
    if not isinstance(user_id, str) or not isinstance(email, str):
        raise UnauthorizedError("Invalid token")
    return TokenClaims(user_id=user_id, email=email)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


# PUBLIC_INTERFACE
def get_caller_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Optional[str]:
    """
    Dependency that verifies the bearer token once per request and returns the
    caller id, or None when no token was sent.

    Raises:
        401 if a token was sent but is invalid or expired.
    """
    if credentials is None:
        return None
    return decode_access_token(credentials.credentials, settings).user_id
