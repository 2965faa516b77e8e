from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    """Stored timestamps are naive UTC; mark them so clients do not read local time."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class ApiModel(BaseModel):
    """Base for response bodies: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# Auth / Tokens

class RegisterRequest(BaseModel):
    """Request model to register a new user"""
    email: Optional[str] = Field(None, description="User email")
    password: Optional[str] = Field(None, description="Plaintext password (min 6 chars)")


class LoginRequest(BaseModel):
    """Request model to log in"""
    email: Optional[str] = Field(None, description="User email")
    password: Optional[str] = Field(None, description="Plaintext password")


class VerifyRequest(BaseModel):
    token: str = Field(..., description="JWT access token to check")


class PublicUser(ApiModel):
    """User info safe to hand back to clients"""
    id: str
    email: str


class AuthResponse(ApiModel):
    """Token plus public user info, returned by register and login"""
    token: str
    user: PublicUser


class VerifyResponse(ApiModel):
    """Token check result; user_id and email are only set when valid"""
    valid: bool
    user_id: Optional[str] = None
    email: Optional[str] = None


class UserProfile(ApiModel):
    id: str
    email: str
    created_at: UtcDatetime


# Notes

class NoteCreateRequest(BaseModel):
    """Create note request; limits are checked in notes_api.validation"""
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None


class NoteUpdateRequest(BaseModel):
    """Update note request (partial): only fields sent by the client are applied"""
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None


class NoteResponse(ApiModel):
    """Note response model"""
    id: str
    title: str
    content: str
    category: Optional[str]
    user_id: str
    created_at: UtcDatetime
    updated_at: UtcDatetime


class DeleteResponse(ApiModel):
    success: bool


class HealthResponse(ApiModel):
    status: str
    timestamp: str
