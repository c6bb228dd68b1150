"""Auth schemas for users, tokens and auth endpoints."""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from app.database.base import MAX_INTEGER_ID


def _check_email(value: str) -> str:
    """Validate the address but keep it exactly as submitted."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value


# Stored and compared case-sensitively, so no normalization
Email = Annotated[str, AfterValidator(_check_email)]


class User(BaseModel):
    """Authenticated user information (never includes the password hash)."""

    id: int
    email: str
    name: str | None = None

    model_config = ConfigDict(from_attributes=True)


class TokenPayload(BaseModel):
    """Claims carried by a bearer token."""

    user_id: int = Field(alias="userId", le=MAX_INTEGER_ID)
    iat: int | None = None
    exp: int

    model_config = ConfigDict(populate_by_name=True)


class RegisterRequest(BaseModel):
    """Schema for registering a new user."""

    email: Email
    password: str = Field(..., min_length=6)
    name: str | None = None


class LoginRequest(BaseModel):
    """Schema for logging in."""

    email: Email
    password: str = Field(..., min_length=4)


class AuthResponse(BaseModel):
    """Token plus the public view of the user."""

    message: str
    token: str
    user: User


class MeResponse(BaseModel):
    """Identity attached by the auth gate."""

    message: str
    user: User
