"""Auth module: password hashing, bearer tokens and the user dependency."""

from app.auth.dependencies import get_current_user
from app.auth.passwords import hash_password, verify_password
from app.auth.schemas import TokenPayload, User
from app.auth.tokens import (
    InvalidTokenError,
    TokenError,
    TokenExpiredError,
    TokenService,
    get_token_service,
)

__all__ = [
    "User",
    "TokenPayload",
    "TokenService",
    "TokenError",
    "TokenExpiredError",
    "InvalidTokenError",
    "get_token_service",
    "get_current_user",
    "hash_password",
    "verify_password",
]
