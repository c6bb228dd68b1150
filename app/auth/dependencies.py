"""FastAPI dependencies for authentication."""

import logging

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.auth.schemas import User
from app.auth.tokens import (
    InvalidTokenError,
    TokenExpiredError,
    TokenService,
    get_token_service,
)
from app.database.session import get_db
from app.services import users as user_service

logger = logging.getLogger(__name__)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def extract_bearer_token(authorization: str | None) -> str:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` header.

    Raises HTTPException 401 when the header is missing or malformed.
    """
    if not authorization:
        raise _unauthorized("Authentication token not provided")

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token or " " in token:
        raise _unauthorized("Malformed authorization header")
    return token


def get_current_user(
    authorization: str | None = Header(default=None),
    tokens: TokenService = Depends(get_token_service),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the authenticated user for a protected route.

    - Missing or malformed header, bad or expired token, unknown user: 401
    - Store failure while loading the user: 500

    Usage:
        @router.post("/products")
        def create_product(user: User = Depends(get_current_user)):
            ...
    """
    token = extract_bearer_token(authorization)

    try:
        payload = tokens.verify(token)
    except TokenExpiredError:
        logger.info("Rejected expired token")
        raise _unauthorized("Authentication token expired")
    except InvalidTokenError as e:
        logger.info(f"Rejected invalid token: {e}")
        raise _unauthorized("Invalid authentication token")

    try:
        user = user_service.get_user_by_id(db, payload.user_id)
    except SQLAlchemyError:
        logger.exception(f"Failed to load user {payload.user_id} for token")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )

    if not user:
        logger.info(f"Token references unknown user {payload.user_id}")
        raise _unauthorized("User not found")

    return User.model_validate(user)
