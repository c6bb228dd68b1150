"""Registration, login and identity endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.auth.dependencies import get_current_user
from app.auth.passwords import hash_password, verify_password
from app.auth.schemas import AuthResponse, LoginRequest, MeResponse, RegisterRequest, User
from app.auth.tokens import TokenService, get_token_service
from app.database.session import get_db
from app.services import users as user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _email_taken() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail="Email already registered",
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    data: RegisterRequest,
    request: Request,
    tokens: TokenService = Depends(get_token_service),
    db: Session = Depends(get_db),
) -> dict:
    """Create an account and return a token for it."""
    if user_service.get_user_by_email(db, data.email):
        raise _email_taken()

    rounds = request.app.state.settings.bcrypt_rounds
    try:
        user = user_service.create_user(
            db,
            email=data.email,
            password_hash=hash_password(data.password, rounds=rounds),
            name=data.name,
        )
    except user_service.EmailAlreadyRegisteredError:
        raise _email_taken()

    return {
        "message": "User created successfully",
        "token": tokens.issue(user.id),
        "user": User.model_validate(user),
    }


@router.post("/login", response_model=AuthResponse)
def login(
    data: LoginRequest,
    tokens: TokenService = Depends(get_token_service),
    db: Session = Depends(get_db),
) -> dict:
    """Exchange email and password for a token."""
    user = user_service.get_user_by_email(db, data.email)
    if user is None or not verify_password(data.password, user.password):
        logger.info("Failed login attempt")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    logger.info(f"Login: user {user.id}")
    return {
        "message": "Login successful",
        "token": tokens.issue(user.id),
        "user": User.model_validate(user),
    }


@router.get("/me", response_model=MeResponse)
def me(user: User = Depends(get_current_user)) -> dict:
    """Return the identity resolved from the bearer token."""
    return {"message": "Access granted", "user": user}
