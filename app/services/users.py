"""User lookups and registration."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.user import User

logger = logging.getLogger(__name__)


class EmailAlreadyRegisteredError(Exception):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


def get_user_by_id(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def create_user(
    db: Session,
    email: str,
    password_hash: str,
    name: str | None = None,
) -> User:
    """
    Persist a new user.

    Callers check ``get_user_by_email`` first; the unique index on
    ``email`` still catches a concurrent registration of the same address.
    """
    user = User(email=email, password=password_hash, name=name)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise EmailAlreadyRegisteredError(email) from e
    db.refresh(user)

    logger.info(f"Registered user {user.id}")
    return user
