"""
Password hashing and verification.

Uses bcrypt with automatic salting and a fixed work factor.
"""

import bcrypt

DEFAULT_ROUNDS = 10

# bcrypt only considers the first 72 bytes of the input
_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password with bcrypt (auto-salted)."""
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """
    Constant-time comparison against a bcrypt hash.

    Returns False for a wrong password. A malformed stored hash raises
    ValueError so that it surfaces as a server fault.
    """
    return bcrypt.checkpw(_encode(password), password_hash.encode())
