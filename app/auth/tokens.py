"""Bearer token issuance and verification (HS256 JWT)."""

from datetime import datetime, timedelta, timezone

import jwt
from fastapi import Request
from pydantic import ValidationError

from app.auth.schemas import TokenPayload
from app.config import ConfigurationError, Settings


class TokenError(Exception):
    """Base class for token verification failures."""


class InvalidTokenError(TokenError):
    """Token is malformed, tampered with, or signed with another secret."""


class TokenExpiredError(TokenError):
    """Token signature is valid but its expiry has passed."""


class TokenService:
    """
    Issues and verifies signed, time-limited tokens carrying a user id.

    The secret is held by the instance; one service is built at startup
    and shared read-only by all requests.
    """

    def __init__(
        self,
        secret: str,
        expires_in: timedelta = timedelta(days=7),
        algorithm: str = "HS256",
    ):
        if not secret:
            raise ConfigurationError("JWT secret must not be empty")
        self._secret = secret
        self.expires_in = expires_in
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        """Build the service from settings, failing if JWT_SECRET is missing."""
        if not settings.jwt_secret:
            raise ConfigurationError("JWT_SECRET is not set")
        return cls(
            secret=settings.jwt_secret,
            expires_in=timedelta(days=settings.jwt_expires_days),
        )

    def issue(self, user_id: int) -> str:
        """Sign a token for ``user_id`` valid for ``expires_in``."""
        now = datetime.now(timezone.utc)
        payload = {
            "userId": user_id,
            "iat": now,
            "exp": now + self.expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenPayload:
        """
        Validate signature and expiry and return the claims.

        Raises:
            TokenExpiredError: the token has expired
            InvalidTokenError: anything else is wrong with the token
        """
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError(str(e)) from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e)) from e

        try:
            return TokenPayload.model_validate(claims)
        except ValidationError as e:
            raise InvalidTokenError("Token payload has no valid userId") from e


def get_token_service(request: Request) -> TokenService:
    """Dependency returning the token service built by the app factory."""
    return request.app.state.token_service
