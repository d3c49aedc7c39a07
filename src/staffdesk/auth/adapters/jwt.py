"""JWT authentication adapter for self-issued tokens."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import InvalidTokenError

from ...logging import get_logger
from .base import Identity, Invalid, TokenVerification, Verified

logger = get_logger(__name__)

REQUIRED_CLAIMS = ("sub", "username", "email")


class JWTAuthAdapter:
    """JWT authentication adapter for self-issued tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "staffdesk",
        audience: str = "staffdesk-api",
        token_expiry_hours: int = 2,
    ):
        if not secret_key:
            raise ValueError("JWT secret key is required. Set STAFFDESK_JWT_SECRET.")

        self.secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.audience = audience
        self.token_expiry_hours = token_expiry_hours

    def issue_token(self, user_id: str, username: str, email: str) -> str:
        """Issue a new JWT token carrying the user's identity claims."""
        now = datetime.now(UTC)

        payload = {
            "iss": self.issuer,
            "aud": self.audience,
            "iat": now,
            "nbf": now,
            "exp": now + timedelta(hours=self.token_expiry_hours),
            "sub": str(user_id),
            "username": username,
            "email": email,
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> TokenVerification:
        """Verify a JWT token and return the identity it carries."""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
                options={
                    "require": ["exp", "iat", *REQUIRED_CLAIMS],
                    "verify_exp": True,
                    "verify_nbf": True,
                    "verify_iat": True,
                },
            )
        except InvalidTokenError as e:
            logger.debug("JWT token validation failed", error=str(e))
            return Invalid(str(e))

        return Verified(
            Identity(
                id=str(payload["sub"]),
                username=str(payload["username"]),
                email=str(payload["email"]),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        )
