"""Token adapter interface and verification result types."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class Identity:
    """Verified claims of the caller; derived per request, never persisted."""

    id: str
    username: str
    email: str
    expires_at: datetime | None = None


@dataclass(frozen=True)
class Verified:
    identity: Identity


@dataclass(frozen=True)
class Invalid:
    reason: str


TokenVerification = Verified | Invalid


class AuthAdapter(Protocol):
    """Signs and verifies identity tokens."""

    def issue_token(self, user_id: str, username: str, email: str) -> str:
        """
        Issue a signed token for the given user.

        Returns:
            Signed token string
        """
        ...

    def verify_token(self, token: str) -> TokenVerification:
        """
        Verify a token.

        Returns:
            ``Verified`` with the identity, or ``Invalid`` with a reason for
            malformed, expired or forged tokens. Never raises for bad tokens.
        """
        ...
