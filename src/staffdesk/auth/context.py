"""Authentication context for request handling."""

from __future__ import annotations

from dataclasses import dataclass

from .adapters.base import Identity


@dataclass
class AuthContext:
    """Runtime authentication context for a request."""

    identity: Identity | None
    token: str | None

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    @property
    def user_id(self) -> str | None:
        return self.identity.id if self.identity else None


ANONYMOUS = AuthContext(identity=None, token=None)
