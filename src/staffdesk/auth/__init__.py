"""Authentication and authorization for staffdesk."""

from .adapters.base import AuthAdapter, Identity, Invalid, TokenVerification, Verified
from .adapters.jwt import JWTAuthAdapter
from .context import ANONYMOUS, AuthContext
from .middleware import build_auth_context, extract_bearer_token, require_auth, resolve_identity
from .passwords import PasswordHasher

__all__ = [
    "ANONYMOUS",
    "AuthAdapter",
    "AuthContext",
    "Identity",
    "Invalid",
    "JWTAuthAdapter",
    "PasswordHasher",
    "TokenVerification",
    "Verified",
    "build_auth_context",
    "extract_bearer_token",
    "require_auth",
    "resolve_identity",
]
