"""Token adapters."""

from .base import AuthAdapter, Identity, Invalid, TokenVerification, Verified
from .jwt import JWTAuthAdapter

__all__ = [
    "AuthAdapter",
    "Identity",
    "Invalid",
    "JWTAuthAdapter",
    "TokenVerification",
    "Verified",
]
