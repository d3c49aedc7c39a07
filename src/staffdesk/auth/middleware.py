"""Bearer credential handling for inbound requests."""

from __future__ import annotations

from ..logging import get_logger
from .adapters.base import AuthAdapter, Identity, Invalid
from .context import ANONYMOUS, AuthContext

logger = get_logger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an ``Authorization: Bearer <token>`` header value.

    Missing headers, other schemes and empty tokens all count as no credential.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX) :].strip()
    return token or None


def resolve_identity(adapter: AuthAdapter, authorization: str | None) -> Identity | None:
    """Verify the presented credential; any verification failure yields None."""
    token = extract_bearer_token(authorization)
    if token is None:
        return None

    result = adapter.verify_token(token)
    if isinstance(result, Invalid):
        logger.debug("Rejected bearer token", reason=result.reason)
        return None
    return result.identity


def build_auth_context(adapter: AuthAdapter, authorization: str | None) -> AuthContext:
    """
    Build the AuthContext for a request from its Authorization header.

    An absent, malformed, expired or forged token produces the anonymous
    context; nothing is raised.
    """
    identity = resolve_identity(adapter, authorization)
    if identity is None:
        return ANONYMOUS
    return AuthContext(identity=identity, token=extract_bearer_token(authorization))


def require_auth(auth_context: AuthContext | None) -> bool:
    """True iff the request carries a verified identity."""
    return auth_context is not None and auth_context.is_authenticated
