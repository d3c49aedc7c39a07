"""
Request context accessors shared by GraphQL resolvers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ..auth.context import ANONYMOUS, AuthContext
from ..auth.middleware import require_auth

if TYPE_CHECKING:
    from ..services import Services

UNAUTHORIZED_MESSAGE = "Unauthorized"


def get_services(info: strawberry.Info) -> Services:
    """Return the service container placed in the GraphQL context at startup."""
    return info.context["services"]


def get_auth_context_from_info(info: strawberry.Info) -> AuthContext:
    """Return the request's AuthContext; requests without one are anonymous."""
    return info.context.get("auth") or ANONYMOUS


def is_authorized(info: strawberry.Info) -> bool:
    return require_auth(get_auth_context_from_info(info))
