"""Resolvers for login and signup."""

from __future__ import annotations

import strawberry

from ...logging import get_logger
from ...stores.base import UniqueViolationError
from ...validators import Invalid, validate_login, validate_signup
from ..access_control import get_services
from ..types.auth import LoginInput, SignupInput
from ..types.responses import AuthPayload
from ..types.user import User

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
USER_EXISTS = "User already exists"


async def login(info: strawberry.Info, input: LoginInput) -> AuthPayload:
    """
    Authenticate by username or email.

    Unknown accounts and wrong passwords produce the same envelope so callers
    cannot probe which accounts exist.
    """
    check = validate_login(input.username_or_email, input.password)
    if isinstance(check, Invalid):
        return AuthPayload.failure(check.message)

    services = get_services(info)
    identifier = input.username_or_email
    user = await services.users.find_by_username_or_email(identifier, identifier.lower())

    if user is None:
        await services.passwords.verify_dummy(input.password)
        logger.info("Login rejected")
        return AuthPayload.failure(INVALID_CREDENTIALS)

    if not await services.passwords.verify(input.password, user.password_hash):
        logger.info("Login rejected")
        return AuthPayload.failure(INVALID_CREDENTIALS)

    token = services.tokens.issue_token(str(user.id), user.username, user.email)
    logger.info("Login successful", user_id=str(user.id))
    return AuthPayload(
        success=True,
        message="Login successful",
        token=token,
        user=User.from_model(user),
    )


async def signup(info: strawberry.Info, input: SignupInput) -> AuthPayload:
    """Create an account and return a token for it."""
    check = validate_signup(input.username, input.email, input.password)
    if isinstance(check, Invalid):
        return AuthPayload.failure(check.message)

    services = get_services(info)
    email = input.email.lower()

    if await services.users.find_by_username_or_email(input.username, email) is not None:
        return AuthPayload.failure(USER_EXISTS)

    password_hash = await services.passwords.hash(input.password)
    try:
        user = await services.users.create(input.username, email, password_hash)
    except UniqueViolationError:
        # Lost a race with a concurrent signup for the same username or email.
        return AuthPayload.failure(USER_EXISTS)

    token = services.tokens.issue_token(str(user.id), user.username, user.email)
    return AuthPayload(
        success=True,
        message="Signup successful",
        token=token,
        user=User.from_model(user),
    )
