"""
Authentication GraphQL inputs
"""

import strawberry


@strawberry.input
class SignupInput:
    """Input for creating an account."""

    username: str
    email: str
    password: str


@strawberry.input
class LoginInput:
    """Input for logging in with a username or an email address."""

    username_or_email: str
    password: str
