"""Tests for the login and signup resolvers."""

import jwt
import pytest

from staffdesk.graphql.resolvers.auth import login, signup
from staffdesk.graphql.types.auth import LoginInput, SignupInput
from staffdesk.services import Services


async def register(info, username="alice", email="a@x.com", password="secret1"):
    return await signup(info, SignupInput(username=username, email=email, password=password))


class TestSignup:
    @pytest.mark.asyncio
    async def test_signup_returns_token_and_user(self, anonymous_info):
        result = await register(anonymous_info)

        assert result.success is True
        assert result.message == "Signup successful"
        assert result.token
        assert result.user.username == "alice"
        assert result.user.email == "a@x.com"

    @pytest.mark.asyncio
    async def test_password_is_hashed(self, anonymous_info, services: Services):
        await register(anonymous_info)

        stored = await services.users.find_by_username_or_email("alice", "a@x.com")
        assert stored.password_hash != "secret1"
        assert await services.passwords.verify("secret1", stored.password_hash)

    @pytest.mark.asyncio
    async def test_email_is_case_folded(self, anonymous_info):
        first = await register(anonymous_info, username="alice", email="A@x.com")
        second = await register(anonymous_info, username="alice2", email="a@x.com")

        assert first.success is True
        assert first.user.email == "a@x.com"
        assert second.success is False
        assert second.message == "User already exists"
        assert second.token is None
        assert second.user is None

    @pytest.mark.asyncio
    async def test_duplicate_username(self, anonymous_info):
        await register(anonymous_info)
        result = await register(anonymous_info, email="other@x.com")

        assert result.success is False
        assert result.message == "User already exists"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "username,email,password,message",
        [
            ("", "a@x.com", "secret1", "username, email, password are required"),
            ("alice", "not-an-email", "secret1", "Invalid email format"),
            ("alice", "a@x.com", "12345", "Password must be at least 6 chars"),
        ],
    )
    async def test_validation(self, anonymous_info, services, username, email, password, message):
        result = await register(anonymous_info, username, email, password)

        assert result.success is False
        assert result.message == message
        assert await services.users.find_by_username_or_email("alice", "a@x.com") is None


class TestLogin:
    @pytest.mark.asyncio
    async def test_signup_then_login_round_trip(self, anonymous_info, services: Services):
        signed_up = await register(anonymous_info)

        result = await login(anonymous_info, LoginInput(username_or_email="alice", password="secret1"))

        assert result.success is True
        assert result.message == "Login successful"
        assert result.user.id == signed_up.user.id

        claims = jwt.decode(
            result.token,
            services.tokens.secret_key,
            algorithms=["HS256"],
            audience="staffdesk-api",
            issuer="staffdesk",
        )
        assert claims["sub"] == str(signed_up.user.id)
        assert claims["username"] == "alice"
        assert claims["email"] == "a@x.com"
        assert claims["exp"] - claims["iat"] == 2 * 60 * 60

    @pytest.mark.asyncio
    async def test_login_by_email_any_case(self, anonymous_info):
        await register(anonymous_info)

        result = await login(anonymous_info, LoginInput(username_or_email="A@X.com", password="secret1"))

        assert result.success is True

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_user_look_the_same(self, anonymous_info):
        await register(anonymous_info)

        wrong_password = await login(
            anonymous_info, LoginInput(username_or_email="alice", password="wrong-pass")
        )
        unknown_user = await login(
            anonymous_info, LoginInput(username_or_email="mallory", password="secret1")
        )

        for result in (wrong_password, unknown_user):
            assert result.success is False
            assert result.message == "Invalid credentials"
            assert result.token is None
            assert result.user is None

    @pytest.mark.asyncio
    async def test_missing_fields(self, anonymous_info):
        result = await login(anonymous_info, LoginInput(username_or_email="", password="secret1"))

        assert result.success is False
        assert result.message == "username/email and password are required"
