"""Integration tests for the credential store."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from staffdesk.stores.base import (
    UniqueViolationError,
    is_unique_violation,
    parse_uuid,
    translate_integrity_error,
)
from staffdesk.stores.users import UserStore

pytestmark = pytest.mark.integration


class TestUserStore:
    @pytest.mark.asyncio
    async def test_create_and_find(self, user_store: UserStore):
        created = await user_store.create("alice", "a@x.com", "$2b$10$hash")

        by_username = await user_store.find_by_username_or_email("alice", "nobody@x.com")
        by_email = await user_store.find_by_username_or_email("nobody", "a@x.com")

        assert by_username.id == created.id
        assert by_email.id == created.id
        assert by_username.password_hash == "$2b$10$hash"

    @pytest.mark.asyncio
    async def test_find_missing(self, user_store: UserStore):
        assert await user_store.find_by_username_or_email("ghost", "ghost@x.com") is None

    @pytest.mark.asyncio
    async def test_duplicate_username(self, user_store: UserStore):
        await user_store.create("alice", "a@x.com", "h")

        with pytest.raises(UniqueViolationError):
            await user_store.create("alice", "other@x.com", "h")

    @pytest.mark.asyncio
    async def test_duplicate_email(self, user_store: UserStore):
        await user_store.create("alice", "a@x.com", "h")

        with pytest.raises(UniqueViolationError):
            await user_store.create("bob", "a@x.com", "h")


class TestIntegrityTranslation:
    def _error(self, orig):
        return IntegrityError("INSERT ...", {}, orig)

    def test_postgres_sqlstate(self):
        orig = MagicMock(sqlstate="23505")
        orig.diag.constraint_name = "employees_email_key"

        translated = translate_integrity_error(self._error(orig))

        assert isinstance(translated, UniqueViolationError)
        assert translated.constraint == "employees_email_key"

    def test_other_sqlstate_is_not_unique(self):
        orig = MagicMock(sqlstate="23502")
        error = self._error(orig)

        assert not is_unique_violation(error)
        assert translate_integrity_error(error) is error

    def test_sqlite_message(self):
        error = self._error(Exception("UNIQUE constraint failed: users.email"))
        assert isinstance(translate_integrity_error(error), UniqueViolationError)

    def test_not_null_message(self):
        error = self._error(Exception("NOT NULL constraint failed: users.email"))
        assert not is_unique_violation(error)


class TestParseUuid:
    def test_valid(self):
        parsed = parse_uuid("3f1c2c1e-8f5b-4a55-9a4e-2b8f7f0f6a11")
        assert str(parsed) == "3f1c2c1e-8f5b-4a55-9a4e-2b8f7f0f6a11"

    @pytest.mark.parametrize("value", ["", "abc", "123", None])
    def test_malformed(self, value):
        assert parse_uuid(value) is None
