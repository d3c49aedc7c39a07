"""Credential store: persisted user accounts."""

from __future__ import annotations

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError

from ..database.connection import SessionFactory, session_scope
from ..dbmodels import Users
from ..logging import get_logger
from .base import translate_integrity_error

logger = get_logger(__name__)


class UserStore:
    """Reads and creates rows in the ``users`` table."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    async def find_by_username_or_email(self, username: str, email: str) -> Users | None:
        """Find the first user whose username equals ``username`` or whose email equals ``email``."""
        async with session_scope(self.session_factory) as session:
            stmt = (
                select(Users)
                .where(or_(Users.username == username, Users.email == email))
                .limit(1)
            )
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def create(self, username: str, email: str, password_hash: str) -> Users:
        """Insert a user.

        Raises:
            UniqueViolationError: username or email is already taken
        """
        user = Users(username=username, email=email, password_hash=password_hash)
        try:
            async with session_scope(self.session_factory) as session:
                session.add(user)
                await session.flush()
        except IntegrityError as e:
            raise translate_integrity_error(e) from e

        logger.info("User created", user_id=str(user.id), username=username)
        return user
