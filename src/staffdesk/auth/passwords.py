"""bcrypt password hashing."""

from __future__ import annotations

import asyncio

import bcrypt

MIN_ROUNDS = 10
# bcrypt only looks at the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """Hashes and checks passwords off the event loop."""

    def __init__(self, rounds: int = MIN_ROUNDS):
        if rounds < MIN_ROUNDS:
            raise ValueError(f"bcrypt cost factor must be at least {MIN_ROUNDS}, got {rounds}")
        self.rounds = rounds
        self._dummy_hash: str | None = None

    def _hash(self, password: str) -> str:
        return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self.rounds)).decode("ascii")

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self._hash, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        try:
            hashed = password_hash.encode("ascii")
        except UnicodeEncodeError:
            return False
        try:
            return await asyncio.to_thread(bcrypt.checkpw, _encode(password), hashed)
        except ValueError:
            # Stored value is not a bcrypt hash.
            return False

    async def verify_dummy(self, password: str) -> bool:
        """Spend the same work as ``verify`` for an account that does not exist. Always False."""
        if self._dummy_hash is None:
            self._dummy_hash = await self.hash("staffdesk-dummy-password")
        await self.verify(password, self._dummy_hash)
        return False
