"""Storage provider interface and key validation for uploaded employee assets."""

import re
from abc import ABC, abstractmethod
from typing import Any

# Characters allowed inside a single key segment.
_UNSAFE_SEGMENT_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class StorageException(Exception):
    """A storage backend could not complete an operation."""


class SecurityException(StorageException):
    """A storage key tried to escape the configured root."""


def validate_storage_key(key: str) -> str:
    """Return ``key`` with unsafe characters stripped from each ``/`` segment.

    Raises:
        SecurityException: The key is absolute, contains ``..`` or a backslash,
            or has a segment that is empty after sanitizing.
    """
    if key.startswith("/") or ".." in key or "\\" in key:
        raise SecurityException(f"Invalid storage key: {key}")

    segments = [_UNSAFE_SEGMENT_CHARS.sub("", segment) for segment in key.split("/")]
    if not all(segments):
        raise SecurityException(f"Invalid storage key: {key}")
    return "/".join(segments)


class StorageProvider(ABC):
    """A place employee photos can be written to and served from."""

    name: str = "abstract"

    @abstractmethod
    async def upload(
        self,
        key: str,
        content: bytes,
        content_type: str,
        metadata: dict[str, Any] | None = None,
    ) -> str:
        """Store ``content`` under ``key`` and return the URL it is served from.

        ``key`` must already have passed ``validate_storage_key``.

        Raises:
            StorageException: The backend rejected or failed the write
        """
