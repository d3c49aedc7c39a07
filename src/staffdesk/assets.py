"""Employee photo handling: keep stored references, upload inline image data."""

from __future__ import annotations

import asyncio
import base64
import binascii
import mimetypes
import re
import uuid
from datetime import UTC, datetime

from .logging import get_logger
from .storage.base import StorageException, StorageProvider, validate_storage_key

logger = get_logger(__name__)

DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(;[^;,]*)*?);base64,", re.I)
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def is_remote_reference(value: str) -> bool:
    """A value already pointing at a remote asset (http or https URL)."""
    return value.startswith("http")


def decode_inline_asset(raw: str) -> tuple[bytes, str]:
    """Decode a ``data:<mime>;base64,...`` URI or bare base64 into bytes and a MIME type.

    Raises:
        StorageException: The payload is not valid base64
    """
    content_type = DEFAULT_CONTENT_TYPE
    payload = raw.strip()

    match = DATA_URI_RE.match(payload)
    if match:
        content_type = (match.group("mime") or DEFAULT_CONTENT_TYPE).lower()
        payload = payload[match.end() :]

    payload = "".join(payload.split())
    try:
        content = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise StorageException(f"Inline asset is not valid base64 data: {e}") from e

    if not content:
        raise StorageException("Inline asset is empty")
    return content, content_type


class PhotoResolver:
    """Turns a submitted photo value into the reference stored on an employee."""

    def __init__(
        self,
        provider: StorageProvider,
        folder: str = "employee_photos",
        max_retries: int = 3,
    ):
        self.provider = provider
        self.folder = folder.strip("/")
        self.max_retries = max(1, max_retries)

    async def resolve(self, raw: str | None) -> str | None:
        """
        Resolve a submitted photo value.

        - ``None`` or ``""`` means no photo.
        - A remote reference is returned unchanged and never re-uploaded.
        - Anything else is inline data, uploaded once; its public URL is returned.

        Upload failures propagate as ``StorageException``.
        """
        if not raw:
            return None
        if is_remote_reference(raw):
            return raw

        content, content_type = decode_inline_asset(raw)
        key = self._generate_key(content_type)
        url = await self._upload_with_retry(key, content, content_type)

        logger.info("Employee photo uploaded", key=key, size=len(content), provider=self.provider.name)
        return url

    def _generate_key(self, content_type: str) -> str:
        extension = mimetypes.guess_extension(content_type) or ".bin"
        return validate_storage_key(f"{self.folder}/{uuid.uuid4().hex}{extension}")

    async def _upload_with_retry(self, key: str, content: bytes, content_type: str) -> str:
        """Upload with exponential backoff retry logic."""
        metadata = {
            "uploaded_at": datetime.now(UTC).isoformat(),
            "content_type": content_type,
        }

        for attempt in range(self.max_retries):
            try:
                return await self.provider.upload(key, content, content_type, metadata)
            except StorageException as e:
                if attempt == self.max_retries - 1:
                    raise

                wait_time = 2**attempt
                logger.warning(
                    "Photo upload attempt failed, retrying",
                    attempt=attempt + 1,
                    retry_in=wait_time,
                    error=str(e),
                )
                await asyncio.sleep(wait_time)

        raise StorageException("Upload failed after all retries")
