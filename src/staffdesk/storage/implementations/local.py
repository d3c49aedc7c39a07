"""Filesystem storage for development and single-host deployments."""

import json
from pathlib import Path
from typing import Any
from urllib.parse import quote

import aiofiles
import aiofiles.os

from ...logging import get_logger
from ..base import SecurityException, StorageException, StorageProvider

logger = get_logger(__name__)

METADATA_SUFFIX = ".meta"


class LocalStorageProvider(StorageProvider):
    """Writes files below ``base_path``; keys can never resolve outside it.

    Returned URLs are built from ``public_url_base``, the HTTP location the
    directory is served from (the API serves it under ``/api/storage``).
    """

    name = "local"

    def __init__(self, base_path: Path, public_url_base: str):
        if not public_url_base.startswith(("http://", "https://")):
            raise ValueError(f"public_url_base must be an http(s) URL: {public_url_base!r}")
        self.base_path = Path(base_path).resolve()
        self.public_url_base = public_url_base.rstrip("/")
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_safe_file_path(self, key: str) -> Path:
        path = (self.base_path / key).resolve()
        if not path.is_relative_to(self.base_path):
            raise SecurityException(f"Path traversal detected: {key}")
        return path

    @staticmethod
    def _metadata_path(path: Path) -> Path:
        return path.with_name(path.name + METADATA_SUFFIX)

    def _get_public_url(self, key: str) -> str:
        return f"{self.public_url_base}/{quote(key, safe='/')}"

    def resolve_file(self, key: str) -> Path | None:
        """Path of a stored file, or None when nothing is stored under ``key``.

        Raises:
            SecurityException: ``key`` points outside ``base_path``
        """
        path = self._get_safe_file_path(key)
        if path.suffix == METADATA_SUFFIX or not path.is_file():
            return None
        return path

    async def upload(
        self,
        key: str,
        content: bytes,
        content_type: str,
        metadata: dict[str, Any] | None = None,
    ) -> str:
        path = self._get_safe_file_path(key)
        logger.debug("Writing file", key=key, content_type=content_type, size=len(content))

        try:
            await aiofiles.os.makedirs(path.parent, exist_ok=True)
            async with aiofiles.open(path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Local storage write failed", key=key, error=str(e))
            raise StorageException(f"Failed to write file: {e}") from e

        if metadata:
            try:
                async with aiofiles.open(self._metadata_path(path), "w") as f:
                    await f.write(json.dumps(metadata, indent=2))
            except OSError as e:
                # The photo itself is stored; only the sidecar is missing.
                logger.warning("Failed to write metadata", key=key, error=str(e))

        return self._get_public_url(key)
