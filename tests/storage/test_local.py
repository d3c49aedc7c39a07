"""Tests for local storage provider."""

import json
from collections.abc import Generator
from pathlib import Path
from tempfile import TemporaryDirectory

import aiofiles
import pytest

from staffdesk.storage.base import SecurityException, StorageException
from staffdesk.storage.implementations.local import LocalStorageProvider


class TestLocalStorageProvider:
    """Test local filesystem storage provider."""

    @pytest.fixture
    def temp_dir(self) -> Generator[Path, None, None]:
        with TemporaryDirectory() as tmpdir:
            yield Path(tmpdir)

    @pytest.fixture
    def provider(self, temp_dir: Path) -> LocalStorageProvider:
        return LocalStorageProvider(
            base_path=temp_dir, public_url_base="http://localhost:3000/storage"
        )

    def test_init(self, temp_dir: Path) -> None:
        provider = LocalStorageProvider(temp_dir, "http://localhost:3000/api/storage/")

        assert provider.base_path == temp_dir.resolve()
        assert provider.public_url_base == "http://localhost:3000/api/storage"

    @pytest.mark.parametrize("base", ["", "/srv/photos", "file:///srv/photos"])
    def test_init_requires_http_base(self, temp_dir: Path, base: str) -> None:
        with pytest.raises(ValueError, match="http"):
            LocalStorageProvider(temp_dir, base)

    def test_get_safe_file_path_traversal_attack(self, provider: LocalStorageProvider) -> None:
        with pytest.raises(SecurityException):
            provider._get_safe_file_path("../../../etc/passwd")

        with pytest.raises(SecurityException):
            provider._get_safe_file_path("employee_photos/../../../etc/passwd")

    def test_get_public_url_with_special_chars(self, provider: LocalStorageProvider) -> None:
        url = provider._get_public_url("employee_photos/my photo.png")
        assert url == "http://localhost:3000/storage/employee_photos/my%20photo.png"

    @pytest.mark.asyncio
    async def test_upload_bytes(self, provider: LocalStorageProvider, temp_dir: Path):
        content = b"\x89PNG fake image"
        key = "employee_photos/abc.png"

        url = await provider.upload(key, content, "image/png")

        file_path = temp_dir / key
        async with aiofiles.open(file_path, "rb") as f:
            assert await f.read() == content
        assert url == "http://localhost:3000/storage/employee_photos/abc.png"

    @pytest.mark.asyncio
    async def test_upload_with_metadata(self, provider: LocalStorageProvider, temp_dir: Path):
        key = "employee_photos/abc.png"
        metadata = {"content_type": "image/png"}

        await provider.upload(key, b"data", "image/png", metadata)

        async with aiofiles.open(temp_dir / f"{key}.meta") as f:
            assert json.loads(await f.read()) == metadata

    @pytest.mark.asyncio
    async def test_upload_traversal_rejected(self, provider: LocalStorageProvider):
        with pytest.raises(SecurityException):
            await provider.upload("../escape.png", b"data", "image/png")

    @pytest.mark.asyncio
    async def test_upload_filesystem_error(self, provider: LocalStorageProvider, temp_dir: Path):
        # A plain file where a directory is needed
        (temp_dir / "blocked").write_bytes(b"")

        with pytest.raises(StorageException, match="Failed to write file"):
            await provider.upload("blocked/abc.png", b"data", "image/png")


    @pytest.mark.asyncio
    async def test_resolve_file(self, provider: LocalStorageProvider, temp_dir: Path):
        key = "employee_photos/abc.png"
        assert provider.resolve_file(key) is None

        await provider.upload(key, b"data", "image/png", {"a": 1})

        assert provider.resolve_file(key) == (temp_dir / key).resolve()
        assert provider.resolve_file(f"{key}.meta") is None
        assert provider.resolve_file("employee_photos") is None

    def test_resolve_file_traversal(self, provider: LocalStorageProvider):
        with pytest.raises(SecurityException):
            provider.resolve_file("../../../etc/passwd")
