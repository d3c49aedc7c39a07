"""
Serves employee photos written by the local storage provider.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from ...logging import get_logger
from ...storage.base import SecurityException
from ...storage.implementations.local import LocalStorageProvider

logger = get_logger(__name__)

STORAGE_PREFIX = "/api/storage"


def create_storage_router(provider: LocalStorageProvider) -> APIRouter:
    router = APIRouter()

    @router.get("/{full_path:path}")
    async def serve_file(full_path: str):  # pyright: ignore [reportUnusedFunction]
        """Serve a stored file; cloud providers return direct URLs instead."""
        try:
            file_path = provider.resolve_file(full_path)
        except SecurityException as e:
            logger.warning("Path traversal attempt detected", requested_path=full_path)
            raise HTTPException(status_code=403, detail="Access denied") from e

        if file_path is None:
            raise HTTPException(status_code=404, detail="File not found")

        return FileResponse(file_path)

    return router
