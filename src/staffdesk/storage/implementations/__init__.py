"""Storage provider implementations."""

from .local import LocalStorageProvider
from .s3 import S3StorageProvider

__all__ = ["LocalStorageProvider", "S3StorageProvider"]
