"""Object storage for employee photos."""

from .base import SecurityException, StorageException, StorageProvider, validate_storage_key
from .factory import create_storage_provider

__all__ = [
    "SecurityException",
    "StorageException",
    "StorageProvider",
    "create_storage_provider",
    "validate_storage_key",
]
