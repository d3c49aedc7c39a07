"""Factory for creating storage providers from settings."""

from pathlib import Path

from ..config import Settings
from ..logging import get_logger
from .base import StorageProvider
from .implementations.local import LocalStorageProvider
from .implementations.s3 import S3StorageProvider

logger = get_logger(__name__)


def create_storage_provider(config: Settings) -> StorageProvider:
    """Create the storage provider named by ``config.storage_provider``.

    Raises:
        ValueError: If provider type is unknown or its configuration is incomplete
    """
    provider_type = config.storage_provider.lower()

    if provider_type == "local":
        provider: StorageProvider = LocalStorageProvider(
            base_path=Path(config.storage_local_path),
            public_url_base=config.storage_public_url_base,
        )
    elif provider_type == "s3":
        if not config.storage_s3_bucket:
            raise ValueError("S3 storage requires STAFFDESK_STORAGE_S3_BUCKET")
        provider = S3StorageProvider(
            bucket=config.storage_s3_bucket,
            region=config.storage_s3_region,
            aws_access_key_id=config.storage_s3_access_key_id,
            aws_secret_access_key=config.storage_s3_secret_access_key,
            endpoint_url=config.storage_s3_endpoint_url,
            cdn_domain=config.storage_cdn_domain,
        )
    else:
        raise ValueError(f"Unknown storage provider type: {config.storage_provider}")

    logger.info("Storage provider configured", provider=provider.name)
    return provider
