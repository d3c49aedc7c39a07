"""S3 and S3-compatible (MinIO, R2, ...) storage for employee photos."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import aioboto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ...logging import get_logger
from ..base import StorageException, StorageProvider

logger = get_logger(__name__)


class S3StorageProvider(StorageProvider):
    """Stores objects in a bucket and returns CDN, endpoint or bucket URLs.

    A client is opened per call from a single ``aioboto3.Session``.
    """

    name = "s3"

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        aws_access_key_id: str | None = None,
        aws_secret_access_key: str | None = None,
        endpoint_url: str | None = None,
        cdn_domain: str | None = None,
        extra_put_args: dict[str, Any] | None = None,
    ):
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url
        self.cdn_domain = cdn_domain
        self.extra_put_args = {"ServerSideEncryption": "AES256", **(extra_put_args or {})}

        self._session = aioboto3.Session(
            aws_access_key_id=aws_access_key_id,
            aws_secret_access_key=aws_secret_access_key,
            region_name=region,
        )
        self._client_config = Config(
            region_name=region,
            retries={"max_attempts": 3, "mode": "adaptive"},
        )

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[Any]:
        async with self._session.client(
            "s3", config=self._client_config, endpoint_url=self.endpoint_url
        ) as client:
            yield client

    def _public_url(self, key: str) -> str:
        if self.cdn_domain:
            return f"https://{self.cdn_domain}/{key}"
        if self.endpoint_url:
            return f"{self.endpoint_url.rstrip('/')}/{self.bucket}/{key}"
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"

    async def upload(
        self,
        key: str,
        content: bytes,
        content_type: str,
        metadata: dict[str, Any] | None = None,
    ) -> str:
        params: dict[str, Any] = {
            "Bucket": self.bucket,
            "Key": key,
            "Body": content,
            "ContentType": content_type,
            **self.extra_put_args,
        }
        if metadata:
            # User metadata travels as HTTP headers: string values, no spaces or dashes in names.
            params["Metadata"] = {
                name.replace("-", "_").replace(" ", "_"): str(value)
                for name, value in metadata.items()
            }

        try:
            async with self._client() as client:
                await client.put_object(**params)
        except (BotoCoreError, ClientError) as e:
            logger.error("S3 upload failed", bucket=self.bucket, key=key, error=str(e))
            raise StorageException(f"S3 upload failed: {e}") from e

        return self._public_url(key)
