# src/storage/s3_disk.py — v1
"""S3-compatible disk (BASSET_DISK=s3).

Supports AWS S3, MinIO, and other S3-compatible storage.
Requires 'boto3' package: pip install basset[s3].
"""

from __future__ import annotations

import logging
import mimetypes

from basset.storage.base_disk import BaseDisk

logger = logging.getLogger(__name__)


class S3Disk(BaseDisk):
    """Store assets as objects in an S3 bucket."""

    def __init__(
        self,
        bucket: str,
        prefix: str = "",
        region: str | None = None,
        endpoint_url: str | None = None,
        public_url: str | None = None,
    ) -> None:
        """Initialize S3 disk.

        Args:
            bucket: S3 bucket name.
            prefix: Key prefix for all objects (e.g. "static/").
            region: AWS region (optional, uses boto3 default if not set).
            endpoint_url: Custom endpoint for MinIO/compatible storage.
            public_url: Base URL objects are served from. Defaults to the
                virtual-hosted bucket URL for the region.
        """
        try:
            import boto3
            from botocore.exceptions import BotoCoreError, ClientError
        except ImportError as e:
            raise ImportError(
                "boto3 package required for S3 disk: pip install basset[s3]"
            ) from e

        kwargs: dict = {}
        if region:
            kwargs["region_name"] = region
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url

        self._s3 = boto3.client("s3", **kwargs)
        # botocore service and transport failures
        self._errors: tuple[type[Exception], ...] = (ClientError, BotoCoreError)
        self._bucket = bucket
        self._prefix = prefix.strip("/") + "/" if prefix.strip("/") else ""
        self._public_url = (
            public_url or f"https://{bucket}.s3.{region}.amazonaws.com"
        ).rstrip("/")

    def _full_key(self, path: str) -> str:
        """Build the full S3 key from a relative path."""
        return f"{self._prefix}{path.strip('/')}"

    def exists(self, path: str) -> bool:
        """Check for an object at the key, or any object under it as a prefix."""
        key = self._full_key(path)
        try:
            self._s3.head_object(Bucket=self._bucket, Key=key)
            return True
        except self._errors:
            pass
        try:
            response = self._s3.list_objects_v2(
                Bucket=self._bucket, Prefix=key + "/", MaxKeys=1
            )
        except self._errors as e:
            logger.warning("S3 lookup failed for s3://%s/%s: %s", self._bucket, key, e)
            return False
        return bool(response.get("Contents"))

    def put(self, path: str, content: bytes | str) -> bool:
        key = self._full_key(path)
        body = content.encode("utf-8") if isinstance(content, str) else content
        content_type = mimetypes.guess_type(key)[0] or "application/octet-stream"
        try:
            self._s3.put_object(
                Bucket=self._bucket, Key=key, Body=body, ContentType=content_type
            )
        except self._errors as e:
            logger.warning("S3 write failed for s3://%s/%s: %s", self._bucket, key, e)
            return False
        logger.debug("S3 write: s3://%s/%s (%d bytes)", self._bucket, key, len(body))
        return True

    def url(self, path: str) -> str:
        return f"{self._public_url}/{self._full_key(path)}"

    def path(self, path: str) -> str:
        return f"s3://{self._bucket}/{self._full_key(path)}"

    def delete_directory(self, path: str) -> bool:
        """Delete every object under the prefix."""
        prefix = self._full_key(path) + "/"
        deleted = 0
        paginator = self._s3.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=self._bucket, Prefix=prefix):
            keys = [{"Key": obj["Key"]} for obj in page.get("Contents", [])]
            if keys:
                self._s3.delete_objects(Bucket=self._bucket, Delete={"Objects": keys})
                deleted += len(keys)
        logger.debug("S3 delete: %d objects under s3://%s/%s", deleted, self._bucket, prefix)
        return deleted > 0

    def make_directory(self, path: str) -> bool:
        """S3 has no directories; prefixes exist implicitly."""
        return True
