# src/storage/disk_factory.py — v1
"""Factory: instantiate storage disks from configuration."""

from __future__ import annotations

from basset.config.settings import Settings
from basset.storage.base_disk import BaseDisk
from basset.storage.local_disk import LocalDisk


def create_disk(settings: Settings) -> BaseDisk:
    """Create the disk internalized assets are stored on.

    Args:
        settings: Application settings (BASSET_DISK env var).

    Returns:
        BaseDisk instance.

    Raises:
        ValueError: If the disk type is not supported.
    """
    if settings.disk == "local":
        return LocalDisk(
            root=settings.resolve_dir(settings.disk_root),
            url=settings.disk_url,
        )

    if settings.disk == "s3":
        from basset.storage.s3_disk import S3Disk
        if not settings.s3_bucket:
            raise ValueError("BASSET_S3_BUCKET must be set when BASSET_DISK=s3")
        return S3Disk(
            bucket=settings.s3_bucket,
            prefix=settings.s3_prefix,
            region=settings.s3_region or None,
            endpoint_url=settings.s3_endpoint_url or None,
            public_url=settings.s3_public_url or None,
        )

    raise ValueError(f"Unsupported disk: {settings.disk!r}")


def create_cache_map_disk(settings: Settings) -> LocalDisk:
    """Create the local disk holding the cache map file."""
    return LocalDisk(root=settings.resolve_dir(settings.cache_map_root))
