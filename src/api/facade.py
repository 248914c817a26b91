# src/api/facade.py — v1
"""Public API facade: build a wired engine from settings.

Usage:
    from basset.api.facade import create_manager

    with create_manager() as manager:
        manager.basset("https://cdn.example.com/lib.js")
        html = manager.flush_output()
"""

from __future__ import annotations

import logging

from basset.archive.unarchiver import Unarchiver
from basset.cache.cache_map import CACHE_MAP_EXTENSION, CacheMap
from basset.config.settings import Settings
from basset.engine.manager import BassetManager
from basset.engine.sources import AssetSource
from basset.fetch.http_fetcher import HttpFetcher
from basset.storage.base_disk import BaseDisk
from basset.storage.disk_factory import create_cache_map_disk, create_disk
from basset.storage.filesystem import LocalFilesystem

logger = logging.getLogger(__name__)


def create_manager(
    settings: Settings | None = None,
    disk: BaseDisk | None = None,
    fetcher: HttpFetcher | None = None,
) -> BassetManager:
    """Build a BassetManager with its disk, cache map and source readers.

    Args:
        settings: Global settings. Loaded from .env if None.
        disk: Storage disk override. Built from settings if None.
        fetcher: HTTP fetcher override. Built from settings if None.

    Returns:
        Ready-to-use manager; call save() (or use it as a context manager)
        to persist the cache map.
    """
    settings = settings or Settings()
    disk = disk or create_disk(settings)
    root = str(settings.resolved_root)

    cache_map = CacheMap(
        disk=disk,
        cache_map_disk=create_cache_map_disk(settings),
        base_path=settings.path + "/",
        cache_path=settings.cache_path,
        enabled=settings.cache_map,
        root=root,
    )
    source = AssetSource(
        fetcher=fetcher or HttpFetcher(
            timeout=settings.http_timeout, user_agent=settings.http_user_agent
        ),
        filesystem=LocalFilesystem(),
        unarchiver=Unarchiver(),
    )
    return BassetManager(
        disk=disk,
        cache_map=cache_map,
        source=source,
        base_path=settings.path,
        cachebusting=settings.cachebusting,
        root=root,
    )


def clear(settings: Settings | None = None, disk: BaseDisk | None = None) -> str:
    """Delete and recreate the internalized-asset tree and the cache map.

    Returns:
        Location of the cleared asset directory, for reporting.
    """
    settings = settings or Settings()
    disk = disk or create_disk(settings)
    cache_disk = create_cache_map_disk(settings)

    disk.delete_directory(settings.path)
    disk.make_directory(settings.path)
    cache_disk.delete_directory(settings.cache_path)
    cache_disk.make_directory(settings.cache_path)
    LocalFilesystem().delete(cache_disk.path(settings.cache_path + CACHE_MAP_EXTENSION))

    location = disk.path(settings.path)
    logger.info("Cleared %s", location)
    return location
