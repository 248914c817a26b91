# src/cache/cache_map.py — v1
"""Persistent identifier -> storage path index (the ``.basset`` file).

Loaded once when constructed and flushed once by save(). Keys are identifiers
with the repository root stripped, so a map committed from one machine works
on another with a different checkout location. Values are paths relative to
the disk's base path, with a leading '/' (empty for archives and directories,
which only record that they were internalized).
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from basset.core.paths import strip_root
from basset.storage.base_disk import BaseDisk

logger = logging.getLogger(__name__)

CACHE_MAP_EXTENSION = ".basset"


class CacheMap:
    """JSON-file backed map; a complete no-op when disabled."""

    def __init__(
        self,
        disk: BaseDisk,
        cache_map_disk: BaseDisk,
        base_path: str,
        cache_path: str,
        enabled: bool = True,
        root: str = "",
    ) -> None:
        self._enabled = enabled
        self._map: dict[str, str] = {}
        self._dirty = False
        if not self._enabled:
            return

        self._disk = disk
        self._base_path = base_path
        self._root = root
        self._file = Path(cache_map_disk.path(cache_path + CACHE_MAP_EXTENSION))
        self._load()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def file(self) -> Path | None:
        return self._file if self._enabled else None

    def _load(self) -> None:
        if not self._file.exists():
            return
        try:
            data = json.loads(self._file.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable cache map %s: %s", self._file, e)
            return
        if not isinstance(data, dict):
            logger.warning("Ignoring cache map %s: not a JSON object", self._file)
            return
        # non-string values (null, true) are presence-only entries
        self._map = {str(k): v if isinstance(v, str) else "" for k, v in data.items()}
        logger.debug("Loaded %d cache map entries from %s", len(self._map), self._file)

    def save(self) -> None:
        """Write the sorted map to disk if anything was added since load."""
        if not self._enabled or not self._dirty:
            return

        self._map = dict(sorted(self._map.items()))
        self._file.parent.mkdir(parents=True, exist_ok=True)
        self._file.write_text(
            json.dumps(self._map, indent=4, ensure_ascii=False), encoding="utf-8"
        )
        self._dirty = False
        logger.debug("Saved %d cache map entries to %s", len(self._map), self._file)

    def add(self, asset: str, value: str | bool = True) -> None:
        """Record an internalized asset.

        Args:
            asset: Raw asset identifier.
            value: Public URL the asset is served from, or True to only record
                that it was internalized.
        """
        if not self._enabled:
            return

        relative = ""
        if isinstance(value, str):
            prefix = self._disk.url(self._base_path)
            if prefix in value:
                value = value.split(prefix, 1)[1]
            relative = value if value.startswith("/") else f"/{value}"

        self._map[self._normalize(asset)] = relative
        self._dirty = True

    def get(self, asset: str) -> str | None:
        """Public URL of a mapped asset, None if disabled, missing or presence-only."""
        if not self._enabled:
            return None

        relative = self._map.get(self._normalize(asset))
        if not relative:
            return None

        return self._disk.url(self._base_path.rstrip("/") + relative)

    def has(self, asset: str) -> bool:
        """True if the asset has any entry, including presence-only ones."""
        if not self._enabled:
            return False
        return self._normalize(asset) in self._map

    def entries(self) -> dict[str, str]:
        return dict(self._map)

    def _normalize(self, asset: str) -> str:
        """Strip the repository root and surrounding separators."""
        return strip_root(asset, self._root).strip("/\\")
