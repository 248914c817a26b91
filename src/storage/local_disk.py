# src/storage/local_disk.py — v1
"""Local filesystem disk (default backend)."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from basset.storage.base_disk import BaseDisk

logger = logging.getLogger(__name__)


class LocalDisk(BaseDisk):
    """Store assets under a root directory served from a URL prefix."""

    def __init__(self, root: str | Path, url: str = "") -> None:
        """Initialize with root directory and public URL prefix.

        Args:
            root: Directory all relative paths resolve against.
            url: Public URL the root is served from (e.g. "/storage" or
                "https://static.example.com").
        """
        self._root = Path(root)
        self._url = url.rstrip("/")

    @property
    def root(self) -> Path:
        return self._root

    def _resolve(self, path: str) -> Path:
        return self._root / path.lstrip("/")

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()

    def put(self, path: str, content: bytes | str) -> bool:
        """Write content to a local file, creating parent directories."""
        p = self._resolve(path)
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                p.write_bytes(content)
            else:
                p.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.warning("Failed to write %s: %s", p, e)
            return False
        return True

    def url(self, path: str) -> str:
        return f"{self._url}/{path.lstrip('/')}"

    def path(self, path: str) -> str:
        return str(self._resolve(path))

    def delete_directory(self, path: str) -> bool:
        p = self._resolve(path)
        if not p.is_dir():
            return False
        shutil.rmtree(p)
        return True

    def make_directory(self, path: str) -> bool:
        self._resolve(path).mkdir(parents=True, exist_ok=True)
        return True
