# src/storage/filesystem.py — v1
"""Local filesystem accessor used for source files and temporary files."""

from __future__ import annotations

import shutil
from pathlib import Path

from basset.core.errors import FetchError, StorageWriteError


class LocalFilesystem:
    """Thin pathlib wrapper.

    Read failures surface as FetchError, write failures as StorageWriteError.
    """

    def read(self, path: str | Path) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as e:
            raise FetchError(f"Cannot read {path}: {e}") from e

    def write(self, path: str | Path, content: bytes) -> None:
        p = Path(path)
        try:
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_bytes(content)
        except OSError as e:
            raise StorageWriteError(f"Cannot write {path}: {e}") from e

    def delete(self, path: str | Path) -> None:
        """Remove a file or a whole directory tree; missing paths are ignored."""
        p = Path(path)
        if p.is_dir() and not p.is_symlink():
            shutil.rmtree(p, ignore_errors=True)
        else:
            p.unlink(missing_ok=True)

    def is_file(self, path: str | Path) -> bool:
        return Path(path).is_file()

    def is_dir(self, path: str | Path) -> bool:
        return Path(path).is_dir()

    def all_files(self, directory: str | Path) -> list[str]:
        """Relative POSIX names of every file under directory, sorted."""
        root = Path(directory)
        if not root.is_dir():
            return []
        return sorted(
            p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()
        )
