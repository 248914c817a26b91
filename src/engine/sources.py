# src/engine/sources.py — v1
"""Content acquisition: download, local read, archive and directory walks."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from basset.archive.unarchiver import Unarchiver
from basset.core.errors import SourceUnavailableError
from basset.core.paths import is_remote, to_fetch_url
from basset.fetch.http_fetcher import HttpFetcher
from basset.storage.filesystem import LocalFilesystem

logger = logging.getLogger(__name__)


class AssetSource:
    """Reads asset content from the network or the local filesystem."""

    def __init__(
        self,
        fetcher: HttpFetcher,
        filesystem: LocalFilesystem | None = None,
        unarchiver: Unarchiver | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.filesystem = filesystem or LocalFilesystem()
        self.unarchiver = unarchiver or Unarchiver()

    def read(self, asset: str) -> bytes:
        """Download a remote asset or read a local one.

        Raises:
            FetchError: If the download or read fails.
        """
        if is_remote(asset):
            return self.fetcher.get(to_fetch_url(asset))
        return self.filesystem.read(asset)

    @contextmanager
    def extracted(self, asset: str) -> Iterator[Path]:
        """Yield a temporary directory holding the extracted archive.

        The downloaded archive (if any) and the extraction directory are
        removed when the block exits, whether it succeeded or not.

        Raises:
            SourceUnavailableError: If asset is neither a local file nor a URL.
            FetchError: If the download fails.
            ArchiveError: If extraction fails.
        """
        temporary: list[Path] = []
        try:
            if self.filesystem.is_file(asset):
                file = Path(asset)
            elif is_remote(asset):
                file = self.unarchiver.temporary_file_path()
                temporary.append(file)
                self.filesystem.write(file, self.fetcher.get(to_fetch_url(asset)))
                logger.debug("Downloaded archive %s to %s", asset, file)
            else:
                raise SourceUnavailableError(f"Archive source not found: {asset}")

            directory = self.unarchiver.temporary_directory_path()
            temporary.append(directory)
            self.unarchiver.unarchive(file, directory)
            yield directory
        finally:
            for path in temporary:
                self.filesystem.delete(path)

    def files(self, directory: str | Path) -> Iterator[tuple[str, bytes]]:
        """Yield (relative name, content) for every file under directory.

        Raises:
            SourceUnavailableError: If directory does not exist.
        """
        if not self.filesystem.is_dir(directory):
            raise SourceUnavailableError(f"Directory not found: {directory}")
        for name in self.filesystem.all_files(directory):
            yield name, self.filesystem.read(Path(directory) / name)
