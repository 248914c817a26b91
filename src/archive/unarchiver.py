# src/archive/unarchiver.py — v1
"""Archive extraction into temporary directories.

Format is detected from file content, not from the name, since downloaded
archives land in extension-less temporary files.
Supported: zip, tar (plain, gzip, bzip2, xz).
"""

from __future__ import annotations

import logging
import os
import tarfile
import tempfile
import zipfile
from pathlib import Path

from basset.core.errors import ArchiveError

logger = logging.getLogger(__name__)

_PREFIX = "basset_"


class Unarchiver:
    """Extract archives and hand out temporary locations for them."""

    def __init__(self, temp_dir: str | Path | None = None) -> None:
        self._temp_dir = str(temp_dir) if temp_dir else None

    def temporary_file_path(self) -> Path:
        """Create an empty temporary file and return its path.

        Raises:
            ArchiveError: If the temporary directory is missing or not writable.
        """
        try:
            fd, name = tempfile.mkstemp(prefix=_PREFIX, dir=self._temp_dir)
        except OSError as e:
            raise ArchiveError(f"Cannot create temporary file: {e}") from e
        os.close(fd)
        return Path(name)

    def temporary_directory_path(self) -> Path:
        """Create an empty temporary directory and return its path."""
        try:
            return Path(tempfile.mkdtemp(prefix=_PREFIX, dir=self._temp_dir))
        except OSError as e:
            raise ArchiveError(f"Cannot create temporary directory: {e}") from e

    def unarchive(self, file: str | Path, destination: str | Path) -> None:
        """Extract file into destination.

        Raises:
            ArchiveError: If the file is missing, corrupt or not a supported archive.
        """
        file = Path(file)
        destination = Path(destination)
        if not file.is_file():
            raise ArchiveError(f"Archive not found: {file}")

        try:
            if zipfile.is_zipfile(file):
                with zipfile.ZipFile(file) as archive:
                    archive.extractall(destination)
            elif tarfile.is_tarfile(file):
                with tarfile.open(file) as archive:
                    archive.extractall(destination, filter="data")
            else:
                raise ArchiveError(f"Unsupported archive format: {file}")
        except (zipfile.BadZipFile, tarfile.TarError, OSError) as e:
            raise ArchiveError(f"Cannot extract {file}: {e}") from e

        logger.debug("Extracted %s into %s", file, destination)
