# src/core/errors.py — v1
"""Exception hierarchy for collaborator failures.

Collaborators (fetcher, filesystem, unarchiver, disks) raise these; the engine
catches BassetError at each operation boundary and reports StatusOutcome.INVALID.
"""

from __future__ import annotations


class BassetError(Exception):
    """Base class for every recoverable internalization failure."""


class SourceUnavailableError(BassetError):
    """Identifier is neither a URL nor an existing local file or directory."""


class FetchError(BassetError):
    """Network fetch or local read failed."""


class StorageWriteError(BassetError):
    """The storage backend refused a write."""


class ArchiveError(BassetError):
    """Archive is corrupt or in an unsupported format."""
