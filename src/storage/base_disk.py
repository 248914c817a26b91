# src/storage/base_disk.py — v1
"""Abstract storage disk interface.

A disk stores internalized assets under relative paths and knows the public
URL each one is served from.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseDisk(ABC):
    """Unified interface for asset storage backends."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if a file or directory exists at the relative path."""

    @abstractmethod
    def put(self, path: str, content: bytes | str) -> bool:
        """Write content; return False on any write failure."""

    @abstractmethod
    def url(self, path: str) -> str:
        """Absolute public URL for the relative path."""

    @abstractmethod
    def path(self, path: str) -> str:
        """Backend-specific location of the relative path."""

    @abstractmethod
    def delete_directory(self, path: str) -> bool:
        """Remove a directory and everything under it."""

    @abstractmethod
    def make_directory(self, path: str) -> bool:
        """Create a directory (and parents)."""
