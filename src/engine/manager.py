# src/engine/manager.py — v1
"""Asset internalization engine.

Every operation walks the same short-circuit pipeline, cheapest check first:

  1. resolved path already handled this run       -> LOADED
  2. cache map hit                                -> IN_CACHE
  3. already present on the storage disk          -> IN_CACHE
  4. fetch / copy / extract, then write           -> INTERNALIZED or INVALID

The path is marked as loaded before anything is fetched, so an asset that
fails is not retried within the same run. Failures never propagate to the
caller: they become INVALID plus a fallback (the original reference, or the
raw inline code) so the page keeps working.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from basset.cache.cache_map import CacheMap
from basset.core.errors import BassetError, StorageWriteError
from basset.core.models import AssetKind, AssetResult, StatusOutcome
from basset.core.paths import (
    cache_busting_suffix,
    is_local_absolute,
    is_remote,
    normalize_base_path,
    resolve_path,
)
from basset.engine.content import clean_block, strip_source_maps
from basset.engine.context import EngineContext
from basset.engine.sources import AssetSource
from basset.logging.context import clear_asset_context, set_asset_context
from basset.output.renderers import Attributes, render_file
from basset.storage.base_disk import BaseDisk

logger = logging.getLogger(__name__)

Procedure = Callable[[list[str]], StatusOutcome]


class BassetManager:
    """Internalizes files, inline blocks, archives and directories onto a disk."""

    def __init__(
        self,
        disk: BaseDisk,
        cache_map: CacheMap,
        source: AssetSource,
        base_path: str = "basset",
        cachebusting: str = "",
        root: str = "",
    ) -> None:
        """Initialize the engine.

        Args:
            disk: Storage disk assets are internalized onto.
            cache_map: Persistent identifier index (may be disabled).
            source: Reader for remote and local asset content.
            base_path: Directory on the disk every asset is stored under.
            cachebusting: Token appended as a query string to emitted URLs.
            root: Absolute repository root; local identifiers must start with it.
        """
        self.disk = disk
        self.source = source
        self.base_path = normalize_base_path(base_path)
        self.cachebusting = cache_busting_suffix(cachebusting)
        self.root = root
        self.context = EngineContext(cache_map=cache_map)

    # --- Loaded set ---

    @property
    def cache_map(self) -> CacheMap:
        return self.context.cache_map

    def mark_as_loaded(self, path: str) -> None:
        self.context.loaded.mark_as_loaded(path)

    def is_loaded(self, path: str) -> bool:
        return self.context.loaded.is_loaded(path)

    def loaded(self) -> list[str]:
        return self.context.loaded.loaded()

    # --- Paths ---

    def get_path(self, asset: str) -> str:
        return resolve_path(asset, self.base_path, self.root)

    def get_url(self, asset: str) -> str:
        return self.disk.url(self.get_path(asset))

    # --- Output ---

    @property
    def output(self) -> str:
        """Everything emitted so far and not yet flushed."""
        return "".join(self.context.output)

    def flush_output(self) -> str:
        emitted = self.output
        self.context.output.clear()
        return emitted

    def _render(self, url: str, attributes: Attributes | None = None) -> str:
        return render_file(url, attributes, self.cachebusting)

    # --- Operations ---

    def internalize(self, kind: AssetKind, asset: str, **kwargs) -> AssetResult:
        """Dispatch to the operation for the given asset kind."""
        operations = {
            AssetKind.FILE: self.basset,
            AssetKind.BLOCK: self.basset_block,
            AssetKind.ARCHIVE: self.basset_archive,
            AssetKind.DIRECTORY: self.basset_directory,
        }
        return operations[AssetKind(kind)](asset, **kwargs)

    def basset(
        self,
        asset: str,
        output: bool | str = True,
        attributes: Attributes | None = None,
    ) -> AssetResult:
        """Internalize a CDN or local file.

        Args:
            asset: URL, protocol-relative reference or absolute local path.
            output: False to suppress markup, or a path overriding where the
                file is stored (markup is emitted).
            attributes: Extra tag attributes for the emitted markup.
        """
        path = self.get_path(output if isinstance(output, str) else asset)
        emit = bool(output)

        def procedure(out: list[str]) -> StatusOutcome:
            mapped = self.cache_map.get(asset)
            if mapped:
                if emit:
                    out.append(self._render(mapped, attributes))
                return StatusOutcome.IN_CACHE

            # Not a repository path nor a URL: a public file or an archive/directory member
            if not is_local_absolute(asset, self.root) and not is_remote(asset):
                if self.disk.exists(path):
                    if emit:
                        out.append(self._render(self.disk.url(path), attributes))
                    return StatusOutcome.IN_CACHE
                if emit:
                    out.append(self._render(asset, attributes))
                return StatusOutcome.INVALID

            url = self.disk.url(path)
            if self.disk.exists(path):
                if emit:
                    out.append(self._render(url, attributes))
                self.cache_map.add(asset, url)
                return StatusOutcome.IN_CACHE

            try:
                content = strip_source_maps(self.source.read(asset))
            except BassetError as e:
                logger.warning("Could not fetch %s: %s", asset, e)
            else:
                if self.disk.put(path, content):
                    if emit:
                        out.append(self._render(url, attributes))
                    self.cache_map.add(asset, url)
                    return StatusOutcome.INTERNALIZED
                logger.warning("Could not store %s at %s", asset, path)

            if emit:
                out.append(self._render(asset, attributes))
            return StatusOutcome.INVALID

        return self._run(AssetKind.FILE, asset, path, procedure)

    def basset_block(self, asset: str, code: str, output: bool = True) -> AssetResult:
        """Internalize an inline code block under the key asset (e.g. "app/init.js")."""
        path = self.get_path(asset)

        def procedure(out: list[str]) -> StatusOutcome:
            mapped = self.cache_map.get(asset)
            if mapped:
                if output:
                    out.append(self._render(mapped))
                return StatusOutcome.IN_CACHE

            url = self.disk.url(path)
            if self.disk.exists(path):
                if output:
                    out.append(self._render(url))
                self.cache_map.add(asset, url)
                return StatusOutcome.IN_CACHE

            if self.disk.put(path, clean_block(code)):
                if output:
                    out.append(self._render(url))
                self.cache_map.add(asset, url)
                return StatusOutcome.INTERNALIZED

            logger.warning("Could not store block %s at %s", asset, path)
            out.append(code)
            return StatusOutcome.INVALID

        return self._run(AssetKind.BLOCK, asset, path, procedure)

    def basset_archive(self, asset: str, output: str) -> AssetResult:
        """Extract a local or remote archive into the output directory."""
        path = self.get_path(output)

        def procedure(out: list[str]) -> StatusOutcome:
            if self.cache_map.has(asset):
                return StatusOutcome.IN_CACHE

            if self.disk.exists(path):
                self.cache_map.add(asset)
                return StatusOutcome.IN_CACHE

            try:
                with self.source.extracted(asset) as directory:
                    self._put_tree(path, self.source.files(directory))
            except BassetError as e:
                logger.warning("Could not internalize archive %s: %s", asset, e)
                return StatusOutcome.INVALID

            self.cache_map.add(asset)
            logger.debug("Archive %s extracted into %s", asset, self.disk.path(path))
            return StatusOutcome.INTERNALIZED

        return self._run(AssetKind.ARCHIVE, asset, path, procedure)

    def basset_directory(self, asset: str, output: str) -> AssetResult:
        """Copy every file under a local directory into the output directory."""
        path = self.get_path(output)

        def procedure(out: list[str]) -> StatusOutcome:
            if self.cache_map.has(asset):
                return StatusOutcome.IN_CACHE

            if self.disk.exists(path):
                self.cache_map.add(asset)
                return StatusOutcome.IN_CACHE

            try:
                self._put_tree(path, self.source.files(asset))
            except BassetError as e:
                logger.warning("Could not internalize directory %s: %s", asset, e)
                return StatusOutcome.INVALID

            self.cache_map.add(asset)
            return StatusOutcome.INTERNALIZED

        return self._run(AssetKind.DIRECTORY, asset, path, procedure)

    # --- Lifecycle ---

    def save(self) -> None:
        """Flush the cache map (no-op when nothing changed)."""
        self.cache_map.save()

    def close(self) -> None:
        self.save()
        self.source.fetcher.close()

    def __enter__(self) -> BassetManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- Internals ---

    def _put_tree(self, path: str, files: Iterable[tuple[str, bytes]]) -> None:
        for name, content in files:
            if not self.disk.put(f"{path}/{name}", content):
                raise StorageWriteError(f"Could not store {path}/{name}")

    def _run(
        self, kind: AssetKind, asset: str, path: str, procedure: Procedure
    ) -> AssetResult:
        """Run the loaded-set gate, then the kind-specific procedure."""
        timer = self.context.timer
        timer.start()
        set_asset_context(asset, kind.value)
        out: list[str] = []
        try:
            if self.is_loaded(path):
                status = StatusOutcome.LOADED
            else:
                self.mark_as_loaded(path)
                status = procedure(out)
            timer.finish(status)
            logger.debug("%s -> %s (%.1f ms)", path, status.value, timer.last_ms)
        finally:
            clear_asset_context()

        self.context.output.extend(out)
        return AssetResult(
            kind=kind,
            identifier=asset,
            path=path,
            status=status,
            output="".join(out),
            elapsed_ms=timer.last_ms,
        )
