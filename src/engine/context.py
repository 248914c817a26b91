# src/engine/context.py — v1
"""Per-engine mutable state: loaded paths, cache map, timings, emitted output."""

from __future__ import annotations

from dataclasses import dataclass, field

from basset.cache.cache_map import CacheMap
from basset.core.loaded import LoadedSet
from basset.core.timing import LoadingTimer


@dataclass
class EngineContext:
    """Everything one BassetManager mutates. Never shared between managers."""

    cache_map: CacheMap
    loaded: LoadedSet = field(default_factory=LoadedSet)
    timer: LoadingTimer = field(default_factory=LoadingTimer)
    output: list[str] = field(default_factory=list)
