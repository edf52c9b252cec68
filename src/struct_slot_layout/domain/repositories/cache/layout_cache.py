#!/usr/bin/env python3

"""Thread-safe LRU cache of computed struct layouts."""

import threading
from collections import OrderedDict
from collections.abc import Callable
from typing import Any

from ...models.layout import StructLayout


class LayoutCache:
    """LRU cache of StructLayouts keyed by struct name.

    Reads and writes are serialized by a lock. Layouts are computed outside
    the lock; when two threads compute the same struct concurrently the
    first stored layout wins and is returned to both.
    """

    def __init__(self, max_size: int = 1000):
        """Initialize cache with maximum size.

        Args:
            max_size: Maximum number of layouts to keep
        """
        self.max_size = max_size
        self.cache: OrderedDict[str, StructLayout] = OrderedDict()
        self.hits = 0
        self.misses = 0
        self._lock = threading.Lock()

    def get(self, key: str) -> StructLayout | None:
        """Get layout from cache, marking it most recently used.

        Args:
            key: Struct name

        Returns:
            Cached layout or None if not found
        """
        with self._lock:
            if key in self.cache:
                self.cache.move_to_end(key)
                self.hits += 1
                return self.cache[key]

            self.misses += 1
            return None

    def put(self, key: str, value: StructLayout) -> StructLayout:
        """Store a layout unless one is already cached for ``key``.

        Args:
            key: Struct name
            value: Computed layout

        Returns:
            The layout held by the cache for ``key`` after the call
        """
        with self._lock:
            if key in self.cache:
                self.cache.move_to_end(key)
                return self.cache[key]

            if len(self.cache) >= self.max_size:
                # Remove least recently used
                self.cache.popitem(last=False)

            self.cache[key] = value
            return value

    def get_or_compute(self, key: str, factory: Callable[[], StructLayout]) -> StructLayout:
        """Return the cached layout for ``key``, computing and storing it on a miss."""
        cached = self.get(key)
        if cached is not None:
            return cached
        return self.put(key, factory())

    def clear(self) -> None:
        """Clear all cached layouts."""
        with self._lock:
            self.cache.clear()
            self.hits = 0
            self.misses = 0

    def stats(self) -> dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with cache performance metrics
        """
        with self._lock:
            total_requests = self.hits + self.misses
            hit_rate = (self.hits / total_requests * 100) if total_requests > 0 else 0.0

            return {
                "size": len(self.cache),
                "max_size": self.max_size,
                "hits": self.hits,
                "misses": self.misses,
                "hit_rate": f"{hit_rate:.1f}%",
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self.cache)

    def __contains__(self, key: str) -> bool:
        """Check if key exists in cache without affecting LRU order."""
        with self._lock:
            return key in self.cache
