#!/usr/bin/env python3

"""Bounded cache for member lookups, evicting the least recently used entry."""

from collections import OrderedDict
from collections.abc import Callable, Hashable
from typing import Any

_MISSING = object()


class LookupCache:
    """Size-limited mapping of lookup keys to results.

    Results may legitimately be None (a member that doesn't exist), so misses are
    reported with a caller-supplied default rather than None. Not thread-safe;
    share one instance per thread or guard it with a lock.

    Attributes:
        max_size: Number of entries kept before the oldest is evicted
        hits: Lookups answered from the cache
        misses: Lookups that had to be loaded
        evictions: Entries dropped to stay within max_size
    """

    def __init__(self, max_size: int = 1024):
        if max_size < 1:
            raise ValueError(f"Cache size must be at least 1, got {max_size}")
        self.max_size = max_size
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Get a cached result and mark it as most recently used.

        Args:
            key: Lookup key, e.g. a (type, member name) pair
            default: Returned when nothing is cached for the key

        Returns:
            The cached result, or the default
        """
        if key not in self._entries:
            self.misses += 1
            return default

        self._entries.move_to_end(key)
        self.hits += 1
        return self._entries[key]

    def put(self, key: Hashable, value: Any) -> None:
        """Cache a result, evicting the least recently used entry if the cache is full."""
        if key in self._entries:
            self._entries.move_to_end(key)
        elif len(self._entries) >= self.max_size:
            self._entries.popitem(last=False)
            self.evictions += 1

        self._entries[key] = value

    def get_or_load(self, key: Hashable, loader: Callable[[], Any]) -> Any:
        """Get a cached result, calling the loader and caching its result on a miss.

        Exceptions from the loader propagate and nothing is cached.
        """
        value = self.get(key, _MISSING)
        if value is _MISSING:
            value = loader()
            self.put(key, value)
        return value

    def discard(self, key: Hashable) -> None:
        """Forget one entry, if cached."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Forget every entry and reset the counters."""
        self._entries.clear()
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def stats(self) -> dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with size, counters and hit rate
        """
        total_requests = self.hits + self.misses
        hit_rate = (self.hits / total_requests * 100) if total_requests > 0 else 0.0

        return {
            "size": len(self._entries),
            "max_size": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "hit_rate": f"{hit_rate:.1f}%",
        }

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        """Check for a key without affecting recency."""
        return key in self._entries
