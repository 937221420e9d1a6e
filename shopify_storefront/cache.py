"""TTL cache whose entries can be invalidated in bulk by tag."""

import time
from typing import Any, Dict, Iterable, Optional, Set


class TagCache:
    """Simple TTL-based cache for Storefront responses, grouped by tags."""

    def __init__(self, ttl: int):
        """
        Initialize cache.

        Args:
            ttl: Time-to-live in seconds
        """
        self.ttl = ttl
        self._cache: Dict[str, Any] = {}
        self._timestamps: Dict[str, float] = {}
        self._tags: Dict[str, Set[str]] = {}

    def __len__(self) -> int:
        return len(self._cache)

    def get(self, key: str) -> Optional[Any]:
        """Get cached value if not expired."""
        if key not in self._cache:
            return None

        if time.time() - self._timestamps[key] > self.ttl:
            self.invalidate(key)
            return None

        return self._cache[key]

    def set(self, key: str, value: Any, tags: Iterable[str] = ()) -> None:
        """Set cached value with current timestamp under the given tags."""
        self._cache[key] = value
        self._timestamps[key] = time.time()
        for tag in tags:
            self._tags.setdefault(tag, set()).add(key)

    def invalidate(self, key: str) -> None:
        """Invalidate specific cache key."""
        self._cache.pop(key, None)
        self._timestamps.pop(key, None)
        for keys in self._tags.values():
            keys.discard(key)

    def invalidate_tag(self, tag: str) -> int:
        """
        Drop every entry carrying a tag.

        Returns:
            Number of entries removed
        """
        keys = self._tags.pop(tag, set())
        removed = 0
        for key in keys:
            if key in self._cache:
                removed += 1
            self.invalidate(key)
        return removed
