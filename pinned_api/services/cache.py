"""In-memory LRU cache implementation."""

import logging
from collections import OrderedDict
from typing import Generic, TypeVar

T = TypeVar("T")
logger = logging.getLogger(__name__)


class LRUCache(Generic[T]):
    """
    Capacity-bounded in-memory cache with least-recently-used eviction.

    Entries never expire on their own; they are overwritten by newer values
    or evicted once ``max_size`` distinct keys are exceeded. All access happens
    on the event loop thread and no method awaits, so no locking is required.
    """

    def __init__(self, max_size: int = 500):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self._cache: OrderedDict[str, T] = OrderedDict()
        self._max_size = max_size

    def __contains__(self, key: str) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    def get(self, key: str) -> T | None:
        """Return the cached value and mark the key as most recently used."""
        if key not in self._cache:
            return None
        self._cache.move_to_end(key)
        return self._cache[key]

    def set(self, key: str, value: T) -> None:
        """Insert or overwrite a value, evicting the LRU key if needed."""
        if key in self._cache:
            self._cache.move_to_end(key)
        elif len(self._cache) >= self._max_size:
            evicted, _ = self._cache.popitem(last=False)
            logger.debug(f"Evicted least recently used entry '{evicted}'")

        self._cache[key] = value

    def stats(self) -> dict:
        """Return cache statistics."""
        return {
            "size": len(self._cache),
            "max_size": self._max_size,
        }
