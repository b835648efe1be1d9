"""In-memory list store implementation."""

import math
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta

from cachetools import TLRUCache  # type: ignore[import-untyped]

from cartcache.core.entities.list_range import ListRange


@dataclass
class _Entry:
    values: list[bytes] = field(default_factory=list)
    expires_at: float = math.inf


def _entry_expiry(key: str, entry: _Entry, now: float) -> float:
    return entry.expires_at


class InMemoryListStore:
    """In-memory list store with per-key TTL.

    Suitable for tests and single-process use. Uses cachetools'
    TLRUCache so that each key carries its own expiry; when ``maxsize``
    is reached the least recently used key is evicted.
    """

    def __init__(
        self,
        maxsize: int = 10_000,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory list store.

        Args:
            maxsize: Maximum number of keys held.
            timer: Clock returning seconds; override to control expiry
                in tests.
        """
        self._maxsize = maxsize
        self._timer = timer
        self._cache: TLRUCache[str, _Entry] = TLRUCache(
            maxsize=maxsize,
            ttu=_entry_expiry,
            timer=timer,
        )

    async def append(self, key: str, value: bytes) -> None:
        """Append a value to the tail of the list at key."""
        entry = self._cache.get(key)
        if entry is None:
            self._cache[key] = _Entry(values=[value])
        else:
            # Appending keeps the current expiry, as Redis does
            entry.values.append(value)

    async def range(self, key: str, start: int = 0, end: int = -1) -> ListRange:
        """Read elements ``start`` through ``end`` (inclusive) of a list."""
        entry = self._cache.get(key)
        if entry is None:
            return ListRange.missing()
        size = len(entry.values)
        if start < 0:
            start = max(size + start, 0)
        if end < 0:
            end = size + end
        if end < start:
            return ListRange.of(())
        return ListRange.of(entry.values[start : end + 1])

    async def delete(self, key: str) -> bool:
        """Delete the key.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        return self._cache.pop(key, None) is not None

    async def expire(self, key: str, ttl: timedelta) -> bool:
        """Set the key's TTL, replacing any previous expiry.

        Returns:
            True if the key exists and the TTL was set, False otherwise.
        """
        entry = self._cache.get(key)
        if entry is None:
            return False
        if ttl <= timedelta(0):
            del self._cache[key]
            return True
        # Reinsert so the cache recomputes the entry's expiry
        self._cache[key] = _Entry(
            values=entry.values,
            expires_at=self._timer() + ttl.total_seconds(),
        )
        return True

    async def ping(self) -> None:
        """Always succeeds."""

    async def close(self) -> None:
        """Nothing to release."""

    def ttl(self, key: str) -> timedelta | None:
        """Return the remaining time-to-live of a key.

        Args:
            key: The key to inspect.

        Returns:
            The remaining TTL, or None if the key is absent or never
            expires.
        """
        entry = self._cache.get(key)
        if entry is None or entry.expires_at == math.inf:
            return None
        return timedelta(seconds=entry.expires_at - self._timer())

    def __len__(self) -> int:
        """Return the number of live keys."""
        self._cache.expire()
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum number of keys."""
        return self._maxsize
