"""List store interface."""

from datetime import timedelta
from typing import Protocol

from cartcache.core.entities.list_range import ListRange


class IListStore(Protocol):
    """Contract for the remote list store backing the cart cache.

    Stores hold an ordered list of opaque byte strings per key, with an
    optional expiry per key. Implementations must be safe to share
    between concurrent operations.
    """

    async def append(self, key: str, value: bytes) -> None:
        """Append a value to the tail of the list at key.

        Creates the list if the key does not exist.

        Raises:
            TransportError: If the store operation fails.
        """
        ...

    async def range(self, key: str, start: int = 0, end: int = -1) -> ListRange:
        """Read elements ``start`` through ``end`` (inclusive) of a list.

        Negative indexes count from the tail, so ``(0, -1)`` reads the
        whole list.

        Returns:
            A found range, or ``ListRange.missing()`` if the key is absent.

        Raises:
            TransportError: If the store operation fails.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Delete a key.

        Returns:
            True if the key existed and was deleted, False otherwise.

        Raises:
            TransportError: If the store operation fails.
        """
        ...

    async def expire(self, key: str, ttl: timedelta) -> bool:
        """Set the time-to-live of a key, replacing any previous expiry.

        Returns:
            True if the key exists and the expiry was set, False otherwise.

        Raises:
            TransportError: If the store operation fails.
        """
        ...

    async def ping(self) -> None:
        """Check that the store is reachable.

        Raises:
            TransportError: If the store cannot be reached.
        """
        ...

    async def close(self) -> None:
        """Release the connection to the store."""
        ...
