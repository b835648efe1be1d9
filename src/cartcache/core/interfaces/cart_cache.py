"""Cart cache interface."""

from collections.abc import Sequence
from typing import Protocol

from cartcache.core.entities.cart_item import CartItem


class ICartCache(Protocol):
    """Contract for the per-session cart cache.

    Cart services depend on this protocol rather than on ``CartCache``
    so that tests can substitute their own implementation.
    """

    async def add(self, key: str, items: Sequence[CartItem]) -> None:
        """Append items to the cart at key and reset its TTL."""
        ...

    async def get(self, key: str) -> list[CartItem]:
        """Return the cart at key.

        Raises:
            NotFoundError: If no cart is stored under key.
        """
        ...

    async def remove(self, key: str) -> bool:
        """Remove the cart at key.

        Returns:
            True if a cart was removed, False if none existed.
        """
        ...
