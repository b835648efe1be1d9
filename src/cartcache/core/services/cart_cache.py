"""Cart cache service - stores shopping carts in a remote list store."""

import logging
from collections.abc import Callable, Sequence
from datetime import timedelta

from cartcache.core.entities.cache_config import CartCacheConfig
from cartcache.core.entities.cart_item import CartItem
from cartcache.core.errors import (
    ConfigError,
    ConnectivityError,
    NotFoundError,
    TransportError,
)
from cartcache.core.interfaces.list_store import IListStore
from cartcache.core.interfaces.serializer import IItemSerializer
from cartcache.infrastructure.serializers.json import JsonItemSerializer
from cartcache.infrastructure.stores.redis import RedisListStore

logger = logging.getLogger(__name__)

StoreFactory = Callable[[CartCacheConfig], IListStore]


def redis_store_factory(config: CartCacheConfig) -> IListStore:
    """Build the default Redis-backed store for a config."""
    return RedisListStore.from_address(config.host, key_prefix=config.key_prefix)


class CartCache:
    """TTL-bounded cache of shopping carts.

    Each cart is kept in the store as a list of independently encoded
    items under the cart's key. Every ``add`` resets the key's TTL; the
    store drops carts that are not written to within that time.

    The cache holds no cart data itself. All state lives in the store,
    whose client is shared by every concurrent call. Calls are not
    coordinated with each other: callers that need read-your-writes
    across concurrent updates of one cart must serialize them.

    Every operation may be cancelled through its calling task, e.g.
    with ``asyncio.timeout``. Cancellation aborts the in-flight store
    call and propagates to the caller.
    """

    def __init__(
        self,
        store: IListStore,
        ttl: timedelta,
        serializer: IItemSerializer | None = None,
    ) -> None:
        """Initialize the cart cache.

        Args:
            store: The list store holding the carts. The cache takes
                ownership and closes it in ``close()``.
            ttl: Time-to-live applied to a cart on every ``add``.
            serializer: Item serializer. Defaults to JSON.
        """
        self._store = store
        self._ttl = ttl
        self._serializer = serializer or JsonItemSerializer()

    @classmethod
    async def from_config(
        cls,
        config: CartCacheConfig,
        store_factory: StoreFactory = redis_store_factory,
    ) -> "CartCache":
        """Create a cart cache connected to the configured store.

        The config is validated before any connection is attempted, and
        the store must answer a ping. There is no retry: a store that is
        unreachable at startup fails the call.

        Args:
            config: The cache configuration.
            store_factory: Builds the store from the config. Defaults
                to a Redis store at ``config.host``.

        Returns:
            A ready cart cache.

        Raises:
            ConfigError: If the configuration is invalid, including a host
                the store factory cannot parse.
            ConnectivityError: If the store does not answer the ping.
        """
        config.validate()
        ttl = config.parse_ttl()

        try:
            store = store_factory(config)
        except ValueError as e:
            raise ConfigError(
                f"distributed cache host {config.host!r} is not a valid address: {e}"
            ) from e

        try:
            await store.ping()
        except BaseException as e:
            # Release the client on cancellation as well
            await store.close()
            if isinstance(e, TransportError):
                logger.error(
                    "Cart cache store at %s is unreachable: %s", config.host, e
                )
                raise ConnectivityError(
                    f"cannot reach cart cache store at {config.host!r}: {e}"
                ) from e
            raise

        logger.info("Cart cache connected to %s (ttl=%s)", config.host, ttl)
        return cls(store, ttl)

    @property
    def ttl(self) -> timedelta:
        """Time-to-live applied to a cart on every add."""
        return self._ttl

    async def add(self, key: str, items: Sequence[CartItem]) -> None:
        """Append items to the cart at key and reset its TTL.

        Items are encoded and appended one at a time, in order. The
        first failure is raised at once: later items are not appended
        and the TTL is not refreshed, but items already appended stay
        in the store.

        With no items, only the TTL is refreshed; this is a no-op for a
        cart that does not exist.

        Args:
            key: The cart key, typically a user or session id.
            items: Items to append.

        Raises:
            EncodingError: If an item cannot be encoded.
            TransportError: If a store operation fails.
        """
        logger.debug("Adding %d item(s) to cart %r", len(items), key)
        for index, item in enumerate(items):
            try:
                data = self._serializer.encode(item)
                await self._store.append(key, data)
            except Exception:
                if index:
                    logger.warning(
                        "Cart %r partially updated: %d of %d item(s) appended "
                        "before failure, TTL not refreshed",
                        key,
                        index,
                        len(items),
                    )
                raise

        await self._store.expire(key, self._ttl)

    async def get(self, key: str) -> list[CartItem]:
        """Return the cart at key.

        Reading does not refresh the cart's TTL.

        Args:
            key: The cart key.

        Returns:
            The cart's items in stored order. Empty only if the store
            holds the key with no elements.

        Raises:
            NotFoundError: If no cart is stored under key.
            DecodingError: If a stored item cannot be decoded.
            TransportError: If the store operation fails.
        """
        result = await self._store.range(key, 0, -1)
        if not result.found:
            logger.debug("Cart %r not found", key)
            raise NotFoundError(key)

        return [self._serializer.decode(value) for value in result.values]

    async def remove(self, key: str) -> bool:
        """Remove the cart at key.

        Args:
            key: The cart key.

        Returns:
            True if a cart existed and was removed, False if there was
            none.

        Raises:
            TransportError: If the store operation fails.
        """
        removed = await self._store.delete(key)
        logger.debug("Removed cart %r (existed=%s)", key, removed)
        return removed

    async def close(self) -> None:
        """Close the underlying store."""
        await self._store.close()

    async def __aenter__(self) -> "CartCache":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
