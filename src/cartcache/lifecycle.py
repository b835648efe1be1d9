"""Scoped startup and shutdown of a cart cache."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from cartcache.core.entities.cache_config import CartCacheConfig
from cartcache.core.services.cart_cache import (
    CartCache,
    StoreFactory,
    redis_store_factory,
)


@asynccontextmanager
async def open_cart_cache(
    config: CartCacheConfig,
    store_factory: StoreFactory = redis_store_factory,
) -> AsyncIterator[CartCache]:
    """Open a cart cache for the duration of a block.

    The cache is connected on entry and its store is closed on exit,
    including when the block raises.

    Example:
        config = CartCacheConfig.from_env()
        async with open_cart_cache(config) as cache:
            await cache.add("user-42", [CartItem("OLJCESPC7Z", 1)])

    Args:
        config: The cache configuration.
        store_factory: Builds the store from the config.

    Yields:
        The connected cart cache.

    Raises:
        ConfigError: If the configuration is invalid.
        ConnectivityError: If the store is unreachable.
    """
    cache = await CartCache.from_config(config, store_factory=store_factory)
    try:
        yield cache
    finally:
        await cache.close()
