"""cartcache - TTL-bounded shopping cart cache backed by Redis.

Stores each cart as a Redis list of JSON-encoded line items under the
cart's key (typically a user or session id). Every write resets the
cart's TTL, so abandoned carts expire on their own.

Example:
    from cartcache import CartCacheConfig, CartItem, NotFoundError, open_cart_cache

    config = CartCacheConfig(host="localhost:6379", ttl="30m")

    async with open_cart_cache(config) as cache:
        await cache.add("user-42", [CartItem("OLJCESPC7Z", 2)])
        items = await cache.get("user-42")

        await cache.remove("user-42")
        try:
            await cache.get("user-42")
        except NotFoundError:
            ...

Testing with the in-memory store:
    from cartcache import CartCache, InMemoryListStore

    cache = CartCache(InMemoryListStore(), ttl=timedelta(minutes=30))
"""

from cartcache.core.entities import CartCacheConfig, CartItem, ListRange
from cartcache.core.errors import (
    CartCacheError,
    ConfigError,
    ConnectivityError,
    DecodingError,
    EncodingError,
    NotFoundError,
    SerializationError,
    TransportError,
)
from cartcache.core.interfaces import ICartCache, IItemSerializer, IListStore
from cartcache.core.services import CartCache
from cartcache.infrastructure import (
    InMemoryListStore,
    JsonItemSerializer,
    RedisListStore,
)
from cartcache.lifecycle import open_cart_cache
from cartcache.utils.duration import parse_duration

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CartItem",
    "CartCacheConfig",
    "ListRange",
    # Errors
    "CartCacheError",
    "ConfigError",
    "ConnectivityError",
    "NotFoundError",
    "SerializationError",
    "EncodingError",
    "DecodingError",
    "TransportError",
    # Core interfaces
    "ICartCache",
    "IListStore",
    "IItemSerializer",
    # Core services
    "CartCache",
    "open_cart_cache",
    # Infrastructure implementations
    "InMemoryListStore",
    "RedisListStore",
    "JsonItemSerializer",
    # Utilities
    "parse_duration",
]
