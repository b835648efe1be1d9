"""Domain services for cartcache."""

from cartcache.core.services.cart_cache import CartCache, redis_store_factory

__all__ = [
    "CartCache",
    "redis_store_factory",
]
