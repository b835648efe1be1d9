"""Domain entities for cartcache."""

from cartcache.core.entities.cache_config import CartCacheConfig
from cartcache.core.entities.cart_item import CartItem
from cartcache.core.entities.list_range import ListRange

__all__ = [
    "CartItem",
    "CartCacheConfig",
    "ListRange",
]
