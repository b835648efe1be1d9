"""Core interfaces (Protocol classes) for cartcache."""

from cartcache.core.interfaces.cart_cache import ICartCache
from cartcache.core.interfaces.list_store import IListStore
from cartcache.core.interfaces.serializer import IItemSerializer

__all__ = [
    "ICartCache",
    "IListStore",
    "IItemSerializer",
]
