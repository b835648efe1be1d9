"""Core domain layer for cartcache."""

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

__all__ = [
    # Entities
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
    # Interfaces
    "ICartCache",
    "IListStore",
    "IItemSerializer",
    # Services
    "CartCache",
]
