"""Infrastructure layer implementations for cartcache."""

from cartcache.infrastructure.serializers import JsonItemSerializer
from cartcache.infrastructure.stores import InMemoryListStore, RedisListStore

__all__ = [
    "InMemoryListStore",
    "RedisListStore",
    "JsonItemSerializer",
]
