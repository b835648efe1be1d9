"""List store implementations."""

from cartcache.infrastructure.stores.memory import InMemoryListStore
from cartcache.infrastructure.stores.redis import RedisListStore

__all__ = ["InMemoryListStore", "RedisListStore"]
