"""Redis list store implementation."""

import logging
from datetime import timedelta
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

from cartcache.core.entities.list_range import ListRange
from cartcache.core.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_PORT = 6379


def _split_host_port(address: str) -> tuple[str, int]:
    """Split ``host[:port]`` into a host and port.

    Raises:
        ValueError: If the address is malformed.
    """
    if address.startswith("["):
        host, bracket, rest = address[1:].partition("]")
        if not bracket or not host:
            raise ValueError(f"invalid address {address!r}")
        if rest and not rest.startswith(":"):
            raise ValueError(f"invalid address {address!r}")
        port = rest[1:]
    elif address.count(":") == 1:
        host, _, port = address.partition(":")
    else:
        # Plain hostname, or an unbracketed IPv6 literal
        host, port = address, ""

    if not host:
        raise ValueError(f"invalid address {address!r}: missing host")
    if not port:
        return host, DEFAULT_PORT
    if not port.isdigit() or not 0 < int(port) < 65536:
        raise ValueError(f"invalid address {address!r}: bad port {port!r}")
    return host, int(port)


class RedisListStore:
    """Redis-backed list store for distributed deployments.

    Lists are stored as native Redis lists and expire through Redis'
    own key TTL. The underlying client keeps a connection pool, so one
    store can be shared by any number of concurrent operations.
    """

    def __init__(self, client: redis.Redis, key_prefix: str = "") -> None:
        """Initialize the Redis list store.

        Args:
            client: The Redis client to use. The store takes ownership
                and closes it in ``close()``.
            key_prefix: Optional prefix for all keys.
        """
        self._redis = client
        self._key_prefix = key_prefix

    @classmethod
    def from_address(cls, address: str, key_prefix: str = "") -> "RedisListStore":
        """Create a store connected to the given address.

        No connection is opened until the first command.

        Args:
            address: A ``redis://``, ``rediss://`` or ``unix://`` URL, or a
                ``host:port`` pair. IPv6 hosts take a port only in
                brackets (``[::1]:6379``); a bare ``::1`` means the default
                port. The port defaults to 6379.
            key_prefix: Optional prefix for all keys.

        Returns:
            A new store.

        Raises:
            ValueError: If the address cannot be parsed.
        """
        if "://" in address:
            client = redis.from_url(address)
        else:
            host, port = _split_host_port(address)
            client = redis.Redis(host=host, port=port)
        return cls(client, key_prefix=key_prefix)

    async def append(self, key: str, value: bytes) -> None:
        """Append a value to the tail of the list at key."""
        await self._call("RPUSH", self._redis.rpush, self._prefixed_key(key), value)

    async def range(self, key: str, start: int = 0, end: int = -1) -> ListRange:
        """Read a range of the list at key.

        Redis deletes a list when its last element is removed, so an
        empty reply for the full range means the key does not exist. For
        a partial range the key is checked separately.
        """
        prefixed_key = self._prefixed_key(key)
        values = await self._call(
            "LRANGE", self._redis.lrange, prefixed_key, start, end
        )
        if values:
            return ListRange.of(values)
        if (start, end) != (0, -1):
            exists = await self._call("EXISTS", self._redis.exists, prefixed_key)
            if exists:
                return ListRange.of(())
        return ListRange.missing()

    async def delete(self, key: str) -> bool:
        """Delete the key.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        result = await self._call("DEL", self._redis.delete, self._prefixed_key(key))
        return result > 0

    async def expire(self, key: str, ttl: timedelta) -> bool:
        """Set the key's TTL with millisecond precision.

        Returns:
            True if the key exists and the TTL was set, False otherwise.
        """
        result = await self._call(
            "PEXPIRE", self._redis.pexpire, self._prefixed_key(key), ttl
        )
        return bool(result)

    async def ping(self) -> None:
        """Check that Redis is reachable."""
        await self._call("PING", self._redis.ping)

    async def _call(self, command: str, method: Any, *args: Any) -> Any:
        """Run a Redis command, translating client errors.

        Args:
            command: Command name used in error messages.
            method: The bound client method to call.
            *args: Arguments for the command.

        Returns:
            The command's reply.

        Raises:
            TransportError: If Redis reports an error or cannot be reached.
        """
        try:
            return await method(*args)
        except RedisError as e:
            logger.debug("Redis %s failed: %s", command, e)
            raise TransportError(f"Redis {command} failed: {e}") from e

    def _prefixed_key(self, key: str) -> str:
        """Add the configured prefix to a key.

        Cart keys are opaque, so the prefix is added even when the key
        already starts with it.

        Args:
            key: The cart key.

        Returns:
            The key with prefix.
        """
        return f"{self._key_prefix}:{key}" if self._key_prefix else key

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisListStore":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
