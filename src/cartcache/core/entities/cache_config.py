"""Cart cache configuration entity."""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any

from cartcache.core.errors import ConfigError
from cartcache.utils.duration import parse_duration


@dataclass
class CartCacheConfig:
    """Cart cache configuration.

    Holds the address of the backing store and the TTL applied to a cart
    on every write. Values are plain strings as read from the config
    source; call ``validate()`` once at startup before using them.

    The TTL uses duration syntax such as ``"30s"``, ``"15m"`` or
    ``"1h30m"``. The host is either a ``redis://`` URL or a
    ``host:port`` pair.
    """

    host: str = ""
    ttl: str = ""
    key_prefix: str = ""

    def validate(self) -> None:
        """Check that the configuration is usable.

        Raises:
            ConfigError: If the host is missing or the TTL is not a
                positive duration.
        """
        if not self.host:
            raise ConfigError("distributed cache host must be set")
        self.parse_ttl()

    def parse_ttl(self) -> timedelta:
        """Parse the TTL string.

        Returns:
            The TTL as a timedelta.

        Raises:
            ConfigError: If the TTL is not a positive duration.
        """
        try:
            ttl = parse_duration(self.ttl)
        except ValueError as e:
            raise ConfigError(
                f"distributed cache TTL must be a valid duration: {e}"
            ) from e
        # PEXPIRE works in milliseconds; anything shorter would delete the key
        if ttl < timedelta(milliseconds=1):
            raise ConfigError(
                f"distributed cache TTL must be at least 1ms, got {self.ttl!r}"
            )
        return ttl

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "CartCacheConfig":
        """Build a config from a mapping such as a parsed TOML table.

        Recognized keys are ``cache_host``, ``cache_ttl`` and
        ``cache_key_prefix``. Unknown keys are ignored.

        Args:
            data: The mapping to read.

        Returns:
            A new, unvalidated config.
        """
        return cls(
            host=str(data.get("cache_host", "")),
            ttl=str(data.get("cache_ttl", "")),
            key_prefix=str(data.get("cache_key_prefix", "")),
        )

    @classmethod
    def from_toml(
        cls,
        path: str | Path,
        section: str | None = None,
    ) -> "CartCacheConfig":
        """Load a config from a TOML file.

        Args:
            path: Path to the TOML file.
            section: Optional dotted table name holding the cache keys,
                e.g. ``"cartservice"``. Reads the top level if None.

        Returns:
            A new, unvalidated config.

        Raises:
            ConfigError: If the file cannot be parsed or the section
                does not exist.
        """
        try:
            with open(path, "rb") as f:
                data: Any = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"cannot read config file {str(path)!r}: {e}") from e

        if section:
            for part in section.split("."):
                if not isinstance(data, dict) or part not in data:
                    raise ConfigError(f"config section {section!r} not found")
                data = data[part]
            if not isinstance(data, dict):
                raise ConfigError(f"config section {section!r} is not a table")

        return cls.from_mapping(data)

    @classmethod
    def from_env(
        cls,
        prefix: str = "CARTCACHE_",
        environ: Mapping[str, str] | None = None,
    ) -> "CartCacheConfig":
        """Load a config from environment variables.

        Reads ``<prefix>HOST``, ``<prefix>TTL`` and ``<prefix>KEY_PREFIX``.

        Args:
            prefix: Variable name prefix.
            environ: Mapping to read instead of ``os.environ``.

        Returns:
            A new, unvalidated config.
        """
        env = os.environ if environ is None else environ
        return cls(
            host=env.get(f"{prefix}HOST", ""),
            ttl=env.get(f"{prefix}TTL", ""),
            key_prefix=env.get(f"{prefix}KEY_PREFIX", ""),
        )
