"""Error types raised by cartcache."""


class CartCacheError(Exception):
    """Base class for all cartcache errors."""

    pass


class ConfigError(CartCacheError):
    """Raised when the cache configuration is invalid."""

    pass


class ConnectivityError(CartCacheError):
    """Raised when the store cannot be reached at startup."""

    pass


class NotFoundError(CartCacheError):
    """Raised when no cart is stored under the requested key."""

    def __init__(self, key: str) -> None:
        """Initialize the error.

        Args:
            key: The cart key that was not found.
        """
        super().__init__(f"cart not found: {key!r}")
        self.key = key


class SerializationError(CartCacheError):
    """Raised when a cart item cannot be encoded or decoded."""

    pass


class EncodingError(SerializationError):
    """Raised when a cart item cannot be encoded."""

    pass


class DecodingError(SerializationError):
    """Raised when stored data cannot be decoded into a cart item."""

    pass


class TransportError(CartCacheError):
    """Raised when a store operation fails."""

    pass
