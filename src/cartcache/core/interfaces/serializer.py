"""Item serializer interface."""

from typing import Protocol

from cartcache.core.entities.cart_item import CartItem


class IItemSerializer(Protocol):
    """Contract for encoding cart items for storage.

    Each item is encoded on its own so that it can be appended to a
    store list independently of the rest of the cart.
    """

    def encode(self, item: CartItem) -> bytes:
        """Encode a cart item to bytes.

        Raises:
            EncodingError: If the item cannot be encoded.
        """
        ...

    def decode(self, data: bytes) -> CartItem:
        """Decode bytes back into a cart item.

        Raises:
            DecodingError: If the data is not a valid encoded item.
        """
        ...
