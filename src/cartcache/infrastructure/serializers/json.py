"""JSON item serializer implementation."""

import json

from cartcache.core.entities.cart_item import CartItem
from cartcache.core.errors import DecodingError, EncodingError


class JsonItemSerializer:
    """JSON serializer for cart items.

    Encodes each item as a JSON object with its field names preserved,
    e.g. ``{"product_id": "OLJCESPC7Z", "quantity": 2}``.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Character encoding to use.
        """
        self._encoding = encoding

    def encode(self, item: CartItem) -> bytes:
        """Encode a cart item to bytes.

        Args:
            item: The cart item to encode.

        Returns:
            The JSON-encoded item.

        Raises:
            EncodingError: If the item cannot be encoded.
        """
        try:
            item.check_types()
            json_str = json.dumps(item.to_dict())
            return json_str.encode(self._encoding)
        except (AttributeError, TypeError, ValueError) as e:
            raise EncodingError(f"Failed to encode cart item: {e}") from e

    def decode(self, data: bytes) -> CartItem:
        """Decode bytes back into a cart item.

        Args:
            data: The JSON-encoded item.

        Returns:
            The decoded cart item.

        Raises:
            DecodingError: If the data is not a valid encoded item.
        """
        try:
            json_str = data.decode(self._encoding)
            value = json.loads(json_str)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodingError(f"Failed to decode cart item: {e}") from e

        if not isinstance(value, dict):
            raise DecodingError(
                f"Failed to decode cart item: expected an object, "
                f"got {type(value).__name__}"
            )
        try:
            return CartItem.from_dict(value)
        except KeyError as e:
            raise DecodingError(f"Failed to decode cart item: missing field {e}") from e
        except TypeError as e:
            raise DecodingError(f"Failed to decode cart item: {e}") from e
