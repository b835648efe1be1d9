"""Tests for JsonItemSerializer."""

import json

import pytest

from cartcache.core.entities import CartItem
from cartcache.core.errors import DecodingError, EncodingError, SerializationError
from cartcache.infrastructure.serializers.json import JsonItemSerializer


class TestJsonItemSerializer:
    """Tests for JsonItemSerializer."""

    @pytest.fixture
    def serializer(self) -> JsonItemSerializer:
        """Create a serializer for testing."""
        return JsonItemSerializer()

    def test_encode_preserves_field_names(self, serializer: JsonItemSerializer) -> None:
        """Test that the encoded item is a JSON object with named fields."""
        result = serializer.encode(CartItem("OLJCESPC7Z", 2))

        assert isinstance(result, bytes)
        assert json.loads(result) == {"product_id": "OLJCESPC7Z", "quantity": 2}

    def test_decode(self, serializer: JsonItemSerializer) -> None:
        """Test decoding a stored item."""
        result = serializer.decode(b'{"product_id": "66VCHSJNUP", "quantity": 3}')

        assert result == CartItem("66VCHSJNUP", 3)

    @pytest.mark.parametrize(
        "item",
        [
            CartItem("OLJCESPC7Z", 0),
            CartItem("", 1),
            CartItem("café-☕", 12),
            CartItem('quote"and\\slash', 10**12),
        ],
    )
    def test_roundtrip(self, serializer: JsonItemSerializer, item: CartItem) -> None:
        """Test that decode reverses encode."""
        assert serializer.decode(serializer.encode(item)) == item

    def test_encode_nan_quantity(self, serializer: JsonItemSerializer) -> None:
        """Test that a non-finite quantity cannot be encoded."""
        with pytest.raises(EncodingError):
            serializer.encode(CartItem("A", float("nan")))  # type: ignore[arg-type]

    def test_encode_unserializable_product_id(
        self, serializer: JsonItemSerializer
    ) -> None:
        """Test that a non-JSON product id cannot be encoded."""
        with pytest.raises(EncodingError):
            serializer.encode(CartItem(object(), 1))  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "item",
        [
            CartItem("A", 1.5),  # type: ignore[arg-type]
            CartItem("A", True),
            CartItem("A", "2"),  # type: ignore[arg-type]
            CartItem(7, 1),  # type: ignore[arg-type]
        ],
    )
    def test_encode_rejects_what_decode_rejects(
        self, serializer: JsonItemSerializer, item: CartItem
    ) -> None:
        """Test that items with the wrong field types cannot be encoded."""
        with pytest.raises(EncodingError, match="must be"):
            serializer.encode(item)

    def test_encode_non_item(self, serializer: JsonItemSerializer) -> None:
        """Test that arbitrary objects are rejected."""
        with pytest.raises(EncodingError):
            serializer.encode({"product_id": "A", "quantity": 1})  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "data",
        [
            b"not valid json",
            b"\xff\xfe",
            b"[1, 2]",
            b'"OLJCESPC7Z"',
            b'{"product_id": "A"}',
            b'{"quantity": 1}',
            b'{"product_id": "A", "quantity": "2"}',
        ],
    )
    def test_decode_invalid(self, serializer: JsonItemSerializer, data: bytes) -> None:
        """Test that malformed data raises DecodingError."""
        with pytest.raises(DecodingError):
            serializer.decode(data)

    def test_errors_share_base(self) -> None:
        """Test that both error kinds are serialization errors."""
        assert issubclass(EncodingError, SerializationError)
        assert issubclass(DecodingError, SerializationError)

    def test_custom_encoding(self) -> None:
        """Test serializer with custom encoding."""
        serializer = JsonItemSerializer(encoding="utf-16")
        item = CartItem("OLJCESPC7Z", 1)

        result = serializer.encode(item)

        assert result.decode("utf-16").startswith("{")
        assert serializer.decode(result) == item
