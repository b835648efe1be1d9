"""Cart item entity."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CartItem:
    """A single line item in a cart.

    Quantity is expected to be non-negative but is not checked here;
    that is left to the cart service that owns the business rules.
    """

    product_id: str
    quantity: int

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of this item."""
        return {"product_id": self.product_id, "quantity": self.quantity}

    def check_types(self) -> None:
        """Check that the fields hold the declared types.

        Dataclasses do not enforce annotations; encoders call this so
        that only items ``from_dict`` accepts are stored.

        Raises:
            TypeError: If a field has the wrong type.
        """
        _check_fields(self.product_id, self.quantity)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CartItem":
        """Build an item from its wire representation.

        Args:
            data: Mapping with ``product_id`` and ``quantity`` fields.

        Returns:
            A new CartItem.

        Raises:
            KeyError: If a field is missing.
            TypeError: If a field has the wrong type.
        """
        product_id = data["product_id"]
        quantity = data["quantity"]
        _check_fields(product_id, quantity)
        return cls(product_id=product_id, quantity=quantity)


def _check_fields(product_id: Any, quantity: Any) -> None:
    if not isinstance(product_id, str):
        raise TypeError(
            f"product_id must be a string, got {type(product_id).__name__}"
        )
    # bool is an int subclass but never a valid quantity
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise TypeError(
            f"quantity must be an integer, got {type(quantity).__name__}"
        )
