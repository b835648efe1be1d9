"""Result of a list range read."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ListRange:
    """Tagged result of reading a range from a store list.

    ``found`` is False when the key does not exist in the store. A found
    range may still hold zero elements.
    """

    found: bool
    values: tuple[bytes, ...] = ()

    @classmethod
    def missing(cls) -> "ListRange":
        """Result for a key that does not exist."""
        return cls(found=False)

    @classmethod
    def of(cls, values: list[bytes] | tuple[bytes, ...]) -> "ListRange":
        """Result for an existing key holding ``values``."""
        return cls(found=True, values=tuple(values))

    def __len__(self) -> int:
        return len(self.values)
