"""Duration string parsing."""

import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation

# Unit -> microseconds
_UNITS: dict[str, Decimal] = {
    "ns": Decimal("0.001"),
    "us": Decimal(1),
    "µs": Decimal(1),  # U+00B5 micro sign
    "μs": Decimal(1),  # U+03BC greek mu
    "ms": Decimal(1000),
    "s": Decimal(1_000_000),
    "m": Decimal(60_000_000),
    "h": Decimal(3_600_000_000),
}

_COMPONENT = re.compile(r"(\d*\.?\d*)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str) -> timedelta:
    """Parse a duration string such as ``"30s"``, ``"1h30m"`` or ``"1.5h"``.

    The format is a possibly signed sequence of decimal numbers, each with
    a unit suffix. Valid units are ``ns``, ``us`` (or ``µs``), ``ms``,
    ``s``, ``m`` and ``h``. The bare string ``"0"`` is also accepted.
    Sub-microsecond precision is truncated.

    Args:
        text: The duration string.

    Returns:
        The parsed duration.

    Raises:
        ValueError: If the string is not a valid duration.
    """
    original = text
    sign = 1
    if text[:1] in ("+", "-"):
        if text[0] == "-":
            sign = -1
        text = text[1:]

    if text == "0":
        return timedelta(0)
    if not text:
        raise ValueError(f"invalid duration {original!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(text):
        match = _COMPONENT.match(text, pos)
        if match is None:
            raise ValueError(f"invalid duration {original!r}")
        number, unit = match.groups()
        # A component needs at least one digit: "s" and ".s" are invalid
        if not number.strip("."):
            raise ValueError(f"invalid duration {original!r}")
        try:
            value = Decimal(number)
        except InvalidOperation as e:
            raise ValueError(f"invalid duration {original!r}") from e
        total += value * _UNITS[unit]
        pos = match.end()

    try:
        return timedelta(microseconds=int(total) * sign)
    except OverflowError as e:
        raise ValueError(f"invalid duration {original!r}: out of range") from e
