"""Digit string encoder.

This module renders a SignedNumber as a canonical digit string:
uppercase, no leading zeros, and a ``-`` prefix only when nonzero.
"""

from __future__ import annotations

from conversion.digit_codec import char_of
from conversion.radix import validate_radix
from core.constants import NEGATIVE_SIGN, ZERO_OUTPUT
from core.types import SignedNumber


def encode(number: SignedNumber, base: int) -> str:
    """Encode a signed number in the target base.

    Args:
        number: Value to render.
        base: Target base.

    Returns:
        Canonical digit string.

    Raises:
        UnsupportedBaseError: If base is unsupported.
    """
    radix = validate_radix(base, "target")
    if number.is_zero:
        return ZERO_OUTPUT
    remaining = number.magnitude
    digits: list[str] = []
    while remaining > 0:
        remaining, remainder = divmod(remaining, radix)
        digits.append(char_of(remainder))
    rendered = "".join(reversed(digits))
    return f"{NEGATIVE_SIGN}{rendered}" if number.negative else rendered


def encode_integer(value: int, base: int) -> str:
    """Encode a plain signed integer in the target base."""
    return encode(SignedNumber.from_int(value), base)
