"""Digit string decoder.

This module parses a signed digit string in a supported base into a
SignedNumber using Horner accumulation over exact Python integers.
"""

from __future__ import annotations

from conversion.digit_codec import value_of
from conversion.radix import validate_radix
from core.constants import NEGATIVE_SIGN
from core.errors import DigitOutOfRangeError, EmptyInputError
from core.types import SignedNumber


def decode(text: str, base: int) -> SignedNumber:
    """Decode a signed digit string.

    Surrounding whitespace is ignored and one leading ``-`` marks a
    negative value. An all-zero digit run decodes to non-negative zero
    even when prefixed with ``-``.

    Args:
        text: Digit string, e.g. ``"-ff"``.
        base: Source base.

    Returns:
        Decoded signed number.

    Raises:
        UnsupportedBaseError: If base is unsupported.
        EmptyInputError: If no digits remain after trimming and sign removal.
        InvalidCharacterError: If a character is not a hexadecimal digit.
        DigitOutOfRangeError: If a digit value is not below the base.
    """
    radix = validate_radix(base, "source")
    negative, digits = _split_sign(text.strip())
    if not digits:
        raise EmptyInputError()
    magnitude = 0
    for position, character in enumerate(digits):
        value = value_of(character, position)
        if value >= radix:
            raise DigitOutOfRangeError(character, value, radix)
        magnitude = magnitude * radix + value
    return SignedNumber(negative=negative and magnitude != 0, magnitude=magnitude)


def _split_sign(stripped_text: str) -> tuple[bool, str]:
    """Separate an optional leading minus sign from the digit run."""
    if stripped_text.startswith(NEGATIVE_SIGN):
        return True, stripped_text[len(NEGATIVE_SIGN):]
    return False, stripped_text
