"""Digit codec for hexadecimal-range digits.

This module maps single characters to digit values 0-15 and back.
Input lookup is case-insensitive and ASCII-only; output is uppercase.
"""

from __future__ import annotations

from core.constants import DIGIT_ALPHABET
from core.errors import InvalidCharacterError, RadixInternalError

_DIGIT_VALUES: dict[str, int] = {
    **{character: value for value, character in enumerate(DIGIT_ALPHABET)},
    **{character.lower(): value for value, character in enumerate(DIGIT_ALPHABET)},
}


def value_of(character: str, position: int | None = None) -> int:
    """Return the digit value of one character.

    Args:
        character: Single character ``0-9``, ``A-F`` or ``a-f``.
        position: Optional index reported when the character is invalid.

    Returns:
        Digit value in [0, 15].

    Raises:
        InvalidCharacterError: If the character is not a hexadecimal digit.
    """
    value = _DIGIT_VALUES.get(character)
    if value is None:
        raise InvalidCharacterError(character, position)
    return value


def char_of(value: int) -> str:
    """Return the uppercase digit character for a value.

    Args:
        value: Digit value in [0, 15].

    Returns:
        Uppercase digit character.

    Raises:
        RadixInternalError: If value is outside the digit range.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise RadixInternalError(f"Digit value must be an integer, got {value!r}.")
    if not 0 <= value < len(DIGIT_ALPHABET):
        raise RadixInternalError(f"Digit value {value} is outside the range 0-15.")
    return DIGIT_ALPHABET[value]
