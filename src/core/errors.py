"""radixconv exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Conversion failures carry a stable ``kind`` so callers can branch on
a closed set of categories instead of exception class names.
"""

from __future__ import annotations

from typing import ClassVar, Literal

ConversionErrorKind = Literal[
    "unsupported_base",
    "empty_input",
    "invalid_character",
    "digit_out_of_range",
]
CONVERSION_ERROR_KINDS: tuple[ConversionErrorKind, ...] = (
    "unsupported_base",
    "empty_input",
    "invalid_character",
    "digit_out_of_range",
)


class RadixError(Exception):
    """Base exception for all radixconv failures."""


class RadixConfigError(RadixError):
    """Raised for invalid runtime configuration."""


class RadixBatchSpecError(RadixError):
    """Raised for invalid or unsupported batch spec files."""


class RadixInternalError(RadixError):
    """Raised when an internal precondition is violated by calling code."""


class ConversionError(RadixError):
    """Base class for user-input conversion failures."""

    kind: ClassVar[ConversionErrorKind]


class UnsupportedBaseError(ConversionError):
    """Raised when a source or target base is not 2, 8, 10, or 16."""

    kind: ClassVar[ConversionErrorKind] = "unsupported_base"

    def __init__(self, base: object, role: str = "source") -> None:
        self.base = base
        self.role = role
        super().__init__(
            f"Unsupported {role} base {base!r}. Use one of: 2, 8, 10, 16."
        )


class EmptyInputError(ConversionError):
    """Raised when no digits remain after trimming and sign removal."""

    kind: ClassVar[ConversionErrorKind] = "empty_input"

    def __init__(self) -> None:
        super().__init__("Empty input: provide at least one digit.")


class InvalidCharacterError(ConversionError):
    """Raised when a character is not a hexadecimal digit."""

    kind: ClassVar[ConversionErrorKind] = "invalid_character"

    def __init__(self, character: str, position: int | None = None) -> None:
        self.character = character
        self.position = position
        location = "" if position is None else f" at position {position}"
        super().__init__(
            f"Invalid character {character!r}{location}. "
            "Digits must be 0-9 or A-F."
        )


class DigitOutOfRangeError(ConversionError):
    """Raised when a valid digit is not allowed in the source base."""

    kind: ClassVar[ConversionErrorKind] = "digit_out_of_range"

    def __init__(self, character: str, value: int, base: int) -> None:
        self.character = character
        self.value = value
        self.base = base
        super().__init__(
            f"Digit {character!r} (value {value}) is not valid for base {base}. "
            f"Base {base} digits range from 0 to {base - 1}."
        )
