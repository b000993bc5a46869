"""Shared typed models.

This module defines immutable data models passed between the decoder,
encoder, converter, batch, and CLI layers to keep interfaces explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

from core.errors import ConversionErrorKind, RadixInternalError

Radix = Literal[2, 8, 10, 16]


@dataclass(frozen=True)
class SignedNumber:
    """Sign flag plus arbitrary-precision magnitude.

    Attributes:
        negative: True only for nonzero negative values.
        magnitude: Non-negative integer magnitude.
    """

    negative: bool
    magnitude: int

    def __post_init__(self) -> None:
        if self.magnitude < 0:
            raise RadixInternalError(
                f"SignedNumber magnitude must be non-negative, got {self.magnitude}."
            )
        if self.negative and self.magnitude == 0:
            raise RadixInternalError("SignedNumber zero cannot carry a negative sign.")

    @classmethod
    def from_int(cls, value: int) -> "SignedNumber":
        """Build a signed number from a plain integer."""
        return cls(negative=value < 0, magnitude=abs(value))

    @property
    def is_zero(self) -> bool:
        """Return whether the magnitude is zero."""
        return self.magnitude == 0

    def as_int(self) -> int:
        """Return the value as a plain signed integer."""
        return -self.magnitude if self.negative else self.magnitude


@dataclass(frozen=True)
class BaseOption:
    """Named radix shown to users when picking a base.

    Attributes:
        name: Display label, e.g. ``Binary (Base 2)``.
        radix: Numeric base.
    """

    name: str
    radix: Radix


@dataclass(frozen=True)
class ConversionInput:
    """Arguments for one conversion request.

    Attributes:
        text: Digit string as supplied by the caller.
        from_base: Source base.
        to_base: Target base.
    """

    text: str
    from_base: int
    to_base: int


@dataclass(frozen=True)
class ConversionSuccess:
    """Successful conversion result."""

    request: ConversionInput
    output: str


@dataclass(frozen=True)
class ConversionFailure:
    """Failed conversion result with its error category."""

    request: ConversionInput
    kind: ConversionErrorKind
    message: str


ConversionOutcome = Union[ConversionSuccess, ConversionFailure]
