"""Supported radix validation and catalog."""

from __future__ import annotations

from core.constants import RADIX_NAMES, SUPPORTED_RADICES
from core.errors import UnsupportedBaseError
from core.types import BaseOption

AVAILABLE_BASES: tuple[BaseOption, ...] = tuple(
    BaseOption(name=f"{RADIX_NAMES[radix]} (Base {radix})", radix=radix)
    for radix in SUPPORTED_RADICES
)


def validate_radix(base: object, role: str = "source") -> int:
    """Check that a base is one of the supported radices.

    Args:
        base: Candidate base value.
        role: ``source`` or ``target``, used in the error message.

    Returns:
        The base as an integer.

    Raises:
        UnsupportedBaseError: If base is not 2, 8, 10, or 16.
    """
    if isinstance(base, bool) or not isinstance(base, int):
        raise UnsupportedBaseError(base, role)
    if base not in SUPPORTED_RADICES:
        raise UnsupportedBaseError(base, role)
    return base


def base_option_for(radix: object) -> BaseOption:
    """Return the named catalog entry for a radix.

    Raises:
        UnsupportedBaseError: If radix is not supported.
    """
    validated = validate_radix(radix)
    for option in AVAILABLE_BASES:
        if option.radix == validated:
            return option
    raise UnsupportedBaseError(radix)
