"""Runtime configuration model for radixconv.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_FROM_BASE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TO_BASE,
    SUPPORTED_LOG_LEVELS,
    SUPPORTED_RADICES,
)
from core.errors import RadixConfigError


@dataclass(frozen=True)
class RadixConfig:
    """Validated runtime configuration.

    Attributes:
        default_from_base: Source base used when a caller omits one.
        default_to_base: Target base used when a caller omits one.
        log_level: Minimum structured log level name.
    """

    default_from_base: int
    default_to_base: int
    log_level: str

    @classmethod
    def from_env(cls) -> "RadixConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RadixConfigError: If environment values are invalid.
        """
        from_base = _parse_base(
            "RADIX_FROM_BASE", os.getenv("RADIX_FROM_BASE", str(DEFAULT_FROM_BASE))
        )
        to_base = _parse_base("RADIX_TO_BASE", os.getenv("RADIX_TO_BASE", str(DEFAULT_TO_BASE)))
        log_level = parse_log_level(os.getenv("RADIX_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(default_from_base=from_base, default_to_base=to_base, log_level=log_level)


def parse_log_level(raw_value: str) -> str:
    """Normalize and validate a log level name.

    Args:
        raw_value: Level name in any case.

    Returns:
        Uppercase level name.

    Raises:
        RadixConfigError: If the level is not supported.
    """
    normalized_level = raw_value.strip().upper()
    if normalized_level not in SUPPORTED_LOG_LEVELS:
        supported = ", ".join(SUPPORTED_LOG_LEVELS)
        raise RadixConfigError(
            f"Invalid RADIX_LOG_LEVEL value '{raw_value}'. Choose one of: {supported}."
        )
    return normalized_level


def _parse_base(variable_name: str, raw_value: str) -> int:
    """Parse a default base environment value.

    Args:
        variable_name: Environment variable name for error messages.
        raw_value: Raw string from environment.

    Returns:
        Parsed supported base.

    Raises:
        RadixConfigError: If value is not an integer or not supported.
    """
    try:
        base = int(raw_value.strip())
    except ValueError as error:
        raise RadixConfigError(
            f"Invalid {variable_name} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {variable_name} to 2, 8, 10, or 16."
        ) from error
    if base not in SUPPORTED_RADICES:
        raise RadixConfigError(
            f"Unsupported {variable_name} value {base}. Set {variable_name} to 2, 8, 10, or 16."
        )
    return base
