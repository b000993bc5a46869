"""Core constants used across radixconv modules.

This module centralizes digit tables, supported radices, and defaults.
Keeping values here avoids magic literals in conversion logic.
"""

from __future__ import annotations

DIGIT_ALPHABET = "0123456789ABCDEF"
NEGATIVE_SIGN = "-"
ZERO_OUTPUT = "0"
SUPPORTED_RADICES = (2, 8, 10, 16)
RADIX_NAMES = {
    2: "Binary",
    8: "Octal",
    10: "Decimal",
    16: "Hexadecimal",
}
DEFAULT_FROM_BASE = 16
DEFAULT_TO_BASE = 2
DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
BATCH_SPEC_VERSION = 1
