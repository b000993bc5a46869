"""Public SDK surface for radixconv.

This module provides a stable import path for library users.
It re-exports the converter entry points and typed models.
"""

from __future__ import annotations

from conversion.batch_runner import BatchReport, execute_batch_file, run_batch
from conversion.converter import convert, try_convert
from conversion.decoder import decode
from conversion.digit_codec import char_of, value_of
from conversion.encoder import encode, encode_integer
from conversion.radix import AVAILABLE_BASES, base_option_for, validate_radix
from core.batch_spec import BatchSpec, load_batch_spec
from core.config import RadixConfig
from core.errors import (
    ConversionError,
    DigitOutOfRangeError,
    EmptyInputError,
    InvalidCharacterError,
    RadixError,
    UnsupportedBaseError,
)
from core.types import (
    BaseOption,
    ConversionFailure,
    ConversionInput,
    ConversionOutcome,
    ConversionSuccess,
    SignedNumber,
)

__all__ = [
    "AVAILABLE_BASES",
    "BaseOption",
    "BatchReport",
    "BatchSpec",
    "ConversionError",
    "ConversionFailure",
    "ConversionInput",
    "ConversionOutcome",
    "ConversionSuccess",
    "DigitOutOfRangeError",
    "EmptyInputError",
    "InvalidCharacterError",
    "RadixConfig",
    "RadixError",
    "SignedNumber",
    "UnsupportedBaseError",
    "base_option_for",
    "char_of",
    "convert",
    "decode",
    "encode",
    "encode_integer",
    "execute_batch_file",
    "load_batch_spec",
    "run_batch",
    "try_convert",
    "validate_radix",
]
