"""Unit tests for the public converter entry points."""

from __future__ import annotations

import pytest

from conversion.converter import convert, try_convert
from conversion.encoder import encode_integer
from core.errors import (
    DigitOutOfRangeError,
    EmptyInputError,
    InvalidCharacterError,
    UnsupportedBaseError,
)
from core.types import ConversionFailure, ConversionInput, ConversionSuccess

SUPPORTED_BASES = (2, 8, 10, 16)


@pytest.mark.parametrize(
    ("text", "from_base", "to_base", "expected"),
    [
        ("FF", 16, 2, "11111111"),
        ("1010", 2, 16, "A"),
        ("255", 10, 16, "FF"),
        ("-FF", 16, 10, "-255"),
        ("-1010", 2, 10, "-10"),
        ("777", 8, 16, "1FF"),
        ("0001", 2, 10, "1"),
    ],
)
def test_convert_known_values(text: str, from_base: int, to_base: int, expected: str) -> None:
    """Known literal conversions should produce canonical output."""
    assert convert(text, from_base, to_base) == expected


@pytest.mark.parametrize("from_base", SUPPORTED_BASES)
@pytest.mark.parametrize("to_base", SUPPORTED_BASES)
def test_convert_zero_is_invariant(from_base: int, to_base: int) -> None:
    """Zero and negative zero should always convert to a lone 0."""
    assert convert("0", from_base, to_base) == convert("-0", from_base, to_base) == "0"


def test_convert_is_case_insensitive() -> None:
    """Lower and upper case hex input should convert identically."""
    assert convert("ff", 16, 10) == convert("FF", 16, 10)


def test_convert_tolerates_surrounding_whitespace() -> None:
    """Padded input should convert like its trimmed form."""
    assert convert("  FF  ", 16, 10) == convert("FF", 16, 10)


def test_convert_is_consistent_across_bases() -> None:
    """Any base rendering of a value should convert to any other rendering."""
    values = (0, 1, 7, 8, 255, 4096, 10**30 + 7)
    mismatches = [
        (value, from_base, to_base)
        for value in values
        for from_base in SUPPORTED_BASES
        for to_base in SUPPORTED_BASES
        if convert(encode_integer(value, from_base), from_base, to_base)
        != encode_integer(value, to_base)
    ]

    assert mismatches == []


def test_convert_empty_input_raises() -> None:
    """Empty input should raise the empty input error."""
    with pytest.raises(EmptyInputError):
        convert("", 16, 2)


def test_convert_invalid_character_raises() -> None:
    """Characters beyond F should raise the invalid character error."""
    with pytest.raises(InvalidCharacterError):
        convert("G1", 16, 10)


def test_convert_digit_out_of_range_raises() -> None:
    """Digits not allowed by the source base should be rejected."""
    with pytest.raises(DigitOutOfRangeError):
        convert("8", 2, 10)


def test_convert_unsupported_source_base_raises() -> None:
    """Unsupported source bases should be rejected."""
    with pytest.raises(UnsupportedBaseError):
        convert("FF", 3, 10)


def test_convert_checks_target_base_before_parsing() -> None:
    """An unsupported target base should win over an input error."""
    with pytest.raises(UnsupportedBaseError) as error_info:
        convert("", 16, 36)

    assert error_info.value.role == "target"


def test_try_convert_returns_success_variant() -> None:
    """Valid requests should return the success variant."""
    request = ConversionInput(text="-FF", from_base=16, to_base=10)

    outcome = try_convert(request)

    assert outcome == ConversionSuccess(request=request, output="-255")


@pytest.mark.parametrize(
    ("text", "from_base", "to_base", "expected_kind"),
    [
        ("FF", 3, 10, "unsupported_base"),
        ("FF", 16, 5, "unsupported_base"),
        ("", 16, 2, "empty_input"),
        ("-", 16, 2, "empty_input"),
        ("G1", 16, 10, "invalid_character"),
        ("8", 2, 10, "digit_out_of_range"),
    ],
)
def test_try_convert_returns_failure_kind(
    text: str,
    from_base: int,
    to_base: int,
    expected_kind: str,
) -> None:
    """Each user-input failure should map to exactly one error kind."""
    outcome = try_convert(ConversionInput(text=text, from_base=from_base, to_base=to_base))

    assert isinstance(outcome, ConversionFailure) and outcome.kind == expected_kind
