"""Public radix conversion entry points.

Every conversion decodes into a SignedNumber and encodes from it;
there are no pairwise base-to-base shortcuts.
"""

from __future__ import annotations

from conversion.decoder import decode
from conversion.encoder import encode
from conversion.radix import validate_radix
from core.errors import ConversionError
from core.logging_config import get_logger
from core.types import ConversionFailure, ConversionInput, ConversionOutcome, ConversionSuccess

_LOGGER = get_logger(__name__)


def convert(text: str, from_base: int, to_base: int) -> str:
    """Convert a digit string between supported bases.

    Both bases are validated before the input is parsed.

    Args:
        text: Signed digit string in the source base.
        from_base: Source base (2, 8, 10, or 16).
        to_base: Target base (2, 8, 10, or 16).

    Returns:
        Canonical digit string in the target base.

    Raises:
        UnsupportedBaseError: If either base is unsupported.
        EmptyInputError: If the input has no digits.
        InvalidCharacterError: If the input has a non-hexadecimal character.
        DigitOutOfRangeError: If a digit is not valid for the source base.
    """
    validate_radix(from_base, "source")
    validate_radix(to_base, "target")
    number = decode(text, from_base)
    output = encode(number, to_base)
    _LOGGER.debug(
        "conversion_completed",
        from_base=from_base,
        to_base=to_base,
        negative=number.negative,
        output_digits=len(output),
    )
    return output


def try_convert(request: ConversionInput) -> ConversionOutcome:
    """Convert without raising for user-input failures.

    Args:
        request: Conversion arguments.

    Returns:
        ConversionSuccess with the output, or ConversionFailure carrying
        the error kind and message.
    """
    try:
        output = convert(request.text, request.from_base, request.to_base)
    except ConversionError as error:
        _LOGGER.debug("conversion_failed", kind=error.kind, error=str(error))
        return ConversionFailure(request=request, kind=error.kind, message=str(error))
    return ConversionSuccess(request=request, output=output)
