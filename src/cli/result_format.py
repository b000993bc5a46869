"""User-facing rendering of conversion outcomes.

This module maps every conversion error kind to the short message shown
to end users, and renders outcomes in the classic result-line form.
"""

from __future__ import annotations

from core.errors import ConversionErrorKind
from core.types import ConversionFailure, ConversionOutcome

INVALID_INPUT_MESSAGE = "Invalid input"
FAILURE_MESSAGES: dict[ConversionErrorKind, str] = {
    "unsupported_base": "Base must be 2, 8, 10, or 16.",
    "empty_input": f"{INVALID_INPUT_MESSAGE} (Empty)",
    "invalid_character": INVALID_INPUT_MESSAGE,
    "digit_out_of_range": INVALID_INPUT_MESSAGE,
}


def failure_message(kind: ConversionErrorKind) -> str:
    """Return the user-facing message for an error kind."""
    return FAILURE_MESSAGES[kind]


def render_outcome(outcome: ConversionOutcome) -> str:
    """Render an outcome as a single display line.

    Args:
        outcome: Conversion success or failure.

    Returns:
        ``Result: <output>`` on success, ``Error: <message>`` for an
        unsupported base, and ``Result: <message>`` for invalid input.
    """
    if isinstance(outcome, ConversionFailure):
        message = failure_message(outcome.kind)
        prefix = "Error" if outcome.kind == "unsupported_base" else "Result"
        return f"{prefix}: {message}"
    return f"Result: {outcome.output}"
