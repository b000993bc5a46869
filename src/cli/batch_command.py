"""Batch CLI command wiring.

This module registers the batch subcommand and delegates execution to the
shared batch runner used by CLI and SDK entry points.
"""

from __future__ import annotations

import argparse
from typing import Any

from cli.result_format import failure_message
from conversion.batch_runner import execute_batch_file
from core.config import RadixConfig
from core.errors import RadixBatchSpecError
from core.types import ConversionFailure, ConversionOutcome


def add_batch_command(subparsers: Any) -> None:
    """Register batch subcommand."""
    parser = subparsers.add_parser(
        "batch",
        help="Run conversions listed in a YAML batch spec",
    )
    parser.add_argument("spec_file", help="Path to YAML batch spec file")


def run_batch_command(config: RadixConfig, args: argparse.Namespace) -> int:
    """Handle batch command invocation."""
    try:
        report = execute_batch_file(args.spec_file, config)
    except RadixBatchSpecError as error:
        print(f"batch_error={error}")
        return 1
    for outcome in report.outcomes:
        print(_format_row(outcome))
    return 0 if report.failed_count == 0 else 1


def _format_row(outcome: ConversionOutcome) -> str:
    request = outcome.request
    if isinstance(outcome, ConversionFailure):
        result = f"error={failure_message(outcome.kind)}"
    else:
        result = outcome.output
    return f"{_escape_cell(request.text)}\t{request.from_base}\t{request.to_base}\t{result}"


def _escape_cell(text: str) -> str:
    """Escape control characters so each entry stays on one tab-separated row."""
    return "".join(
        character if character.isprintable() else repr(character)[1:-1] for character in text
    )
