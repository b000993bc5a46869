"""Convert and bases command wiring for radixconv CLI."""

from __future__ import annotations

import argparse
from typing import Any

from cli.result_format import failure_message, render_outcome
from conversion.converter import try_convert
from conversion.radix import AVAILABLE_BASES
from core.config import RadixConfig
from core.types import ConversionFailure, ConversionInput


def add_convert_command(subparsers: Any) -> None:
    """Register convert subcommand."""
    parser = subparsers.add_parser(
        "convert",
        help="Convert one value between bases 2, 8, 10, and 16",
    )
    parser.add_argument("value", help="Digit string; pass negatives after '--', e.g. -- -FF")
    parser.add_argument("--from-base", type=int, help="Source base (default: RADIX_FROM_BASE)")
    parser.add_argument("--to-base", type=int, help="Target base (default: RADIX_TO_BASE)")
    parser.add_argument(
        "--display",
        action="store_true",
        help="Print a result line such as 'Result: FF' instead of bare digits",
    )


def add_bases_command(subparsers: Any) -> None:
    """Register bases subcommand."""
    subparsers.add_parser("bases", help="List supported bases")


def run_convert_command(config: RadixConfig, args: argparse.Namespace) -> int:
    """Execute one conversion and print its output."""
    request = ConversionInput(
        text=args.value,
        from_base=config.default_from_base if args.from_base is None else args.from_base,
        to_base=config.default_to_base if args.to_base is None else args.to_base,
    )
    outcome = try_convert(request)
    if args.display:
        print(render_outcome(outcome))
        return 1 if isinstance(outcome, ConversionFailure) else 0
    if isinstance(outcome, ConversionFailure):
        print(f"conversion_error={failure_message(outcome.kind)}")
        return 1
    print(outcome.output)
    return 0


def run_bases_command() -> int:
    """Print supported bases as radix and name rows."""
    for option in AVAILABLE_BASES:
        print(f"{option.radix}\t{option.name}")
    return 0
