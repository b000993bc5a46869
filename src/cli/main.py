"""radixconv CLI entry points.

This module exposes conversion commands for single values and batch files.
It maps argparse commands onto converter calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Sequence

from cli.batch_command import add_batch_command, run_batch_command
from cli.convert_command import (
    add_bases_command,
    add_convert_command,
    run_bases_command,
    run_convert_command,
)
from core.config import RadixConfig, parse_log_level
from core.constants import SUPPORTED_LOG_LEVELS
from core.errors import RadixConfigError
from core.logging_config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="radixconv",
        description="Base converter (2, 8, 10, 16)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=SUPPORTED_LOG_LEVELS,
        help="Override RADIX_LOG_LEVEL for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_convert_command(subparsers)
    add_bases_command(subparsers)
    add_batch_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the radixconv CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args.log_level)
    except RadixConfigError as error:
        print(f"config_error={error}")
        return 1
    configure_logging(config.log_level)
    if args.command == "convert":
        return run_convert_command(config, args)
    if args.command == "bases":
        return run_bases_command()
    if args.command == "batch":
        return run_batch_command(config, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(log_level: str | None) -> RadixConfig:
    """Build config with optional log-level override.

    Args:
        log_level: Optional override level name.

    Returns:
        Validated runtime config.
    """
    config = RadixConfig.from_env()
    if log_level:
        config = replace(config, log_level=parse_log_level(log_level))
    return config
