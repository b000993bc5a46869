"""Batch conversion execution.

This module resolves per-entry bases for a validated batch spec and runs
each conversion through the non-raising converter, preserving order.
"""

from __future__ import annotations

from dataclasses import dataclass

from conversion.converter import try_convert
from core.batch_spec import BatchEntry, BatchSpec, load_batch_spec
from core.config import RadixConfig
from core.errors import RadixInternalError
from core.logging_config import get_logger
from core.types import ConversionFailure, ConversionInput, ConversionOutcome

_LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class BatchReport:
    """Ordered outcomes for a complete batch run."""

    outcomes: tuple[ConversionOutcome, ...]

    @property
    def failed_count(self) -> int:
        """Count failed conversions in this report."""
        return sum(1 for outcome in self.outcomes if isinstance(outcome, ConversionFailure))

    @property
    def succeeded_count(self) -> int:
        """Count successful conversions in this report."""
        return len(self.outcomes) - self.failed_count


def run_batch(spec: BatchSpec, config: RadixConfig) -> BatchReport:
    """Run every conversion listed in a batch spec.

    Args:
        spec: Validated batch spec.
        config: Runtime config supplying fallback bases.

    Returns:
        Report with one outcome per entry, in spec order.
    """
    outcomes = tuple(try_convert(_build_request(entry, spec, config)) for entry in spec.entries)
    report = BatchReport(outcomes=outcomes)
    _LOGGER.info(
        "batch_conversion_completed",
        entry_count=len(outcomes),
        succeeded_count=report.succeeded_count,
        failed_count=report.failed_count,
    )
    return report


def execute_batch_file(spec_path: str, config: RadixConfig) -> BatchReport:
    """Load a YAML batch spec from disk and run it.

    Raises:
        RadixBatchSpecError: If the spec file is invalid.
    """
    return run_batch(load_batch_spec(spec_path), config)


def _build_request(entry: BatchEntry, spec: BatchSpec, config: RadixConfig) -> ConversionInput:
    """Resolve bases as entry, then spec defaults, then config defaults."""
    from_base = _first_present(
        entry.from_base, spec.defaults.from_base, config.default_from_base
    )
    to_base = _first_present(entry.to_base, spec.defaults.to_base, config.default_to_base)
    return ConversionInput(text=entry.value, from_base=from_base, to_base=to_base)


def _first_present(*candidates: int | None) -> int:
    for candidate in candidates:
        if candidate is not None:
            return candidate
    raise RadixInternalError("At least one base candidate must be provided.")
