"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import RadixConfig
from core.errors import RadixConfigError


def test_from_env_uses_defaults_when_unset() -> None:
    """Config should default to hex input, binary output, warning logs."""
    config = RadixConfig.from_env()

    assert (config.default_from_base, config.default_to_base, config.log_level) == (
        16,
        2,
        "WARNING",
    )


def test_from_env_reads_bases(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should read default bases from environment."""
    monkeypatch.setenv("RADIX_FROM_BASE", " 10 ")
    monkeypatch.setenv("RADIX_TO_BASE", "8")

    config = RadixConfig.from_env()

    assert (config.default_from_base, config.default_to_base) == (10, 8)


def test_from_env_normalizes_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Log level names should be case-insensitive."""
    monkeypatch.setenv("RADIX_LOG_LEVEL", "debug")

    assert RadixConfig.from_env().log_level == "DEBUG"


def test_from_env_raises_for_non_numeric_base(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a non-numeric base."""
    monkeypatch.setenv("RADIX_FROM_BASE", "hex")

    with pytest.raises(RadixConfigError):
        RadixConfig.from_env()


def test_from_env_raises_for_unsupported_base(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a base outside 2, 8, 10, 16."""
    monkeypatch.setenv("RADIX_TO_BASE", "36")

    with pytest.raises(RadixConfigError):
        RadixConfig.from_env()


def test_from_env_raises_for_unknown_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for an unknown log level."""
    monkeypatch.setenv("RADIX_LOG_LEVEL", "verbose")

    with pytest.raises(RadixConfigError):
        RadixConfig.from_env()
