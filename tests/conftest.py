"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_RADIX_ENV_VARS = ("RADIX_FROM_BASE", "RADIX_TO_BASE", "RADIX_LOG_LEVEL")


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def clean_radix_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run each test against default configuration."""
    for variable_name in _RADIX_ENV_VARS:
        monkeypatch.delenv(variable_name, raising=False)
