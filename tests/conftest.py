"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from usagebar.adapters.clock import FixedClock
from usagebar.core.models import Theme


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core formatting, models, and ports")
    config.addinivalue_line("markers", "config: Theme presets and resolution")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


# Mid-June noon, local time: far from any DST transition
FROZEN_NOW = datetime(2025, 6, 15, 12, 0, 0)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock frozen at FROZEN_NOW in the host's local timezone."""
    return FixedClock(FROZEN_NOW)


@pytest.fixture
def theme() -> Theme:
    """Theme with easily recognizable color values."""
    return Theme(error="red", warning="yellow", primary="blue")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove theme selection from the environment."""
    monkeypatch.delenv("USAGEBAR_THEME", raising=False)
