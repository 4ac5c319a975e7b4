"""Unit tests for port interfaces and their adapters."""

from datetime import datetime, timedelta
from types import SimpleNamespace

import pytest


@pytest.mark.core
@pytest.mark.tra("Port.Clock")
@pytest.mark.tier(0)
def test_system_clock_satisfies_clock_port():
    """SystemClock should implement Clock."""
    from usagebar.adapters.clock import SystemClock
    from usagebar.core.ports import Clock

    assert isinstance(SystemClock(), Clock)


@pytest.mark.core
@pytest.mark.tra("Port.Clock")
@pytest.mark.tier(0)
def test_fixed_clock_satisfies_clock_port():
    """FixedClock should implement Clock."""
    from usagebar.adapters.clock import FixedClock
    from usagebar.core.ports import Clock

    assert isinstance(FixedClock(datetime(2025, 1, 1)), Clock)


@pytest.mark.core
@pytest.mark.tra("Port.Clock")
@pytest.mark.tier(0)
def test_system_clock_returns_aware_time():
    """SystemClock.now() should carry a timezone."""
    from usagebar.adapters.clock import SystemClock

    assert SystemClock().now().tzinfo is not None


@pytest.mark.core
@pytest.mark.tra("Port.Clock")
@pytest.mark.tier(0)
def test_fixed_clock_is_frozen_until_advanced():
    """FixedClock only moves when advanced."""
    from usagebar.adapters.clock import FixedClock

    clock = FixedClock(datetime(2025, 6, 15, 12, 0))
    start = clock.now()

    assert clock.now() == start
    clock.advance(minutes=5)
    assert clock.now() - start == timedelta(minutes=5)


@pytest.mark.core
@pytest.mark.tra("Port.ThemePort")
@pytest.mark.tier(0)
def test_theme_satisfies_theme_port():
    """Theme should implement ThemePort."""
    from usagebar.core.models import Theme
    from usagebar.core.ports import ThemePort

    assert isinstance(Theme(error="r", warning="y", primary="b"), ThemePort)


@pytest.mark.core
@pytest.mark.tra("Port.ThemePort")
@pytest.mark.tier(0)
def test_structural_theme_satisfies_theme_port():
    """Any object with the three colors should implement ThemePort."""
    from usagebar.core.ports import ThemePort

    assert isinstance(SimpleNamespace(error=1, warning=2, primary=3), ThemePort)


@pytest.mark.core
@pytest.mark.tra("Port.ThemePort")
@pytest.mark.tier(0)
def test_incomplete_theme_does_not_satisfy_theme_port():
    """Objects missing a color should not implement ThemePort."""
    from usagebar.core.ports import ThemePort

    assert not isinstance(SimpleNamespace(error=1, warning=2), ThemePort)
