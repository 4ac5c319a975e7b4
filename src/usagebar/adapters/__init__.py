"""Adapters for usagebar ports."""

from usagebar.adapters.clock import FixedClock, SystemClock


__all__ = ["FixedClock", "SystemClock"]
