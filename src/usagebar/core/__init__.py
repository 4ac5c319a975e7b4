"""Core domain module for usagebar.

This module contains the pure formatting functions, value objects and
port definitions. It has no I/O dependencies and can be tested in isolation.
"""

from usagebar.core.formatting import (
    format_reset_date_time,
    format_reset_time,
    format_reset_time_verbose,
    utilization_color,
)
from usagebar.core.labels import parse_tier, plan_label, tier_label
from usagebar.core.models import Countdown, Theme, TierMatch
from usagebar.core.ports import Clock, ThemePort


__all__ = [
    "Clock",
    "Countdown",
    "Theme",
    "ThemePort",
    "TierMatch",
    "format_reset_date_time",
    "format_reset_time",
    "format_reset_time_verbose",
    "parse_tier",
    "plan_label",
    "tier_label",
    "utilization_color",
]
