"""usagebar - Formatting helpers for usage quota displays.

This library turns raw usage data into display strings: countdowns to the
next quota reset, severity colors for utilization, and readable labels for
subscription plans and rate limit tiers.

Example:
    >>> from usagebar import Theme, plan_label, tier_label, utilization_color
    >>> plan_label("pro")
    'Pro'
    >>> tier_label("default_claude_max_5x")
    'Max 5x'
    >>> theme = Theme(error="red", warning="yellow", primary="cyan")
    >>> utilization_color(85, theme)
    'red'
"""

from usagebar.adapters import FixedClock, SystemClock
from usagebar.config import THEMES, load_theme, resolve_theme_name
from usagebar.core.exceptions import (
    ThemeNotFoundError,
    TimestampParseError,
    UsagebarError,
)
from usagebar.core.formatting import (
    format_reset_date_time,
    format_reset_time,
    format_reset_time_verbose,
    utilization_color,
)
from usagebar.core.labels import parse_tier, plan_label, tier_label
from usagebar.core.models import Countdown, Theme, TierMatch
from usagebar.core.ports import Clock, ThemePort
from usagebar.core.timestamps import countdown_until, parse_timestamp


__version__ = "0.1.0"

__all__ = [
    "THEMES",
    "Clock",
    "Countdown",
    "FixedClock",
    "SystemClock",
    "Theme",
    "ThemeNotFoundError",
    "ThemePort",
    "TierMatch",
    "TimestampParseError",
    "UsagebarError",
    "__version__",
    "countdown_until",
    "format_reset_date_time",
    "format_reset_time",
    "format_reset_time_verbose",
    "load_theme",
    "parse_tier",
    "parse_timestamp",
    "plan_label",
    "resolve_theme_name",
    "tier_label",
    "utilization_color",
]
