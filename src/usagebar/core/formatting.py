"""Formatting utilities for reset times and utilization."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from usagebar.core.timestamps import countdown_until, current_time, parse_timestamp


if TYPE_CHECKING:
    from usagebar.core.ports import Clock, ThemePort
    from usagebar.core.timestamps import Timestamp

ColorT = TypeVar("ColorT")

ERROR_THRESHOLD = 80
WARNING_THRESHOLD = 50

# Indexed by day of week with 0 = Sunday
WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def format_reset_time(timestamp: Timestamp, clock: Clock | None = None) -> str:
    """Format the time left until a reset in compact form.

    Args:
        timestamp: Reset timestamp, or None/empty if unknown.
        clock: Clock to read "now" from. Defaults to the system clock.

    Returns:
        - unknown or malformed -> "--"
        - at or before now -> "now"
        - otherwise "1h 30m", or "45m" when under an hour
    """
    countdown = countdown_until(timestamp, clock)
    if countdown is None:
        return "--"
    if countdown.elapsed:
        return "now"
    return countdown.compact()


def format_reset_time_verbose(timestamp: Timestamp, clock: Clock | None = None) -> str:
    """Format the time left until a reset as a sentence.

    Args:
        timestamp: Reset timestamp, or None/empty if unknown.
        clock: Clock to read "now" from. Defaults to the system clock.

    Returns:
        - unknown or malformed -> "N/A"
        - at or before now -> "Resetting now"
        - otherwise "Resets in 1h 30m", or "Resets in 45m"
    """
    countdown = countdown_until(timestamp, clock)
    if countdown is None:
        return "N/A"
    if countdown.elapsed:
        return "Resetting now"
    return f"Resets in {countdown.compact()}"


def format_reset_date_time(timestamp: Timestamp, clock: Clock | None = None) -> str:
    """Format the absolute local date and time of a reset.

    Args:
        timestamp: Reset timestamp, or None/empty if unknown.
        clock: Clock to read "now" from. Defaults to the system clock.

    Returns:
        - unknown or malformed -> "N/A"
        - at or before now -> "Resetting now"
        - otherwise e.g. "Resets Wed, 03.11 at 09:05" (24-hour clock)
    """
    target = parse_timestamp(timestamp)
    if target is None:
        return "N/A"
    if target <= current_time(clock):
        return "Resetting now"

    weekday = WEEKDAYS[target.isoweekday() % 7]
    return f"Resets {weekday}, {target:%d.%m} at {target:%H:%M}"


def utilization_color(percentage: float, theme: ThemePort[ColorT]) -> ColorT:
    """Map a utilization percentage to a theme color.

    Args:
        percentage: Share of the quota used, nominally 0-100. Values outside
            that range are not clamped.
        theme: Object exposing error, warning and primary colors.

    Returns:
        - >= 80 -> theme.error
        - >= 50 -> theme.warning
        - otherwise (including NaN) -> theme.primary
    """
    if percentage >= ERROR_THRESHOLD:
        return theme.error
    if percentage >= WARNING_THRESHOLD:
        return theme.warning
    return theme.primary
