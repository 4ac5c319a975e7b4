"""Timestamp parsing and countdown arithmetic.

Malformed timestamps are treated as absent: the lenient parser returns
None so every formatter falls back to its "unknown" sentinel instead of
rendering garbage. Pass ``strict=True`` to get a TimestampParseError.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from usagebar.core.exceptions import TimestampParseError
from usagebar.core.models import Countdown


if TYPE_CHECKING:
    from usagebar.core.ports import Clock

logger = logging.getLogger(__name__)

Timestamp = str | datetime | None

_ONE_MINUTE = timedelta(minutes=1)

# Date-only forms denote UTC midnight; date-times without an offset are local
_DATE_ONLY = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_timestamp(value: Timestamp, *, strict: bool = False) -> datetime | None:
    """Parse a timestamp into an aware datetime in local time.

    Args:
        value: ISO-8601 string (a trailing ``Z`` is accepted), datetime, or
            None. Empty strings are treated like None.
        strict: Raise instead of returning None for malformed input.

    Returns:
        Aware local datetime, or None if the value is absent or malformed.
        Date-only strings ("2025-06-16") are UTC midnight; other naive
        inputs are interpreted as local time.

    Raises:
        TimestampParseError: If strict and the value cannot be parsed.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.astimezone()

    try:
        text = value.strip()
        parsed = datetime.fromisoformat(text)
    except (AttributeError, TypeError, ValueError) as e:
        if strict:
            raise TimestampParseError(value, cause=e) from e
        logger.debug("Ignoring malformed timestamp %r: %s", value, e)
        return None
    if _DATE_ONLY.fullmatch(text):
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone()


def current_time(clock: Clock | None = None) -> datetime:
    """Read the current local time from clock, or the system clock."""
    if clock is None:
        from usagebar.adapters.clock import SystemClock

        clock = SystemClock()
    return clock.now().astimezone()


def countdown_until(
    value: Timestamp,
    clock: Clock | None = None,
    *,
    strict: bool = False,
) -> Countdown | None:
    """Compute the whole hours and minutes left until a timestamp.

    Args:
        value: Reset timestamp (see parse_timestamp).
        clock: Clock to read "now" from. Defaults to the system clock.
        strict: Raise on malformed timestamps instead of returning None.

    Returns:
        Countdown, or None if the timestamp is absent or malformed.
        Minutes are floored; a target at or before now is ``elapsed``.
    """
    target = parse_timestamp(value, strict=strict)
    if target is None:
        return None

    diff = target - current_time(clock)
    if diff <= timedelta(0):
        return Countdown(hours=0, minutes=0, elapsed=True)

    hours, minutes = divmod(diff // _ONE_MINUTE, 60)
    return Countdown(hours=hours, minutes=minutes)
