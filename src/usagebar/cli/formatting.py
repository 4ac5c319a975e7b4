"""Shared formatting helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer
from rich.console import Console
from rich.text import Text

from usagebar.core.exceptions import UsagebarError
from usagebar.core.formatting import format_reset_time_verbose, utilization_color
from usagebar.core.labels import plan_label, tier_label


if TYPE_CHECKING:
    from usagebar.core.models import Theme
    from usagebar.core.ports import Clock


SEPARATOR = " · "


def _console() -> Console:
    """Console bound to the current stdout, without auto-highlighting."""
    return Console(highlight=False)


def _exit_with_error(error: UsagebarError) -> typer.Exit:
    """Report a library error on stderr and build the exit to raise."""
    typer.echo(f"Error: {error}", err=True)
    if error.recovery_hint:
        typer.echo(f"Hint: {error.recovery_hint}", err=True)
    return typer.Exit(1)


def _make_clock(now: str | None) -> Clock | None:
    """Build a frozen clock from a --now option, or None for system time.

    Raises:
        TimestampParseError: If now is not a valid timestamp.
    """
    if now is None:
        return None
    from usagebar.adapters.clock import FixedClock
    from usagebar.core.exceptions import TimestampParseError
    from usagebar.core.timestamps import parse_timestamp

    instant = parse_timestamp(now, strict=True)
    if instant is None:
        # An explicit but empty --now is invalid, not "use system time"
        raise TimestampParseError(now)
    return FixedClock(instant)


def _format_percentage(percentage: float) -> str:
    """Format percentage without a trailing .0 for whole numbers."""
    if float(percentage).is_integer():
        return f"{int(percentage)}%"
    return f"{percentage:.1f}%"


def _format_utilization(percentage: float, theme: Theme) -> Text:
    """Format a utilization percentage styled with its theme color.

    Args:
        percentage: Share of the quota used.
        theme: Theme whose colors are rich style strings.

    Returns:
        Rich Text such as "85%" styled with theme.error.
    """
    return Text(_format_percentage(percentage), style=utilization_color(percentage, theme))


def _format_plan(subscription_type: str | None, tier: str | None) -> str:
    """Combine plan and tier labels, e.g. "Max (Max 5x)"."""
    plan = plan_label(subscription_type)
    tier_text = tier_label(tier)
    if tier_text:
        return f"{plan} ({tier_text})"
    return plan


def _format_status_line(
    percentage: float,
    reset_at: str | None,
    theme: Theme,
    *,
    subscription_type: str | None = None,
    tier: str | None = None,
    clock: Clock | None = None,
) -> Text:
    """Build the one-line usage summary.

    Plan information is only included when a plan or tier is given.
    """
    parts: list[Text | str] = []
    if subscription_type or tier:
        parts.append(_format_plan(subscription_type, tier))
    parts.append(_format_utilization(percentage, theme))
    parts.append(format_reset_time_verbose(reset_at, clock))

    line = Text()
    for i, part in enumerate(parts):
        if i:
            line.append(SEPARATOR)
        line.append(part)
    return line
