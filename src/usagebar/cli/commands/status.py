"""Status command for CLI."""

from __future__ import annotations

import typer

from usagebar.cli.formatting import (
    _console,
    _exit_with_error,
    _format_status_line,
    _make_clock,
)
from usagebar.cli.main import NOW_OPTION_HELP, app
from usagebar.core.exceptions import UsagebarError


@app.command()
def status(
    percentage: float = typer.Option(
        ...,
        "--percent",
        "-p",
        help="Share of the quota used (0-100).",
    ),
    resets_at: str | None = typer.Option(
        None,
        "--resets-at",
        "-r",
        help="ISO-8601 timestamp of the next quota reset.",
    ),
    subscription_type: str | None = typer.Option(
        None,
        "--plan",
        help="Subscription type, e.g. 'pro' or 'max'.",
    ),
    tier: str | None = typer.Option(
        None,
        "--tier",
        help="Rate limit tier, e.g. 'default_claude_max_5x'.",
    ),
    theme: str | None = typer.Option(
        None,
        "--theme",
        "-t",
        help="Theme preset. Defaults to $USAGEBAR_THEME or 'dark'.",
    ),
    now: str | None = typer.Option(None, "--now", help=NOW_OPTION_HELP),
) -> None:
    """Show a one-line usage summary."""
    from usagebar.config import load_theme

    try:
        selected = load_theme(theme)
        clock = _make_clock(now)
    except UsagebarError as e:
        raise _exit_with_error(e) from None

    line = _format_status_line(
        percentage,
        resets_at,
        selected,
        subscription_type=subscription_type,
        tier=tier,
        clock=clock,
    )
    _console().print(line)
