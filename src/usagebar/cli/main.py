"""CLI commands for usagebar."""

from __future__ import annotations

import typer

from usagebar.cli.formatting import (
    _console,
    _exit_with_error,
    _format_plan,
    _format_utilization,
    _make_clock,
)
from usagebar.core.exceptions import UsagebarError


app = typer.Typer(
    name="usagebar",
    help="Format usage quota resets, utilization and plan labels.",
    no_args_is_help=True,
)

RESET_FORMATS = ("compact", "verbose", "absolute")

NOW_OPTION_HELP = "Treat this ISO-8601 timestamp as the current time."


@app.callback()
def _root(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
) -> None:
    """Format usage quota resets, utilization and plan labels."""
    from usagebar.log import init_logging

    init_logging("DEBUG" if verbose else "WARNING")


@app.command()
def reset(
    timestamp: str = typer.Argument(help="ISO-8601 reset timestamp."),
    fmt: str = typer.Option(
        "compact",
        "--format",
        "-f",
        help="Output format: compact, verbose or absolute.",
    ),
    now: str | None = typer.Option(None, "--now", help=NOW_OPTION_HELP),
) -> None:
    """Show how long until a quota resets."""
    from usagebar.core.formatting import (
        format_reset_date_time,
        format_reset_time,
        format_reset_time_verbose,
    )
    from usagebar.core.timestamps import parse_timestamp

    formatters = {
        "compact": format_reset_time,
        "verbose": format_reset_time_verbose,
        "absolute": format_reset_date_time,
    }
    if fmt not in formatters:
        typer.echo(f"Unknown format '{fmt}'.", err=True)
        typer.echo(f"Available formats: {', '.join(RESET_FORMATS)}", err=True)
        raise typer.Exit(1)

    try:
        clock = _make_clock(now)
        # Surface malformed input instead of printing the "unknown" sentinel
        parse_timestamp(timestamp, strict=True)
    except UsagebarError as e:
        raise _exit_with_error(e) from None

    typer.echo(formatters[fmt](timestamp, clock))


@app.command()
def usage(
    percentage: float = typer.Argument(
        help="Share of the quota used (0-100). Put negative values after '--'.",
    ),
    theme: str | None = typer.Option(
        None,
        "--theme",
        "-t",
        help="Theme preset. Defaults to $USAGEBAR_THEME or 'dark'.",
    ),
) -> None:
    """Show a utilization percentage in its severity color."""
    from usagebar.config import load_theme

    try:
        selected = load_theme(theme)
    except UsagebarError as e:
        raise _exit_with_error(e) from None

    _console().print(_format_utilization(percentage, selected))


@app.command()
def plan(
    subscription_type: str | None = typer.Argument(
        None,
        help="Subscription type, e.g. 'pro' or 'max'.",
    ),
    tier: str | None = typer.Option(
        None,
        "--tier",
        help="Rate limit tier, e.g. 'default_claude_max_5x'.",
    ),
) -> None:
    """Show display labels for a subscription plan and tier."""
    typer.echo(_format_plan(subscription_type, tier))


def main() -> None:
    """Entry point for the CLI."""
    app()
