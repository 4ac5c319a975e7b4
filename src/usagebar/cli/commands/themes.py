"""Themes command for CLI."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from usagebar.cli.formatting import _console
from usagebar.cli.main import app
from usagebar.config import THEMES, resolve_theme_name


@app.command()
def themes() -> None:
    """List bundled theme presets and their colors."""
    active = resolve_theme_name()

    table = Table()
    table.add_column("Name")
    table.add_column("Error")
    table.add_column("Warning")
    table.add_column("Primary")

    for name, theme in sorted(THEMES.items()):
        label = f"{name} *" if name == active else name
        table.add_row(
            label,
            Text(theme.error, style=theme.error),
            Text(theme.warning, style=theme.warning),
            Text(theme.primary, style=theme.primary),
        )

    _console().print(table)
