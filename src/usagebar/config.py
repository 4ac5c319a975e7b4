"""Configuration utilities for usagebar.

This module provides the bundled theme presets and resolves which one
the CLI should use.
"""

from __future__ import annotations

import os

from usagebar.core.exceptions import ThemeNotFoundError
from usagebar.core.models import Theme


THEME_ENV_VAR = "USAGEBAR_THEME"
DEFAULT_THEME = "dark"

# Colors are rich style strings
THEMES: dict[str, Theme] = {
    "dark": Theme(error="#BF616A", warning="#EBCB8B", primary="#88C0D0"),
    "light": Theme(error="#B3261E", warning="#9A6700", primary="#0550AE"),
    "plain": Theme(error="bold", warning="underline", primary="default"),
}


def resolve_theme_name(name: str | None = None) -> str:
    """Pick the theme name to use.

    Resolution order:
    1. The explicit name, if given
    2. The USAGEBAR_THEME environment variable, if set and non-empty
    3. "dark"

    Args:
        name: Explicitly requested theme name.

    Returns:
        Theme name, lower-cased and stripped. Not validated.
    """
    if not name:
        name = os.environ.get(THEME_ENV_VAR) or DEFAULT_THEME
    return name.strip().lower()


def load_theme(name: str | None = None) -> Theme:
    """Load a bundled theme preset.

    Args:
        name: Theme name. If None, see resolve_theme_name().

    Returns:
        The Theme preset.

    Raises:
        ThemeNotFoundError: If no preset has that name.

    Example:
        >>> from usagebar.config import load_theme
        >>> load_theme("plain").error
        'bold'
    """
    resolved = resolve_theme_name(name)
    try:
        return THEMES[resolved]
    except KeyError:
        raise ThemeNotFoundError(resolved, available=sorted(THEMES)) from None
