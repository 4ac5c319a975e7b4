"""Error handling patterns with recovery hints.

The formatters never raise: unknown or malformed input renders as a
sentinel. Code that wants to reject bad input uses strict parsing and
the recovery_hint property to provide actionable guidance.
"""

from datetime import datetime

from usagebar import (
    ThemeNotFoundError,
    TimestampParseError,
    UsagebarError,
    format_reset_time,
    load_theme,
    parse_timestamp,
)


# Pattern 1: Lenient display, malformed values look like unknown ones
print(format_reset_time("next tuesday"))  # "--"


# Pattern 2: Validate input before storing it
def validate_reset_time(value: str) -> datetime | None:
    """Parse a reset timestamp, reporting malformed input."""
    try:
        return parse_timestamp(value, strict=True)
    except TimestampParseError as e:
        print(f"Rejected {e.value!r}")
        print(f"Hint: {e.recovery_hint}")
        return None


# Pattern 3: Fall back to the default theme
def theme_or_default(name: str):
    """Load a theme preset, falling back to 'dark' for unknown names."""
    try:
        return load_theme(name)
    except ThemeNotFoundError as e:
        print(f"Hint: {e.recovery_hint}")
        return load_theme("dark")


# Pattern 4: Catch all library errors
try:
    validate_reset_time("2025-06-15T12:00:00Z")
    theme_or_default("neon")
except UsagebarError as e:
    print(f"Error: {e}")
