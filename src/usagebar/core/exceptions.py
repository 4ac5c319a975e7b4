"""Domain exceptions for usagebar.

All library errors inherit from UsagebarError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations


class UsagebarError(Exception):
    """Base class for all usagebar exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class TimestampParseError(UsagebarError):
    """Raised by strict parsing when a timestamp is not valid ISO-8601.

    Attributes:
        value: The raw value that could not be parsed.
        cause: The underlying exception, if any.
    """

    def __init__(self, value: object, cause: Exception | None = None) -> None:
        self.value = value
        self.cause = cause
        super().__init__(f"Invalid timestamp {value!r}")

    @property
    def recovery_hint(self) -> str:
        """Show the expected timestamp shape."""
        return "Use an ISO-8601 timestamp, e.g. 2025-11-03T09:05:00Z"


class ThemeNotFoundError(UsagebarError):
    """Raised when a requested theme preset doesn't exist.

    Attributes:
        name: The theme name that was not found.
        available: List of available theme names.
    """

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = available if available is not None else []
        super().__init__(f"Theme '{name}' not found")

    @property
    def recovery_hint(self) -> str:
        """Suggest available themes or how to list them."""
        if self.available:
            return f"Available themes: {', '.join(self.available)}"
        return "Run 'usagebar themes' to list available themes"
