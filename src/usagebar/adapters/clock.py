"""Clock adapters."""

from __future__ import annotations

from datetime import datetime, timedelta


class SystemClock:
    """Clock backed by the host's local wall-clock time."""

    def now(self) -> datetime:
        """Return the current local time as an aware datetime."""
        return datetime.now().astimezone()


class FixedClock:
    """Clock frozen at a given instant.

    Useful for previews and tests where output must not depend on when
    the code runs.

    Example:
        >>> clock = FixedClock(datetime(2025, 11, 3, 8, 0))
        >>> clock.now() == clock.now()
        True
    """

    def __init__(self, instant: datetime) -> None:
        self._instant = instant.astimezone()

    def now(self) -> datetime:
        """Return the frozen instant."""
        return self._instant

    def advance(self, **delta: float) -> None:
        """Move the frozen instant forward by ``timedelta(**delta)``."""
        self._instant = self._instant + timedelta(**delta)
