"""Core value objects for usagebar.

These models are pure Python dataclasses with no I/O dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Theme:
    """The three colors used to grade utilization.

    Colors are opaque to the library. The bundled presets use rich style
    strings, but any value the UI understands works.

    Attributes:
        error: Color for utilization at or above the error threshold.
        warning: Color for utilization at or above the warning threshold.
        primary: Color for everything below.

    Example:
        >>> theme = Theme(error="red", warning="yellow", primary="cyan")
        >>> theme.warning
        'yellow'
    """

    error: str
    warning: str
    primary: str


@dataclass(frozen=True, slots=True)
class Countdown:
    """Whole hours and minutes remaining until a reset.

    Attributes:
        hours: Whole hours remaining.
        minutes: Remaining minutes after the hours (0-59).
        elapsed: True when the reset time is at or before now; hours and
            minutes are then zero.
    """

    hours: int
    minutes: int
    elapsed: bool = False

    @property
    def total_minutes(self) -> int:
        """Total whole minutes remaining."""
        return self.hours * 60 + self.minutes

    def compact(self) -> str:
        """Render as ``1h 30m`` or ``45m``."""
        if self.hours > 0:
            return f"{self.hours}h {self.minutes}m"
        return f"{self.minutes}m"


@dataclass(frozen=True, slots=True)
class TierMatch:
    """Parsed parts of a tier identifier such as ``default_claude_max_5x``.

    Attributes:
        name: Plan variant captured from the identifier (``max``).
        multiplier: Usage multiplier including the trailing ``x`` (``5x``).
    """

    name: str
    multiplier: str

    @property
    def factor(self) -> int:
        """Multiplier as an integer (``5x`` -> 5)."""
        return int(self.multiplier[:-1])

    @property
    def label(self) -> str:
        """Display label, e.g. ``Max 5x``.

        Only the first letter of the name is upper-cased; the rest is kept.
        """
        return f"{self.name[:1].upper()}{self.name[1:]} {self.multiplier}"
