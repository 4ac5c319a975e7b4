"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters and callers must satisfy. The core
formatting functions depend only on these protocols.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable


if TYPE_CHECKING:
    from datetime import datetime

ColorT_co = TypeVar("ColorT_co", covariant=True)


@runtime_checkable
class Clock(Protocol):
    """Source of the current wall-clock time."""

    def now(self) -> datetime:
        """Return the current time as an aware datetime in local time."""
        ...


@runtime_checkable
class ThemePort(Protocol[ColorT_co]):
    """Minimal color capability supplied by the UI layer.

    Any object with ``error``, ``warning`` and ``primary`` attributes
    satisfies it; the color type is opaque to this library.
    """

    @property
    def error(self) -> ColorT_co:
        """Color for critical utilization."""
        ...

    @property
    def warning(self) -> ColorT_co:
        """Color for elevated utilization."""
        ...

    @property
    def primary(self) -> ColorT_co:
        """Color for normal utilization."""
        ...
