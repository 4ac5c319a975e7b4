"""Logging setup for usagebar entry points.

Library modules only create loggers; handlers are installed here, once,
by whoever owns the process (the CLI).
"""

from __future__ import annotations

import logging


def init_logging(level: str | int = "WARNING") -> None:
    """Configure root logging unless handlers are already installed.

    Args:
        level: Level name ("DEBUG", "info", ...) or numeric level. Unknown
            names fall back to WARNING.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)
    if logging.getLogger().handlers:
        logging.getLogger("usagebar").setLevel(level)
        return
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
