"""Deterministic output with an injected clock.

Every time formatter accepts a clock. Pass a FixedClock to render previews,
screenshots or tests that don't depend on when the code runs.
"""

from datetime import datetime

from usagebar import FixedClock, countdown_until, format_reset_time_verbose


clock = FixedClock(datetime(2025, 6, 15, 12, 0))
reset_at = "2025-06-15T13:30:00"

print(format_reset_time_verbose(reset_at, clock))  # "Resets in 1h 30m"

# The structured countdown is available for custom layouts
countdown = countdown_until(reset_at, clock)
if countdown is not None:
    print(f"{countdown.total_minutes} minutes left")  # "90 minutes left"

# Advance the clock to preview later states
clock.advance(hours=2)
print(format_reset_time_verbose(reset_at, clock))  # "Resetting now"
