"""Basic status display example.

This example shows the simplest usage pattern: take the raw usage data
reported for an account and turn it into display strings. The UI layer
supplies its own colors through a Theme.
"""

from datetime import datetime, timedelta

from usagebar import (
    Theme,
    format_reset_date_time,
    format_reset_time,
    format_reset_time_verbose,
    plan_label,
    tier_label,
    utilization_color,
)


# Raw data as an API would report it
usage = {
    "subscription_type": "max",
    "rate_limit_tier": "default_claude_max_5x",
    "five_hour": {"utilization": 63.0, "resets_at": None},
}
usage["five_hour"]["resets_at"] = (
    datetime.now().astimezone() + timedelta(hours=2, minutes=14)
).isoformat()

# Colors are opaque to the library: names, hex strings, RGB tuples...
theme = Theme(error="red", warning="yellow", primary="cyan")

window = usage["five_hour"]
print(f"Plan:  {plan_label(usage['subscription_type'])} ({tier_label(usage['rate_limit_tier'])})")
print(f"Usage: {window['utilization']:.0f}% [{utilization_color(window['utilization'], theme)}]")
print(f"Reset: {format_reset_time(window['resets_at'])}")
print(f"       {format_reset_time_verbose(window['resets_at'])}")
print(f"       {format_reset_date_time(window['resets_at'])}")

# Unknown values degrade to sentinels instead of raising
print(format_reset_time(None))  # "--"
print(plan_label(None))  # "Unknown"
