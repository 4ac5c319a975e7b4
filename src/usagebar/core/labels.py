"""Display labels for subscription plans and tiers."""

from __future__ import annotations

import re

from usagebar.core.models import TierMatch


PLAN_LABELS = {
    "max": "Max",
    "pro": "Pro",
    "team": "Team",
    "enterprise": "Enterprise",
}

# e.g. "default_claude_max_5x" -> ("max", "5x")
_TIER_PATTERN = re.compile(r"claude_(\w+)_(\d+x)", re.ASCII)


def plan_label(subscription_type: str | None) -> str:
    """Map a subscription type to its display label.

    Args:
        subscription_type: Plan identifier such as "pro", or None.

    Returns:
        Known plans are title-cased ("pro" -> "Pro"), unknown values are
        returned unchanged, and None or "" gives "Unknown".
    """
    if not subscription_type:
        return "Unknown"
    return PLAN_LABELS.get(subscription_type, subscription_type)


def parse_tier(tier: str | None) -> TierMatch | None:
    """Extract plan name and multiplier from a tier identifier.

    Args:
        tier: Tier identifier such as "default_claude_max_5x".

    Returns:
        TierMatch for the leftmost ``claude_<name>_<N>x`` occurrence, or None
        if the tier is empty or doesn't contain one.
    """
    if not tier:
        return None
    match = _TIER_PATTERN.search(tier)
    if match is None:
        return None
    return TierMatch(name=match.group(1), multiplier=match.group(2))


def tier_label(tier: str | None) -> str:
    """Map a tier identifier to its display label.

    Args:
        tier: Tier identifier, or None.

    Returns:
        "default_claude_max_5x" -> "Max 5x"; identifiers without a
        multiplier have underscores replaced by spaces; None or "" gives "".
    """
    if not tier:
        return ""
    parsed = parse_tier(tier)
    if parsed is not None:
        return parsed.label
    return tier.replace("_", " ")
