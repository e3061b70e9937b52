"""
Priority taxonomy for Pareto (80/20) classification.

``PriorityTier`` is the machine-readable tier; ``TIER_LABELS`` maps each tier
to the fixed display label used in the report payload.  Keeping the labels
out of the enum values lets the classifier be tested without touching any
presentation text.

Usage example::

    from pareto_analyzer.taxonomy.priority_taxonomy import PriorityTier, tier_label

    tier_label(PriorityTier.HIGH)   # "Alta Prioridad"

This module has NO imports from any other ``pareto_analyzer`` package.
"""

from enum import StrEnum


class PriorityTier(StrEnum):
    """Pareto priority tier, ordered from most to least important."""

    HIGH = "high"
    """Records inside the first 80% of cumulative value (the "vital few")."""

    MEDIUM = "medium"
    """Records between 80% and 95% of cumulative value."""

    LOW = "low"
    """The long tail above 95% of cumulative value (the "trivial many")."""


TIER_LABELS: dict[PriorityTier, str] = {
    PriorityTier.HIGH:   "Alta Prioridad",
    PriorityTier.MEDIUM: "Media Prioridad",
    PriorityTier.LOW:    "Baja Prioridad",
}


def tier_label(tier: PriorityTier) -> str:
    """Return the display label for ``tier``."""
    return TIER_LABELS[tier]


# ── Cumulative-share thresholds (percent) ─────────────────────────────────────
# Upper bounds are inclusive: exactly 80.0 is HIGH, exactly 95.0 is MEDIUM.

PARETO_THRESHOLD: int = 80
MEDIUM_THRESHOLD: int = 95
