"""
Tier classifier: assigns a Pareto priority tier and composite score to each
ranked record.

Tier rules (upper bounds inclusive)
-----------------------------------
    cumulative_share <= 80          -> HIGH    bonus 30
    80 < cumulative_share <= 95     -> MEDIUM  bonus 15
    cumulative_share > 95           -> LOW     bonus 0

    score = contribution_share + bonus

The tier depends only on ``cumulative_share``.  A record whose weight is 0 in
an all-zero document has cumulative share 0 and is therefore HIGH.

This module carries no presentation text; ``recommendations`` is left empty
and filled in by the recommender step.
"""

from __future__ import annotations

from pareto_analyzer.models.record import ClassifiedRecord, RankedRecord
from pareto_analyzer.taxonomy.priority_taxonomy import (
    MEDIUM_THRESHOLD,
    PARETO_THRESHOLD,
    PriorityTier,
)

_TIER_BONUS: dict[PriorityTier, float] = {
    PriorityTier.HIGH:   30.0,
    PriorityTier.MEDIUM: 15.0,
    PriorityTier.LOW:     0.0,
}


def classify_tier(cumulative_share: float) -> PriorityTier:
    """Map a cumulative share (percent) to its priority tier."""
    if cumulative_share <= PARETO_THRESHOLD:
        return PriorityTier.HIGH
    if cumulative_share <= MEDIUM_THRESHOLD:
        return PriorityTier.MEDIUM
    return PriorityTier.LOW


def tier_bonus(tier: PriorityTier) -> float:
    """Score bonus added to the contribution share for ``tier``."""
    return _TIER_BONUS[tier]


def compute_score(tier: PriorityTier, contribution_share: float) -> float:
    return contribution_share + tier_bonus(tier)


def classify_record(record: RankedRecord) -> ClassifiedRecord:
    """Assign tier and score to one ranked record."""
    tier = classify_tier(record.cumulative_share)
    return ClassifiedRecord(
        original_index=record.original_index,
        data=record.data,
        weight=record.weight,
        contribution_share=record.contribution_share,
        cumulative_share=record.cumulative_share,
        tier=tier,
        score=compute_score(tier, record.contribution_share),
    )


def classify_records(records: list[RankedRecord]) -> list[ClassifiedRecord]:
    """Classify every record, preserving ranking order."""
    return [classify_record(r) for r in records]
