"""
Tests for pareto_analyzer/analysis/classifier.py.

What we test
------------
classify_tier():
  - <= 80 -> HIGH, (80, 95] -> MEDIUM, > 95 -> LOW.
  - Boundaries 80.0 and 95.0 belong to the lower-numbered tier.
  - 0.0 (all-zero document) -> HIGH.

tier_bonus() / compute_score():
  - Bonuses 30 / 15 / 0.
  - With equal contribution, score strictly increases with tier importance.

classify_records():
  - Ranking order preserved; tier and score assigned; recommendations empty.
"""

from __future__ import annotations

import pytest

from pareto_analyzer.analysis.classifier import (
    classify_record,
    classify_records,
    classify_tier,
    compute_score,
    tier_bonus,
)
from pareto_analyzer.models.record import RankedRecord
from pareto_analyzer.taxonomy.priority_taxonomy import PriorityTier


def _ranked(
    cumulative_share: float,
    contribution_share: float = 10.0,
    original_index: int = 1,
) -> RankedRecord:
    return RankedRecord(
        original_index=original_index,
        data={"name": f"row{original_index}"},
        weight=contribution_share,
        contribution_share=contribution_share,
        cumulative_share=cumulative_share,
    )


class TestClassifyTier:
    @pytest.mark.parametrize(
        "cumulative, expected",
        [
            (0.0, PriorityTier.HIGH),
            (20.0, PriorityTier.HIGH),
            (79.999, PriorityTier.HIGH),
            (80.0, PriorityTier.HIGH),
            (80.0001, PriorityTier.MEDIUM),
            (90.0, PriorityTier.MEDIUM),
            (95.0, PriorityTier.MEDIUM),
            (95.0001, PriorityTier.LOW),
            (100.0, PriorityTier.LOW),
        ],
    )
    def test_thresholds(self, cumulative, expected):
        assert classify_tier(cumulative) == expected

    def test_boundaries_never_low(self):
        assert classify_tier(80.0) != PriorityTier.LOW
        assert classify_tier(95.0) != PriorityTier.LOW


class TestScore:
    def test_bonuses(self):
        assert tier_bonus(PriorityTier.HIGH) == 30.0
        assert tier_bonus(PriorityTier.MEDIUM) == 15.0
        assert tier_bonus(PriorityTier.LOW) == 0.0

    def test_score_is_contribution_plus_bonus(self):
        assert compute_score(PriorityTier.MEDIUM, 12.5) == pytest.approx(27.5)

    def test_score_strictly_increases_with_tier(self):
        contribution = 7.0
        low    = compute_score(PriorityTier.LOW, contribution)
        medium = compute_score(PriorityTier.MEDIUM, contribution)
        high   = compute_score(PriorityTier.HIGH, contribution)
        assert low < medium < high


class TestClassifyRecords:
    def test_assigns_tier_and_score(self):
        rec = classify_record(_ranked(cumulative_share=90.0, contribution_share=90.0))
        assert rec.tier == PriorityTier.MEDIUM
        assert rec.score == pytest.approx(105.0)
        assert rec.recommendations == ()

    def test_preserves_order_and_fields(self):
        ranked = [
            _ranked(50.0, 50.0, original_index=3),
            _ranked(90.0, 40.0, original_index=1),
            _ranked(100.0, 10.0, original_index=2),
        ]
        classified = classify_records(ranked)
        assert [c.original_index for c in classified] == [3, 1, 2]
        assert [c.tier for c in classified] == [
            PriorityTier.HIGH, PriorityTier.MEDIUM, PriorityTier.LOW,
        ]
        assert classified[0].data == {"name": "row3"}
        assert classified[1].cumulative_share == 90.0

    def test_empty(self):
        assert classify_records([]) == []
