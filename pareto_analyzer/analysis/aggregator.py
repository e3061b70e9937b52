"""
Result aggregator: reduces classified records into an ``AnalysisReport``.

Pure reduction with no failure modes — tier counts, total weight, and the
fixed 80/20 threshold are assembled around the records as given (ranking
order is preserved, not re-sorted).
"""

from __future__ import annotations

from collections import Counter

from pareto_analyzer.models.record import ClassifiedRecord
from pareto_analyzer.models.report import AnalysisReport, ReportSummary
from pareto_analyzer.taxonomy.priority_taxonomy import PARETO_THRESHOLD, PriorityTier


def count_tiers(records: list[ClassifiedRecord]) -> dict[PriorityTier, int]:
    """Records per tier; every tier is present, zero-filled."""
    counts = Counter(r.tier for r in records)
    return {tier: counts.get(tier, 0) for tier in PriorityTier}


def summarize(records: list[ClassifiedRecord], total_value: float) -> ReportSummary:
    counts = count_tiers(records)
    return ReportSummary(
        total_rows=len(records),
        high_priority=counts[PriorityTier.HIGH],
        medium_priority=counts[PriorityTier.MEDIUM],
        low_priority=counts[PriorityTier.LOW],
        total_value=total_value,
    )


def build_report(records: list[ClassifiedRecord], total_value: float) -> AnalysisReport:
    """Assemble the final report.

    Args:
        records:     Classified records (with recommendations) in ranking order.
        total_value: Total weight from the ranking step.

    Returns:
        ``AnalysisReport`` with ``pareto_threshold`` fixed at 80.
    """
    return AnalysisReport(
        summary=summarize(records, total_value),
        records=records,
        pareto_threshold=PARETO_THRESHOLD,
    )
