"""
Pareto ranker: orders valued records by weight and computes each record's
share of the total.

Definitions
-----------
    total_weight          = sum(weight)
    contribution_share[i] = weight[i] / total_weight * 100
    cumulative_share[i]   = sum(weight[0..i]) / total_weight * 100

When ``total_weight`` is 0 both shares are 0 for every record.

Ordering
--------
Weight descending; equal weights keep input order (``original_index``
ascending), so repeated runs over the same text always rank identically.

The running weight is summed in the same order as ``total_weight``, so the
last record's cumulative share is exactly 100.0 whenever the total is > 0.
"""

from __future__ import annotations

import logging
from typing import Sequence

from pareto_analyzer.models.record import RankedRecord, ValuedRecord

logger = logging.getLogger(__name__)


def sort_by_weight(records: list[ValuedRecord]) -> list[ValuedRecord]:
    """Weight descending, ties broken by ``original_index`` ascending."""
    return sorted(records, key=lambda r: (-r.weight, r.original_index))


def total_weight(records: Sequence[ValuedRecord]) -> float:
    return sum(r.weight for r in records)


def rank_records(records: list[ValuedRecord]) -> list[RankedRecord]:
    """Sort ``records`` and annotate contribution / cumulative shares.

    Args:
        records: ValuedRecord list in any order.

    Returns:
        RankedRecord list in ranking order (heaviest first).
    """
    ordered = sort_by_weight(records)
    grand_total = total_weight(ordered)

    ranked: list[RankedRecord] = []
    running = 0.0
    for rec in ordered:
        running += rec.weight
        if grand_total > 0:
            contribution = rec.weight / grand_total * 100.0
            cumulative   = running / grand_total * 100.0
        else:
            contribution = 0.0
            cumulative   = 0.0

        ranked.append(
            RankedRecord(
                original_index=rec.original_index,
                data=rec.data,
                weight=rec.weight,
                contribution_share=contribution,
                cumulative_share=cumulative,
            )
        )

    logger.debug("Ranked %d record(s); total weight %.4f", len(ranked), grand_total)
    return ranked
