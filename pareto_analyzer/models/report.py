"""
Analysis report model — the single output of one analysis request.

``AnalysisReport.to_payload()`` produces the plain structured object that
callers serialise (JSON response, export file)::

    {
      "summary": {"totalRows", "highPriority", "mediumPriority",
                  "lowPriority", "totalValue"},
      "rowAnalyses": [{"rowNumber", "data", "paretoScore", "classification",
                       "metrics": {"totalValue", "cumulativePercentage",
                                   "contribution"},
                       "recommendations"}],
      "paretoThreshold": 80
    }

``rowAnalyses`` is in ranking (descending-weight) order; ``rowNumber`` is the
row's original 1-based input position, not its rank.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from pareto_analyzer.models.record import ClassifiedRecord
from pareto_analyzer.taxonomy.priority_taxonomy import PARETO_THRESHOLD


class ReportSummary(BaseModel):
    """Tier tallies and total weight for one analysis."""

    model_config = ConfigDict(frozen=True)

    total_rows: int
    high_priority: int
    medium_priority: int
    low_priority: int
    total_value: float

    @model_validator(mode="after")
    def validate_counts(self) -> "ReportSummary":
        tiers = self.high_priority + self.medium_priority + self.low_priority
        if tiers != self.total_rows:
            raise ValueError(
                f"Tier counts ({tiers}) must add up to total_rows ({self.total_rows})."
            )
        if self.total_value < 0:
            raise ValueError("total_value must be non-negative.")
        return self


class AnalysisReport(BaseModel):
    """Complete Pareto analysis of one document.

    Attributes:
        summary:          Tier counts and total weight.
        records:          Classified records in ranking order.
        pareto_threshold: The fixed 80/20 cut-off (always ``80``).
    """

    model_config = ConfigDict(frozen=True)

    summary: ReportSummary
    records: list[ClassifiedRecord]
    pareto_threshold: int = PARETO_THRESHOLD

    def to_payload(self) -> dict[str, Any]:
        """Return the report as a JSON-ready dict with camelCase keys."""
        return {
            "summary": {
                "totalRows":      self.summary.total_rows,
                "highPriority":   self.summary.high_priority,
                "mediumPriority": self.summary.medium_priority,
                "lowPriority":    self.summary.low_priority,
                "totalValue":     self.summary.total_value,
            },
            "rowAnalyses": [_row_payload(r) for r in self.records],
            "paretoThreshold": self.pareto_threshold,
        }


def _row_payload(record: ClassifiedRecord) -> dict[str, Any]:
    return {
        "rowNumber":      record.original_index,
        "data":           dict(record.data),
        "paretoScore":    record.score,
        "classification": record.classification,
        "metrics": {
            "totalValue":           record.weight,
            "cumulativePercentage": record.cumulative_share,
            "contribution":         record.contribution_share,
        },
        "recommendations": list(record.recommendations),
    }
