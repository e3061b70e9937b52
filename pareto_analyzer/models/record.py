"""
Record models for the Pareto analysis pipeline.

Each pipeline step produces a new, richer, frozen model rather than mutating
its input::

    Record            dict[str, str]                          (parser)
      -> ValuedRecord      + original_index, weight           (valuator)
      -> RankedRecord      + contribution_share, cumulative_share (ranker)
      -> ClassifiedRecord  + tier, score, recommendations     (classifier)

``Record`` stays a plain ordered ``dict`` because spreadsheet columns are
arbitrary; no schema is ever assumed.  Numeric values are a derived
projection computed by the valuator and are not stored on the record.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from pareto_analyzer.taxonomy.priority_taxonomy import PriorityTier, tier_label

Record = dict[str, str]
"""Ordered mapping of column name to raw (trimmed, unquoted) cell text."""


class ValuedRecord(BaseModel):
    """A parsed row plus its input position and scalar weight.

    Attributes:
        original_index: 1-based position of the row in the input (header excluded).
        data:           Column name -> raw string value, in column order.
        weight:         Sum of absolute values of every numeric cell (>= 0).
    """

    model_config = ConfigDict(frozen=True)

    original_index: int
    data: Record
    weight: float

    @field_validator("original_index")
    @classmethod
    def validate_original_index(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"original_index is 1-based, got {v}.")
        return v

    @field_validator("weight")
    @classmethod
    def validate_weight(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"weight must be non-negative, got {v}.")
        return v


class RankedRecord(ValuedRecord):
    """A valued row annotated with its share of the total weight.

    Attributes:
        contribution_share: weight / total weight, as a percentage (0-100).
        cumulative_share:   Running sum of contribution_share in ranking order.
    """

    contribution_share: float
    cumulative_share: float

    @field_validator("contribution_share", "cumulative_share")
    @classmethod
    def validate_share(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"Shares must be non-negative, got {v}.")
        return v


class ClassifiedRecord(RankedRecord):
    """A ranked row with its Pareto tier, composite score, and guidance.

    Attributes:
        tier:            Priority tier derived from ``cumulative_share``.
        score:           contribution_share + tier bonus.
        recommendations: Guidance strings, most important first.
    """

    tier: PriorityTier
    score: float
    recommendations: tuple[str, ...] = ()

    @property
    def classification(self) -> str:
        """Display label of ``tier`` (e.g. ``"Alta Prioridad"``)."""
        return tier_label(self.tier)
