"""
Recommendation generator: tier-specific guidance text for one record.

Output is an ordered list, most important guidance first:

  HIGH   : critical-share notice, immediate resourcing, continuous
           monitoring, then (only when weight > 0) return optimisation.
  MEDIUM : share notice, periodic review, promotion evaluation.
  LOW    : limited-impact notice, simplification / automation, resource
           proportionality review.

Any tier whose cumulative share is <= 20% gets the top-20% marker appended
last.  Percentages are rendered with one decimal place.

The strings are Spanish and fixed; callers and tests may assert on them.
"""

from __future__ import annotations

from pareto_analyzer.models.record import ClassifiedRecord
from pareto_analyzer.taxonomy.priority_taxonomy import PriorityTier

TOP_SHARE_THRESHOLD: float = 20.0

TOP_SHARE_MESSAGE = "⭐ Top 20%: Este elemento es de los más valiosos del conjunto"

_HIGH_TEMPLATES: tuple[str, ...] = (
    "Esta línea es crítica: representa el {pct} del valor total",
    "Priorizar recursos y atención inmediata en este elemento",
    "Implementar seguimiento continuo y métricas de rendimiento",
)
_HIGH_OPTIMIZE = "Buscar oportunidades de optimización para maximizar el retorno"

_MEDIUM_TEMPLATES: tuple[str, ...] = (
    "Contribuye con {pct} del valor total",
    "Mantener seguimiento regular y considerar para optimización secundaria",
    "Evaluar si puede mejorarse para entrar en el grupo de alta prioridad",
)

_LOW_TEMPLATES: tuple[str, ...] = (
    "Impacto limitado: {pct} del valor total",
    "Considerar automatización o simplificación de procesos",
    "Evaluar si los recursos asignados son proporcionales al impacto",
)

_TEMPLATES: dict[PriorityTier, tuple[str, ...]] = {
    PriorityTier.HIGH:   _HIGH_TEMPLATES,
    PriorityTier.MEDIUM: _MEDIUM_TEMPLATES,
    PriorityTier.LOW:    _LOW_TEMPLATES,
}


def format_pct(value: float) -> str:
    """One-decimal percentage, e.g. ``12.345 -> "12.3%"``."""
    return f"{value:.1f}%"


def build_recommendations(
    tier:               PriorityTier,
    contribution_share: float,
    cumulative_share:   float,
    weight:             float,
) -> list[str]:
    """Assemble the ordered guidance list for one classified record.

    Args:
        tier:               Priority tier of the record.
        contribution_share: Record's share of total weight (percent).
        cumulative_share:   Cumulative share at this record's rank (percent).
        weight:             Record's raw weight.

    Returns:
        Non-empty list of guidance strings.
    """
    pct = format_pct(contribution_share)
    recommendations = [t.format(pct=pct) for t in _TEMPLATES[tier]]

    if tier == PriorityTier.HIGH and weight > 0:
        recommendations.append(_HIGH_OPTIMIZE)

    if cumulative_share <= TOP_SHARE_THRESHOLD:
        recommendations.append(TOP_SHARE_MESSAGE)

    return recommendations


def attach_recommendations(records: list[ClassifiedRecord]) -> list[ClassifiedRecord]:
    """Return copies of ``records`` with their guidance lists filled in."""
    return [
        r.model_copy(
            update={
                "recommendations": tuple(
                    build_recommendations(
                        tier=r.tier,
                        contribution_share=r.contribution_share,
                        cumulative_share=r.cumulative_share,
                        weight=r.weight,
                    )
                )
            }
        )
        for r in records
    ]
