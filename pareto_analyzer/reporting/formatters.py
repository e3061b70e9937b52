"""
ASCII terminal formatters for the ``analyze`` command.

All formatters accept an ``AnalysisReport`` and return plain multi-line
strings suitable for ``typer.echo()``.  No third-party dependencies.

Example output::

    === Pareto Analysis (80/20) ===
      Rows analysed:    12
      Total value:      48,210.50
      Alta Prioridad:   3  (25.0%)
      Media Prioridad:  2  (16.7%)
      Baja Prioridad:   7  (58.3%)
"""

from __future__ import annotations

from pareto_analyzer.models.report import AnalysisReport
from pareto_analyzer.taxonomy.priority_taxonomy import PriorityTier, tier_label

_LABEL_WIDTH = 30


def _share_of(count: int, total: int) -> str:
    if total <= 0:
        return "0.0%"
    return f"{count / total:.1%}"


def format_report_summary(report: AnalysisReport) -> str:
    """Headline totals and per-tier counts."""
    s = report.summary
    counts = {
        PriorityTier.HIGH:   s.high_priority,
        PriorityTier.MEDIUM: s.medium_priority,
        PriorityTier.LOW:    s.low_priority,
    }

    lines: list[str] = []
    lines.append("")
    lines.append(f"=== Pareto Analysis ({report.pareto_threshold}/20) ===")
    lines.append(f"  Rows analysed:    {s.total_rows}")
    lines.append(f"  Total value:      {s.total_value:,.2f}")
    for tier, count in counts.items():
        label = f"{tier_label(tier)}:"
        lines.append(f"  {label:<17} {count}  ({_share_of(count, s.total_rows)})")

    if s.total_value == 0:
        lines.append("")
        lines.append("  [WARN] No numeric values found; every row weighs 0.")
    return "\n".join(lines)


def format_ranked_table(
    report: AnalysisReport,
    top_n: int = 10,
    label_column: str | None = None,
) -> str:
    """Top-N records in ranking order as an ASCII table.

    Args:
        report:       The analysis report.
        top_n:        Maximum rows shown; 0 shows every row.
        label_column: Data column used as the row label.  Defaults to the
                      first column of each record.

    Returns:
        Multi-line string.
    """
    records = report.records if top_n == 0 else report.records[:top_n]

    lines: list[str] = []
    lines.append("")
    header = (
        f"  {'Rank':>4}  {'Row':>5}  {'Label':<{_LABEL_WIDTH}}  {'Value':>12}  "
        f"{'Share':>7}  {'Cum.':>7}  {'Score':>6}  Tier"
    )
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))

    for rank, rec in enumerate(records, start=1):
        if label_column is not None:
            label = rec.data.get(label_column, "")
        else:
            label = next(iter(rec.data.values()), "")
        lines.append(
            f"  {rank:>4}  {rec.original_index:>5}  {label[:_LABEL_WIDTH]:<{_LABEL_WIDTH}}  "
            f"{rec.weight:>12,.2f}  {rec.contribution_share:>6.1f}%  "
            f"{rec.cumulative_share:>6.1f}%  {rec.score:>6.1f}  {rec.classification}"
        )

    hidden = len(report.records) - len(records)
    if hidden > 0:
        lines.append(f"  ... and {hidden} more row(s). Use --top 0 to show all.")
    return "\n".join(lines)


def format_recommendations(report: AnalysisReport, top_n: int = 3) -> str:
    """Guidance lists for the first ``top_n`` ranked records."""
    lines: list[str] = []
    for rank, rec in enumerate(report.records[:top_n], start=1):
        lines.append("")
        lines.append(f"  #{rank} (row {rec.original_index}) {rec.classification}")
        for text in rec.recommendations:
            lines.append(f"    - {text}")
    return "\n".join(lines)
