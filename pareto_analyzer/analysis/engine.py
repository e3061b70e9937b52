"""
Analysis engine — the linear Pareto pipeline over one document.

    text
      -> parse_tabular_text()       list[Record]
      -> value_records()            list[ValuedRecord]
      -> rank_records()             list[RankedRecord]
      -> classify_records()         list[ClassifiedRecord]
      -> attach_recommendations()   list[ClassifiedRecord]
      -> build_report()             AnalysisReport

Every step is a pure function of its input; nothing is cached or shared
between calls, so concurrent requests need no coordination.

Usage::

    from pareto_analyzer.analysis.engine import analyze_text

    report = analyze_text("name,val\\nA,10\\nB,90")
    report.summary.total_value    # 100.0
"""

from __future__ import annotations

import logging
from typing import Optional

from pareto_analyzer.analysis.aggregator import build_report
from pareto_analyzer.analysis.classifier import classify_records
from pareto_analyzer.analysis.ranker import rank_records, total_weight
from pareto_analyzer.analysis.recommender import attach_recommendations
from pareto_analyzer.analysis.valuator import value_records
from pareto_analyzer.errors import EmptyInputError
from pareto_analyzer.ingestion.tabular import parse_tabular_text
from pareto_analyzer.models.record import Record
from pareto_analyzer.models.report import AnalysisReport

logger = logging.getLogger(__name__)


def analyze_records(records: list[Record], source: Optional[str] = None) -> AnalysisReport:
    """Run valuation, ranking, classification and aggregation.

    Args:
        records: Parsed records in input order.
        source:  Optional locator, used only in error messages and logs.

    Raises:
        EmptyInputError: If ``records`` is empty.
    """
    if not records:
        raise EmptyInputError(source)

    valued     = value_records(records)
    ranked     = rank_records(valued)
    classified = attach_recommendations(classify_records(ranked))
    report     = build_report(classified, total_weight(ranked))

    logger.info(
        "Pareto analysis complete: %d rows, total value %.2f "
        "(high=%d, medium=%d, low=%d)",
        report.summary.total_rows,
        report.summary.total_value,
        report.summary.high_priority,
        report.summary.medium_priority,
        report.summary.low_priority,
    )
    return report


def analyze_text(
    text: str,
    honor_quotes: bool = False,
    source: Optional[str] = None,
) -> AnalysisReport:
    """Parse ``text`` and run the full Pareto analysis.

    Args:
        text:         Raw comma-delimited document text.
        honor_quotes: Use the quote-aware splitter (see ``ingestion.tabular``).
        source:       Optional locator, used only in error messages and logs.

    Returns:
        The complete ``AnalysisReport``.

    Raises:
        EmptyInputError: If the text has no data rows after the header.
    """
    records = parse_tabular_text(text, honor_quotes=honor_quotes)
    if not records:
        logger.warning("Document has no data rows: %s", source or "<text>")
    return analyze_records(records, source=source)
