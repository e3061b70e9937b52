"""
Export helpers for analysis reports.

All writers create missing parent directories and return the written
``Path``.  They accept the plain ``AnalysisReport.to_payload()`` dict so they
stay decoupled from the pydantic models.

The CSV export is flat (one row per analysed record, no nested dicts) so it
opens directly in Excel, Google Sheets, or pandas.  Original spreadsheet
columns are carried over with a ``data.`` prefix, after the analysis columns.
"""

from __future__ import annotations

import csv
import json
import logging
import re
from datetime import date
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

RECOMMENDATION_SEPARATOR = " | "

def export_to_json(data: dict | list, path: Path) -> Path:
    """Write ``data`` to a pretty-printed UTF-8 JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False, default=str),
        encoding="utf-8",
    )
    logger.info("Report JSON written: %s", path)
    return path


def export_to_csv(
    records: list[dict[str, Any]],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    Flat row dicts.
        path:       Destination file path.
        fieldnames: Column order.  If None, the union of all record keys in
                    first-seen order (rows may carry different data columns).

    Returns:
        ``path`` as written.  An empty ``records`` list writes an empty file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path

    cols = fieldnames or _union_keys(records)
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore", restval="")
        writer.writeheader()
        writer.writerows(records)

    logger.info("Report CSV written: %s (%d rows)", path, len(records))
    return path


def flatten_report_for_export(payload: dict[str, Any]) -> list[dict[str, Any]]:
    """Flatten a report payload into one row per analysed record.

    ``rank`` is the 1-based ranking position; ``rowNumber`` is the record's
    original input position.  Metrics are lifted to top-level columns and
    the recommendation list is joined with ``" | "``.

    Args:
        payload: Dict from ``AnalysisReport.to_payload()``.

    Returns:
        List of flat row dicts in ranking order.
    """
    rows: list[dict[str, Any]] = []
    for rank, row in enumerate(payload.get("rowAnalyses", []), start=1):
        metrics = row.get("metrics", {})
        flat: dict[str, Any] = {
            "rank":                 rank,
            "rowNumber":            row.get("rowNumber", ""),
            "classification":       row.get("classification", ""),
            "paretoScore":          row.get("paretoScore", ""),
            "totalValue":           metrics.get("totalValue", ""),
            "contribution":         metrics.get("contribution", ""),
            "cumulativePercentage": metrics.get("cumulativePercentage", ""),
            "recommendations":      RECOMMENDATION_SEPARATOR.join(
                row.get("recommendations", [])
            ),
        }
        for column, value in row.get("data", {}).items():
            flat[f"data.{column}"] = value
        rows.append(flat)
    return rows


def _union_keys(records: list[dict[str, Any]]) -> list[str]:
    seen: dict[str, None] = {}
    for record in records:
        for key in record:
            seen.setdefault(key, None)
    return list(seen)


def default_report_paths(
    output_dir: Path,
    source: str,
    run_date: date | None = None,
) -> tuple[Path, Path]:
    """Return ``(json_path, csv_path)`` named after the source and date.

    The stem is the file name of a local source, or the spreadsheet id /
    last path segment of a URL, reduced to ``[A-Za-z0-9_-]``::

        data/outputs/reports/pareto_sales_2026-10-19.json
    """
    if run_date is None:
        run_date = date.today()
    stem = _source_stem(source)
    base = output_dir / f"pareto_{stem}_{run_date.isoformat()}"
    return base.with_suffix(".json"), base.with_suffix(".csv")


def _source_stem(source: str) -> str:
    trimmed = source.split("?", 1)[0].split("#", 1)[0].rstrip("/")
    if "/spreadsheets/d/" in trimmed:
        trimmed = trimmed.split("/spreadsheets/d/", 1)[1].split("/", 1)[0]
    else:
        trimmed = trimmed.replace("\\", "/").rsplit("/", 1)[-1]
        trimmed = trimmed.rsplit(".", 1)[0] if "." in trimmed else trimmed
    stem = re.sub(r"[^A-Za-z0-9_\-]+", "_", trimmed).strip("_")
    return stem or "report"
