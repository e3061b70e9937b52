"""
Tabular text parser: raw comma-delimited text -> ordered list of ``Record``.

Format — comma delimited, first non-blank line is the header.

Rules
-----
- Lines are split on ``\\n``; blank (all-whitespace) lines are skipped.
- Every cell is trimmed of surrounding whitespace (including a stray ``\\r``)
  and of one surrounding double quote on each side.
- Rows shorter than the header are padded with ``""``; extra cells beyond the
  header are dropped.  Parsing never fails on a well-shaped document.
- A document with a header but no data rows yields ``[]``.

Quoted fields
-------------
By default each line is split on the raw comma, so a quoted cell such as
``"Smith, John"`` is split in two and existing exports keep the column
layout they always had.  Pass ``honor_quotes=True`` to use the stdlib ``csv``
reader instead.  It reads the whole document, so quoted cells keep embedded
commas, line breaks and doubled (``""``) quotes.  In that mode the reader
owns the quoting and cells are only trimmed of whitespace.
"""

from __future__ import annotations

import csv
import io
import logging
import re

from pareto_analyzer.models.record import Record

logger = logging.getLogger(__name__)

DELIMITER = ","

_EDGE_QUOTES = re.compile(r'^"|"$')


def parse_tabular_text(text: str, honor_quotes: bool = False) -> list[Record]:
    """Parse delimited ``text`` into records keyed by the header row.

    Args:
        text:         Raw document text (e.g. a spreadsheet CSV export).
        honor_quotes: Read the whole document with a quote-aware CSV reader
                      instead of splitting each line on the raw delimiter.

    Returns:
        One ``Record`` per non-blank data row, in input order.  Empty when
        the text has no header or no data rows.
    """
    rows = _quoted_rows(text) if honor_quotes else _raw_rows(text)
    if not rows:
        logger.debug("Document has no non-blank rows.")
        return []

    headers = rows[0]
    records = [_to_record(headers, values) for values in rows[1:]]

    logger.debug(
        "Parsed %d row(s) across %d column(s) (honor_quotes=%s)",
        len(records), len(headers), honor_quotes,
    )
    return records


def normalize_cell(value: str) -> str:
    """Trim whitespace, then strip one leading and one trailing ``"``."""
    return _EDGE_QUOTES.sub("", value.strip())


# ── Private helpers ────────────────────────────────────────────────────────────

def _raw_rows(text: str) -> list[list[str]]:
    return [
        [normalize_cell(cell) for cell in line.split(DELIMITER)]
        for line in text.split("\n")
        if line.strip()
    ]


def _quoted_rows(text: str) -> list[list[str]]:
    # The reader owns quoting, so cells are only trimmed afterwards.
    # skipinitialspace so `a, "b, c"` still recognises the quoted cell.
    reader = csv.reader(io.StringIO(text), delimiter=DELIMITER, skipinitialspace=True)
    return [
        [cell.strip() for cell in row]
        for row in reader
        if any(cell.strip() for cell in row)
    ]


def _to_record(headers: list[str], values: list[str]) -> Record:
    """Zip ``values`` onto ``headers``; missing trailing cells become ``""``.

    Duplicate header names keep the last value, as a mapping must.
    """
    record: Record = {}
    for index, header in enumerate(headers):
        record[header] = values[index] if index < len(values) else ""
    return record
