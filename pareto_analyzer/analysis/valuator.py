"""
Row valuator: computes a scalar weight for each parsed record.

Weight formula
--------------
    weight = sum(abs(n) for every numeric cell n in the row)

Numeric extraction (per cell)
-----------------------------
1. Drop every character that is not a digit, ``.`` or ``-``
   (``"$1,250.50"`` -> ``"1250.50"``, ``"12 kg"`` -> ``"12"``).
2. Parse the longest leading decimal literal of what remains:
   ``"1.2.3"`` -> 1.2, ``"5-3"`` -> 5.0, ``"-.5"`` -> -0.5.
3. Nothing parseable (``""``, ``"-"``, ``"."``, ``"--1"``) -> not numeric,
   silently ignored.

A row with no numeric cells weighs 0.  This step never raises.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from pareto_analyzer.models.record import Record, ValuedRecord

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_DECIMAL = re.compile(r"^-?(?:\d+(?:\.\d*)?|\.\d+)")


def extract_number(value: str) -> Optional[float]:
    """Return the number embedded in a cell, or ``None`` if there is none."""
    cleaned = _NON_NUMERIC.sub("", value)
    match = _LEADING_DECIMAL.match(cleaned)
    if match is None:
        return None
    return float(match.group(0))


def compute_weight(record: Record) -> float:
    """Sum of absolute values of every numeric cell in ``record``."""
    total = 0.0
    for value in record.values():
        number = extract_number(value)
        if number is not None:
            total += abs(number)
    return total


def value_records(records: Iterable[Record]) -> list[ValuedRecord]:
    """Attach a 1-based ``original_index`` and ``weight`` to each record."""
    return [
        ValuedRecord(original_index=index, data=record, weight=compute_weight(record))
        for index, record in enumerate(records, start=1)
    ]
