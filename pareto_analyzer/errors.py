"""
Error taxonomy for the Pareto analyzer.

Only two conditions surface to callers as exceptions:

  - ``EmptyInputError``        — the document parsed to zero data rows.
  - ``SourceUnavailableError`` — the document could not be fetched or read.

Every other per-row irregularity (short rows, non-numeric cells) is absorbed
by the parser and valuator and degrades to empty / zero values.
"""

from __future__ import annotations

from typing import Optional


class EmptyInputError(RuntimeError):
    """Raised when a document contains no data rows after the header.

    Attributes:
        source: Optional locator or label of the empty document.
    """

    def __init__(self, source: Optional[str] = None) -> None:
        self.source = source
        where = f" ({source})" if source else ""
        super().__init__(
            f"The spreadsheet is empty{where}: no data rows found after the header."
        )


class SourceUnavailableError(RuntimeError):
    """Raised when the source document cannot be fetched or read.

    Attributes:
        locator:     URL or file path that was requested.
        status_code: HTTP status code, if the server answered at all.
    """

    def __init__(
        self,
        locator: str,
        reason: str,
        status_code: Optional[int] = None,
    ) -> None:
        self.locator     = locator
        self.status_code = status_code
        super().__init__(
            f"Could not access '{locator}': {reason}.  "
            "Make sure the spreadsheet is shared publicly."
        )
