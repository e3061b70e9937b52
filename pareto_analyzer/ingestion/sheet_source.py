"""
Sheet source — resolves a spreadsheet locator into raw document text.

Supported locators:
  - Google Sheets share/edit URL
      ``https://docs.google.com/spreadsheets/d/<id>/edit#gid=0``
    rewritten to its CSV export endpoint
      ``https://docs.google.com/spreadsheets/d/<id>/export?format=csv``
  - Any other ``http://`` / ``https://`` URL, fetched as-is.
  - A local file path, read as UTF-8.

The fetch is a one-shot GET with no retry policy.  Every transport failure or
non-2xx response surfaces as ``SourceUnavailableError``; no partial text is
ever returned.  The spreadsheet must be shared publicly — no credentials are
sent.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

import httpx

from pareto_analyzer.errors import SourceUnavailableError

logger = logging.getLogger(__name__)

GOOGLE_SHEETS_MARKER = "docs.google.com/spreadsheets"
GOOGLE_SHEETS_EXPORT_TEMPLATE = (
    "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format=csv"
)

_SHEET_ID = re.compile(r"/d/([a-zA-Z0-9\-_]+)")


def resolve_export_url(locator: str) -> str:
    """Return the CSV export URL for a Google Sheets locator.

    Locators that are not Google Sheets URLs, or whose sheet id cannot be
    found, are returned unchanged.
    """
    if GOOGLE_SHEETS_MARKER not in locator:
        return locator
    match = _SHEET_ID.search(locator)
    if match is None:
        return locator
    return GOOGLE_SHEETS_EXPORT_TEMPLATE.format(sheet_id=match.group(1))


def is_remote(locator: str) -> bool:
    """True for ``http://`` and ``https://`` locators."""
    return locator.lower().startswith(("http://", "https://"))


def fetch_document(
    locator: str,
    timeout_s: float = 30.0,
    follow_redirects: bool = True,
    client: Optional[httpx.Client] = None,
) -> str:
    """Fetch document text over HTTP.

    Args:
        locator:          Spreadsheet share URL or direct CSV URL.
        timeout_s:        Request timeout in seconds.
        follow_redirects: Follow 3xx responses (Google export URLs redirect).
        client:           Optional pre-built ``httpx.Client`` (tests inject a
                          ``MockTransport`` here).

    Returns:
        Response body decoded as text.

    Raises:
        SourceUnavailableError: On a transport error or a non-2xx response.
    """
    url = resolve_export_url(locator)
    logger.info("Fetching document: %s", url)

    owns_client = client is None
    http = client or httpx.Client(timeout=timeout_s, follow_redirects=follow_redirects)
    try:
        resp = http.get(url)
        resp.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        raise SourceUnavailableError(url, f"HTTP {status}", status_code=status) from exc
    except httpx.HTTPError as exc:
        raise SourceUnavailableError(url, str(exc) or type(exc).__name__) from exc
    finally:
        if owns_client:
            http.close()

    logger.info("Fetched %d bytes from %s", len(resp.content), url)
    return resp.text


def read_document(
    locator: str,
    timeout_s: float = 30.0,
    follow_redirects: bool = True,
    client: Optional[httpx.Client] = None,
) -> str:
    """Return document text for a URL or local file path.

    Raises:
        ValueError:             If ``locator`` is empty.
        SourceUnavailableError: If the URL cannot be fetched or the file is
                                missing / unreadable.
    """
    locator = locator.strip()
    if not locator:
        raise ValueError("A spreadsheet URL or file path is required.")

    if is_remote(locator):
        return fetch_document(
            locator,
            timeout_s=timeout_s,
            follow_redirects=follow_redirects,
            client=client,
        )

    path = Path(locator)
    if not path.is_file():
        raise SourceUnavailableError(locator, "file not found")
    try:
        # utf-8-sig drops the BOM some spreadsheet exports prepend
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailableError(locator, str(exc)) from exc
