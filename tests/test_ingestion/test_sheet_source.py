"""
Tests for pareto_analyzer/ingestion/sheet_source.py.

No network access: HTTP calls go through ``httpx.MockTransport``.

Covers:
  - resolve_export_url(): Google Sheets rewrite, passthrough for other URLs
  - fetch_document(): success, non-2xx -> SourceUnavailableError with status,
    transport error -> SourceUnavailableError
  - read_document(): local files, BOM stripping, missing file, empty locator,
    remote dispatch
"""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from pareto_analyzer.errors import SourceUnavailableError
from pareto_analyzer.ingestion.sheet_source import (
    fetch_document,
    is_remote,
    read_document,
    resolve_export_url,
)

SHEET_ID = "1AbC-dEf_123"
SHARE_URL = f"https://docs.google.com/spreadsheets/d/{SHEET_ID}/edit#gid=0"
EXPORT_URL = f"https://docs.google.com/spreadsheets/d/{SHEET_ID}/export?format=csv"


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


# ── resolve_export_url ────────────────────────────────────────────────────────

class TestResolveExportUrl:
    def test_share_url_rewritten(self):
        assert resolve_export_url(SHARE_URL) == EXPORT_URL

    def test_view_url_rewritten(self):
        url = f"https://docs.google.com/spreadsheets/d/{SHEET_ID}/view"
        assert resolve_export_url(url) == EXPORT_URL

    def test_non_sheets_url_unchanged(self):
        url = "https://example.com/data.csv"
        assert resolve_export_url(url) == url

    def test_sheets_url_without_id_unchanged(self):
        url = "https://docs.google.com/spreadsheets/u/0/"
        assert resolve_export_url(url) == url


def test_is_remote():
    assert is_remote("https://example.com/a.csv")
    assert is_remote("HTTP://example.com/a.csv")
    assert not is_remote("data/a.csv")


# ── fetch_document ────────────────────────────────────────────────────────────

class TestFetchDocument:
    def test_success_returns_text(self):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, text="name,val\nA,1\n")

        text = fetch_document(SHARE_URL, client=_client(handler))
        assert text == "name,val\nA,1\n"
        assert seen == [EXPORT_URL]

    def test_non_2xx_raises_with_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, text="forbidden")

        with pytest.raises(SourceUnavailableError) as exc_info:
            fetch_document("https://example.com/private.csv", client=_client(handler))
        assert exc_info.value.status_code == 403
        assert exc_info.value.locator == "https://example.com/private.csv"
        assert "HTTP 403" in str(exc_info.value)

    def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(SourceUnavailableError) as exc_info:
            fetch_document("https://example.com/a.csv", client=_client(handler))
        assert exc_info.value.status_code is None

    def test_injected_client_not_closed(self):
        client = _client(lambda request: httpx.Response(200, text="a\n1"))
        fetch_document("https://example.com/a.csv", client=client)
        assert not client.is_closed
        client.close()


# ── read_document ─────────────────────────────────────────────────────────────

class TestReadDocument:
    def test_reads_local_file(self, tmp_path: Path):
        p = tmp_path / "sheet.csv"
        p.write_text("name,val\nA,1\n", encoding="utf-8")
        assert read_document(str(p)) == "name,val\nA,1\n"

    def test_strips_utf8_bom(self, tmp_path: Path):
        p = tmp_path / "bom.csv"
        p.write_bytes("\ufeffname,val\nA,1\n".encode("utf-8"))
        assert read_document(str(p)).startswith("name,val")

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(SourceUnavailableError, match="file not found"):
            read_document(str(tmp_path / "nope.csv"))

    @pytest.mark.parametrize("locator", ["", "   "])
    def test_empty_locator_raises_value_error(self, locator):
        with pytest.raises(ValueError):
            read_document(locator)

    def test_remote_locator_fetched(self):
        client = _client(lambda request: httpx.Response(200, text="x\n5"))
        assert read_document(SHARE_URL, client=client) == "x\n5"
