"""Tests for the Google Sheets CSV source (HTTP mocked with httpx.MockTransport)."""

from collections.abc import Callable

import httpx
import pytest

from bioranges.ingestion.exceptions import NoValidRows, SourceUnavailable
from bioranges.ingestion.google_sheets_source import GoogleSheetsSource

_URL = "https://docs.example.com/spreadsheets/d/abc/export?format=csv"


def _make_source(handler: Callable[[httpx.Request], httpx.Response]) -> GoogleSheetsSource:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return GoogleSheetsSource(url=_URL, client=client)


def _respond(status_code: int, text: str = "") -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=text)

    return handler


class TestFetchRowsSuccess:
    def test_returns_valid_rows(self, sample_csv_text: str) -> None:
        rows = _make_source(_respond(200, sample_csv_text)).fetch_rows()
        assert [r["Biomarker_Name"] for r in rows] == ["Metabolic Health Score", "Creatine"]

    def test_sends_cache_busting_request(self, sample_csv_text: str) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text=sample_csv_text)

        _make_source(handler).fetch_rows()

        request = seen[0]
        assert request.url.params["format"] == "csv"
        assert request.url.params["t"].isdigit()
        assert request.headers["Cache-Control"] == "no-cache"

    def test_follows_redirects(self, sample_csv_text: str) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "docs.example.com":
                return httpx.Response(307, headers={"Location": "https://cdn.example.com/sheet.csv"})
            return httpx.Response(200, text=sample_csv_text)

        rows = _make_source(handler).fetch_rows()
        assert len(rows) == 2


class TestHttpErrors:
    def test_access_denied(self) -> None:
        with pytest.raises(SourceUnavailable, match="Access denied"):
            _make_source(_respond(403)).fetch_rows()

    def test_not_found(self) -> None:
        with pytest.raises(SourceUnavailable, match="CSV file not found"):
            _make_source(_respond(404)).fetch_rows()

    def test_other_status(self) -> None:
        with pytest.raises(SourceUnavailable, match="500 Internal Server Error"):
            _make_source(_respond(500)).fetch_rows()

    def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(SourceUnavailable, match="Connection timeout"):
            _make_source(handler).fetch_rows()

    def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(SourceUnavailable, match="No response from server"):
            _make_source(handler).fetch_rows()


class TestBodyValidation:
    def test_empty_body(self) -> None:
        with pytest.raises(SourceUnavailable, match="Empty response"):
            _make_source(_respond(200, "  \n")).fetch_rows()

    def test_html_body(self) -> None:
        with pytest.raises(SourceUnavailable, match="HTML instead of CSV"):
            _make_source(_respond(200, "<html><body>Sign in</body></html>")).fetch_rows()

    def test_no_valid_rows(self) -> None:
        with pytest.raises(NoValidRows):
            _make_source(_respond(200, "Biomarker_Name,Unit\n,mg/dL\n")).fetch_rows()


class TestClose:
    def test_closes_own_client(self) -> None:
        source = GoogleSheetsSource(url=_URL)
        source.close()
        assert source._client.is_closed

    def test_leaves_injected_client_open(self) -> None:
        client = httpx.Client(transport=httpx.MockTransport(_respond(200)))
        GoogleSheetsSource(url=_URL, client=client).close()
        assert not client.is_closed
        client.close()
