import time

import httpx

from bioranges.ingestion.base import BaseRowSource
from bioranges.ingestion.csv_decoder import decode_valid_rows
from bioranges.ingestion.exceptions import SourceUnavailable
from bioranges.normalization.models import RawRow


class GoogleSheetsSource(BaseRowSource):
    """Downloads the biomarker sheet through its public CSV export URL."""

    def __init__(
        self,
        *,
        url: str,
        timeout_seconds: int = 15,
        max_redirects: int = 5,
        client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(
            timeout=timeout_seconds,
            max_redirects=max_redirects,
        )

    def fetch_rows(self) -> list[RawRow]:
        text = self._download()
        if not text.strip():
            raise SourceUnavailable("Empty response from CSV URL")
        if "<HTML>" in text or "<html>" in text:
            raise SourceUnavailable(
                "Received HTML instead of CSV. The Google Sheets URL may be incorrect "
                "or the sheet may not be publicly accessible."
            )
        return decode_valid_rows(text, "Google Sheets")

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def _download(self) -> str:
        # Merged, not replaced: the export URL carries its own format=csv.
        url = httpx.URL(self._url).copy_merge_params({"t": str(int(time.time() * 1000))})
        try:
            response = self._client.get(
                url,
                headers={"Cache-Control": "no-cache"},
                follow_redirects=True,
            )
        except httpx.TimeoutException as exc:
            raise SourceUnavailable(
                "Connection timeout. Please check your internet connection."
            ) from exc
        except httpx.TransportError as exc:
            raise SourceUnavailable(
                "No response from server. Please check your internet connection."
            ) from exc
        except httpx.HTTPError as exc:
            raise SourceUnavailable(
                f"Connection failed. Please check your internet connection. ({exc})"
            ) from exc

        if response.status_code >= 400:
            raise SourceUnavailable(self._status_message(response))
        return response.text

    @staticmethod
    def _status_message(response: httpx.Response) -> str:
        if response.status_code == 403:
            return "Access denied. The Google Sheet may not be publicly accessible."
        if response.status_code == 404:
            return "CSV file not found. Please check the Google Sheets URL."
        return f"Failed to fetch data: {response.status_code} {response.reason_phrase}"
