from collections.abc import Sequence
from pathlib import Path

from bioranges.config.settings import Settings
from bioranges.ingestion.base import BaseRowSource
from bioranges.ingestion.fallback_source import FallbackRowSource
from bioranges.ingestion.google_sheets_source import GoogleSheetsSource
from bioranges.ingestion.local_file_source import LocalFileSource
from bioranges.selection import DEFAULT_QUERIES, BiomarkerQuery


class RowSourceFactory:
    """Creates the configured row source: Google Sheets with a local CSV fallback."""

    @classmethod
    def create(
        cls,
        settings: Settings,
        required: Sequence[BiomarkerQuery] = DEFAULT_QUERIES,
    ) -> BaseRowSource:
        primary = GoogleSheetsSource(
            url=settings.sheet_csv_url,
            timeout_seconds=settings.http_timeout_seconds,
            max_redirects=settings.http_max_redirects,
        )
        fallback = LocalFileSource(Path(settings.local_csv_path))
        return FallbackRowSource(primary, fallback, required)
