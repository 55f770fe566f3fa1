from collections.abc import Sequence

from bioranges.ingestion.base import BaseRowSource
from bioranges.ingestion.exceptions import IngestionError, SourceUnavailable
from bioranges.logging.logger import Log
from bioranges.normalization.models import RawRow
from bioranges.selection import BiomarkerQuery, find_row


class FallbackRowSource(BaseRowSource):
    """Primary source first, then the fallback, then whatever the primary had.

    The primary's rows are only accepted outright when every required
    biomarker is present. If the fallback also fails, incomplete primary
    rows are still returned in preference to failing the load.
    """

    def __init__(
        self,
        primary: BaseRowSource,
        fallback: BaseRowSource,
        required: Sequence[BiomarkerQuery] = (),
    ) -> None:
        self._primary = primary
        self._fallback = fallback
        self._required = tuple(required)

    def fetch_rows(self) -> list[RawRow]:
        primary_rows: list[RawRow] = []
        try:
            primary_rows = self._primary.fetch_rows()
        except IngestionError as exc:
            primary_error = exc
        else:
            missing = self._missing(primary_rows)
            if not missing:
                Log.info("Primary source has all required biomarkers")
                return primary_rows
            primary_error = IngestionError(
                f"Required biomarkers not found in primary source: {', '.join(missing)}"
            )

        Log.warning(f"Primary source failed or incomplete, trying fallback: {primary_error}")
        try:
            rows = self._fallback.fetch_rows()
        except IngestionError as fallback_error:
            if primary_rows:
                Log.warning("Using primary source data despite missing some biomarkers")
                return primary_rows
            raise SourceUnavailable(
                "Failed to fetch data from both primary and fallback sources. "
                f"Primary error: {primary_error}. Fallback error: {fallback_error}"
            ) from fallback_error
        Log.info("Successfully loaded rows from fallback source")
        return rows

    def _missing(self, rows: list[RawRow]) -> list[str]:
        return [query.label for query in self._required if find_row(rows, query) is None]

    def close(self) -> None:
        try:
            self._primary.close()
        finally:
            self._fallback.close()
