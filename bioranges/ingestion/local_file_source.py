from pathlib import Path

from bioranges.ingestion.base import BaseRowSource
from bioranges.ingestion.csv_decoder import decode_valid_rows
from bioranges.ingestion.exceptions import SourceUnavailable
from bioranges.normalization.models import RawRow


class LocalFileSource(BaseRowSource):
    """Reads the biomarker sheet from a CSV file on disk."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def fetch_rows(self) -> list[RawRow]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceUnavailable(f"Failed to load local CSV: {exc}") from exc
        return decode_valid_rows(text, "local")
