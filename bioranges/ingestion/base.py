from abc import ABC, abstractmethod

from bioranges.normalization.models import RawRow


class BaseRowSource(ABC):
    """Contract for all raw-row ingestion adapters."""

    @abstractmethod
    def fetch_rows(self) -> list[RawRow]:
        """Fetch and decode the biomarker sheet.

        Returns:
            Rows that passed the validity pre-filter, in sheet order.

        Raises:
            SourceUnavailable: if the source cannot be reached or read.
            NoValidRows: if the source has no row with a usable name.
        """

    def close(self) -> None:
        """Release any connections held by the source."""
