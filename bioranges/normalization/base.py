from abc import ABC, abstractmethod

from bioranges.normalization.models import BiomarkerEntity, RawRow


class BaseRowNormalizer(ABC):
    """Contract for turning one raw spreadsheet row into a BiomarkerEntity."""

    @abstractmethod
    def build(
        self,
        row: RawRow,
        current_value: float,
        demographic: str | None = None,
    ) -> BiomarkerEntity:
        """Normalize a raw row.

        Args:
            row: Column name to cell text, as decoded from the source.
            current_value: The reading to classify.
            demographic: Range-column family to read, e.g. ``Male_18-39``.
                         Implementations fall back to their own default.

        Returns:
            A fully built, immutable BiomarkerEntity. Malformed cells degrade
            to absent ranges or skipped history; they never raise.
        """
