from bioranges.ingestion.base import BaseRowSource
from bioranges.ingestion.exceptions import (
    IngestionError,
    NoValidRows,
    RequiredBiomarkerMissing,
    SourceUnavailable,
)
from bioranges.ingestion.factory import RowSourceFactory

__all__ = [
    "BaseRowSource",
    "IngestionError",
    "NoValidRows",
    "RequiredBiomarkerMissing",
    "RowSourceFactory",
    "SourceUnavailable",
]
