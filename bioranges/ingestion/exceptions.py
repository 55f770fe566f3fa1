class IngestionError(Exception):
    """Base exception for everything that can abort a data load."""


class SourceUnavailable(IngestionError):
    """Raised when no raw rows can be obtained from any source."""


class NoValidRows(IngestionError):
    """Raised when a source returns rows but none carry a usable biomarker name."""


class RequiredBiomarkerMissing(IngestionError):
    """Raised when the biomarkers the caller needs are absent after filtering."""
