"""One data-load cycle: fetch rows, pick the requested biomarkers, build entities."""

from collections.abc import Sequence
from dataclasses import replace

from bioranges.ingestion.base import BaseRowSource
from bioranges.ingestion.exceptions import RequiredBiomarkerMissing, SourceUnavailable
from bioranges.logging.logger import Log
from bioranges.normalization.base import BaseRowNormalizer
from bioranges.normalization.builder import DEFAULT_DEMOGRAPHIC, RowNormalizer
from bioranges.normalization.models import BiomarkerEntity, RawRow
from bioranges.selection import (
    DEFAULT_QUERIES,
    BiomarkerQuery,
    detect_demographic,
    filter_valid_rows,
    find_row,
    row_name,
)


class BiomarkerLoader:
    """Runs a load cycle; every call returns freshly built entities."""

    def __init__(
        self,
        source: BaseRowSource,
        queries: Sequence[BiomarkerQuery] = DEFAULT_QUERIES,
        demographic_candidates: Sequence[str] = ("Male_18-39", "Male_18_39"),
        default_demographic: str = DEFAULT_DEMOGRAPHIC,
        normalizer: BaseRowNormalizer | None = None,
    ) -> None:
        self._source = source
        self._queries = tuple(queries)
        self._demographic_candidates = tuple(demographic_candidates)
        self._default_demographic = default_demographic
        self._normalizer = normalizer if normalizer is not None else RowNormalizer(
            default_demographic
        )

    def load(self) -> list[BiomarkerEntity]:
        rows = self._source.fetch_rows()
        if not rows:
            raise SourceUnavailable("No data received from CSV")

        filtered = filter_valid_rows(rows)
        names = [name for name in (row_name(row) for row in filtered) if name]
        Log.info(f"Rows received: {len(rows)} total, {len(filtered)} after filtering")
        Log.debug(f"Available biomarkers: {names}")

        found: list[tuple[BiomarkerQuery, RawRow]] = []
        missing: list[str] = []
        for query in self._queries:
            row = find_row(filtered, query)
            if row is None:
                missing.append(query.label)
            else:
                found.append((query, row))

        if missing:
            for label in missing:
                Log.error(f"{label} not found. Available biomarkers: {names}")
            raise RequiredBiomarkerMissing(
                f"Required biomarker data not found in CSV: {', '.join(missing)}. "
                f"Found {len(rows)} total rows, {len(filtered)} filtered rows. "
                f"Available biomarkers: {', '.join(names)}"
            )
        if not found:
            return []

        demographic = detect_demographic(
            found[0][1],
            self._demographic_candidates,
            self._default_demographic,
        )
        Log.info(f"Using demographic {demographic}")

        entities: list[BiomarkerEntity] = []
        for query, row in found:
            entity = self._normalizer.build(row, query.current_value, demographic)
            if query.display_name:
                entity = replace(entity, name=query.display_name)
            entities.append(entity)
        return entities
