"""Builds BiomarkerEntity objects from raw spreadsheet rows."""

from bioranges.logging.logger import Log
from bioranges.normalization.aliases import (
    GRAPH_RANGE_COLUMNS,
    IN_RANGE_SUFFIX,
    NAME_COLUMNS,
    OPTIMAL_SUFFIX,
    OUT_OF_RANGE_SUFFIX,
    UNIT_COLUMNS,
    range_columns,
    resolve_alias,
)
from bioranges.normalization.base import BaseRowNormalizer
from bioranges.normalization.models import BiomarkerEntity, RawRow
from bioranges.ranges.bounds import graph_bounds
from bioranges.ranges.classifier import classify
from bioranges.ranges.history import extract_history
from bioranges.ranges.models import RangeSet
from bioranges.ranges.parser import parse_range

DEFAULT_DEMOGRAPHIC = "Male_18-39"


class RowNormalizer(BaseRowNormalizer):
    """Resolves column aliases and assembles the entity from parsed ranges."""

    def __init__(self, default_demographic: str = DEFAULT_DEMOGRAPHIC) -> None:
        self._default_demographic = default_demographic

    def build(
        self,
        row: RawRow,
        current_value: float,
        demographic: str | None = None,
    ) -> BiomarkerEntity:
        demographic = demographic or self._default_demographic
        ranges = self._read_ranges(row, demographic)
        bounds = graph_bounds(ranges, parse_range(resolve_alias(row, GRAPH_RANGE_COLUMNS)))
        history = extract_history(row, ranges)

        return BiomarkerEntity(
            name=resolve_alias(row, NAME_COLUMNS) or "",
            unit=resolve_alias(row, UNIT_COLUMNS) or "",
            value=current_value,
            status=classify(current_value, ranges),
            ranges=ranges,
            graph_min=bounds.min,
            graph_max=bounds.max,
            historical_data=tuple(history) if history else None,
        )

    @staticmethod
    def _read_ranges(row: RawRow, demographic: str) -> RangeSet:
        optimal = resolve_alias(row, range_columns(demographic, OPTIMAL_SUFFIX))
        in_range = resolve_alias(row, range_columns(demographic, IN_RANGE_SUFFIX))
        out_of_range = resolve_alias(row, range_columns(demographic, OUT_OF_RANGE_SUFFIX))

        if not optimal and not in_range and not out_of_range:
            Log.warning(
                f"No range data found for demographic {demographic}. "
                f"Available keys: {list(row)}"
            )

        return RangeSet(
            optimal=parse_range(optimal),
            in_range=parse_range(in_range),
            out_of_range=parse_range(out_of_range),
        )


def build_entity(
    row: RawRow,
    current_value: float,
    demographic: str = DEFAULT_DEMOGRAPHIC,
) -> BiomarkerEntity:
    """Module-level shortcut for ``RowNormalizer().build``."""
    return RowNormalizer().build(row, current_value, demographic)
