"""Row validity filtering, biomarker lookup and demographic detection."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from bioranges.normalization.aliases import NAME_COLUMNS, OPTIMAL_SUFFIX, resolve_alias
from bioranges.normalization.models import RawRow


def row_name(row: RawRow) -> str | None:
    """Stripped biomarker name, or None when the row has no usable name."""
    name = resolve_alias(row, NAME_COLUMNS)
    if name is None:
        return None
    return name.strip() or None


def is_valid_row(row: RawRow) -> bool:
    """Reject blank names and the auxiliary "Graph Value" / "value:" rows."""
    name = row_name(row)
    if name is None:
        return False
    return "Graph Value" not in name and "value:" not in name.lower()


def filter_valid_rows(rows: Iterable[RawRow]) -> list[RawRow]:
    return [row for row in rows if is_valid_row(row)]


@dataclass(frozen=True)
class BiomarkerQuery:
    """Declares how to find one biomarker's row and which reading to classify.

    A row matches on an exact name, or on a case-sensitive ``prefix``, or on
    a case-insensitive ``contains`` substring. The looser rules never match
    a name containing "Graph".
    """

    label: str
    exact_names: tuple[str, ...]
    prefix: str | None = None
    contains: str | None = None
    current_value: float = 0.0
    display_name: str | None = None

    def matches(self, name: str) -> bool:
        if name in self.exact_names:
            return True
        if "Graph" in name:
            return False
        if self.prefix is not None and name.startswith(self.prefix):
            return True
        return self.contains is not None and self.contains.lower() in name.lower()


METABOLIC_HEALTH = BiomarkerQuery(
    label="Metabolic Health Score",
    exact_names=("Metabolic Health Score",),
    prefix="Metabolic",
    current_value=78,
)
CREATININE = BiomarkerQuery(
    label="Creatinine",
    exact_names=("Creatine", "Creatinine"),
    contains="creatin",
    current_value=0.63,
    display_name="Creatinine",
)
DEFAULT_QUERIES: tuple[BiomarkerQuery, ...] = (METABOLIC_HEALTH, CREATININE)


def find_row(rows: Iterable[RawRow], query: BiomarkerQuery) -> RawRow | None:
    for row in rows:
        name = row_name(row)
        if name is not None and query.matches(name):
            return row
    return None


def detect_demographic(
    row: RawRow,
    candidates: Sequence[str] = ("Male_18-39", "Male_18_39"),
    default: str = "Male_18-39",
) -> str:
    """First candidate whose Optimal column is filled in, else ``default``."""
    for candidate in candidates:
        column = f"{candidate}_{OPTIMAL_SUFFIX}"
        if row.get(column) or row.get(column.replace("-", "_")):
            return candidate
    return default
