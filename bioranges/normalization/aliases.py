"""Column-name aliases for the inconsistently spelled spreadsheet headers."""

from bioranges.normalization.models import RawRow

# "Biomaker Name" is a misspelling that appears in some sheet exports.
NAME_COLUMNS: tuple[str, ...] = ("Biomarker_Name", "Biomaker Name")
UNIT_COLUMNS: tuple[str, ...] = ("Unit",)
GRAPH_RANGE_COLUMNS: tuple[str, ...] = ("Graph_Range",)

OPTIMAL_SUFFIX = "Optimal"
IN_RANGE_SUFFIX = "InRange"
OUT_OF_RANGE_SUFFIX = "OutOfRange"


def separator_variants(key: str) -> tuple[str, ...]:
    """The key as given, with hyphens as underscores, and with underscores as hyphens."""
    return (key, key.replace("-", "_"), key.replace("_", "-"))


def range_columns(demographic: str, suffix: str) -> tuple[str, ...]:
    return separator_variants(f"{demographic}_{suffix}")


def resolve_alias(row: RawRow, candidates: tuple[str, ...]) -> str | None:
    """First non-empty cell among ``candidates``, or None."""
    for column in candidates:
        cell = row.get(column)
        if cell:
            return cell
    return None
