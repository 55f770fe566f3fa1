import csv
import io

from bioranges.ingestion.exceptions import NoValidRows, SourceUnavailable
from bioranges.logging.logger import Log
from bioranges.normalization.models import RawRow
from bioranges.selection import filter_valid_rows


def decode_csv(text: str) -> list[RawRow]:
    """Decode delimited text with a header row into raw rows.

    Header names are stripped. Lines where every cell is empty are skipped.
    Cells missing from short lines come back as None.

    Raises:
        SourceUnavailable: if the text is not readable as CSV.
    """
    reader = csv.DictReader(io.StringIO(text), restval=None)
    rows: list[RawRow] = []
    try:
        if reader.fieldnames is not None:
            reader.fieldnames = [name.strip() for name in reader.fieldnames]
        for record in reader:
            record.pop(None, None)  # type: ignore[call-overload]
            if not any(cell for cell in record.values()):
                continue
            rows.append(record)
    except csv.Error as exc:
        raise SourceUnavailable(f"Malformed CSV: {exc}") from exc
    return rows


def decode_valid_rows(text: str, source_label: str) -> list[RawRow]:
    """Decode and pre-filter rows; raise when nothing usable remains."""
    rows = decode_csv(text)
    valid = filter_valid_rows(rows)
    Log.info(f"{source_label} CSV parsed: {len(rows)} total, {len(valid)} valid rows")
    if rows:
        Log.debug(f"{source_label} CSV headers: {list(rows[0])}")
    if not valid:
        raise NoValidRows(f"No valid data rows found in {source_label} CSV")
    return valid
