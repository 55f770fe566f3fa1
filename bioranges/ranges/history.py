"""Extracts past readings from indexed ``DateN`` / ``ValueN`` column pairs."""

import math
import re
from datetime import datetime
from functools import cmp_to_key

from dateutil import parser as date_parser

from bioranges.ranges.classifier import classify
from bioranges.ranges.models import HistoricalPoint, RangeSet

_VALUE_MARKERS = ("value", "result", "reading")
_VALUE_EXCLUSIONS = ("range", "graph", "current")
_INDEX_PATTERN = re.compile(r"\d+")
_DEFAULT_DATE = datetime(1970, 1, 1)


def extract_history(
    row: dict[str, str | None],
    ranges: RangeSet,
) -> list[HistoricalPoint]:
    """Collect date/value pairs from the row, classified against ``ranges``.

    Incomplete or non-numeric pairs are skipped. The result is sorted by
    date ascending (see ``compare_dates``).
    """
    slots: dict[int, dict[str, str]] = {}
    for key, cell in row.items():
        slot = _slot_kind(key)
        if slot is None:
            continue
        index = _slot_index(key)
        slots.setdefault(index, {})[slot] = (cell or "").strip()

    points: list[HistoricalPoint] = []
    for index in sorted(slots):
        date = slots[index].get("date", "")
        value = _to_finite_float(slots[index].get("value", ""))
        if not date or value is None:
            continue
        points.append(HistoricalPoint(value=value, date=date, status=classify(value, ranges)))

    return sorted(points, key=cmp_to_key(lambda a, b: compare_dates(a.date, b.date)))


def compare_dates(left: str, right: str) -> int:
    """Chronological comparison, falling back to plain string order.

    When either side is not a recognizable date the pair is compared
    lexicographically. Mixing both strategies in one series is not a strict
    total order, so the result for such series depends on input order.
    """
    left_ts = _timestamp(left)
    right_ts = _timestamp(right)
    if left_ts is None or right_ts is None:
        return (left > right) - (left < right)
    return (left_ts > right_ts) - (left_ts < right_ts)


def _slot_kind(key: str) -> str | None:
    lowered = key.lower().strip()
    if "date" in lowered and "range" not in lowered:
        return "date"
    if any(marker in lowered for marker in _VALUE_MARKERS) and not any(
        excluded in lowered for excluded in _VALUE_EXCLUSIONS
    ):
        return "value"
    return None


def _slot_index(key: str) -> int:
    match = _INDEX_PATTERN.search(key.lower())
    return int(match.group(0)) if match else 0


def _to_finite_float(raw: str) -> float | None:
    if not raw:
        return None
    try:
        number = float(raw)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def _timestamp(raw: str) -> float | None:
    try:
        return date_parser.parse(raw, default=_DEFAULT_DATE).timestamp()
    except (ValueError, OverflowError, OSError):
        return None
