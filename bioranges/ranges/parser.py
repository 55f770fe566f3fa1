"""Parses compact reference-range expressions such as ``70-120``, ``<5`` or ``>10``."""

import re

from bioranges.ranges.models import Interval

_BETWEEN = re.compile(r"^([\d.]+)-([\d.]+)$")
_LESS_THAN = re.compile(r"^<([\d.]+)$")
_GREATER_THAN = re.compile(r"^>([\d.]+)$")

# Open-ended ranges get a synthetic ceiling so they fit a bounded viewport.
# The factor is a rendering heuristic, not a clinical limit.
_GREATER_THAN_CEILING_FACTOR = 2.0


def parse_range(text: str | None) -> Interval | None:
    """Parse a range expression into an Interval.

    Returns None for a blank input or any form that is not recognized;
    callers treat None as "no constraint".
    """
    if text is None:
        return None
    cleaned = text.strip()
    if not cleaned:
        return None

    match = _BETWEEN.match(cleaned)
    if match:
        low, high = _to_float(match.group(1)), _to_float(match.group(2))
        if low is None or high is None:
            return None
        return Interval(low, high)

    match = _LESS_THAN.match(cleaned)
    if match:
        bound = _to_float(match.group(1))
        return Interval(0.0, bound) if bound is not None else None

    match = _GREATER_THAN.match(cleaned)
    if match:
        bound = _to_float(match.group(1))
        if bound is None:
            return None
        return Interval(bound, bound * _GREATER_THAN_CEILING_FACTOR)

    return None


def _to_float(raw: str) -> float | None:
    try:
        return float(raw)
    except ValueError:
        return None
