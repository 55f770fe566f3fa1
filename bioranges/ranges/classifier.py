from bioranges.ranges.models import RangeSet, Status


def classify(value: float, ranges: RangeSet) -> Status:
    """Return the band ``value`` falls in.

    Optimal is checked before in-range, so overlapping bands resolve to
    optimal. A RangeSet with no bands yields out-of-range.
    """
    if ranges.optimal is not None and ranges.optimal.contains(value):
        return Status.OPTIMAL
    if ranges.in_range is not None and ranges.in_range.contains(value):
        return Status.IN_RANGE
    return Status.OUT_OF_RANGE
