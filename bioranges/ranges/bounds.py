from bioranges.ranges.models import Interval, RangeSet

_PADDING_RATIO = 0.1
FALLBACK_VIEWPORT = Interval(0.0, 1.0)


def graph_bounds(ranges: RangeSet, override: Interval | None = None) -> Interval:
    """Chart viewport covering every present band plus 10% padding per side.

    An explicit override wins. With no bands at all the viewport falls back
    to (0, 1). The lower bound never goes below zero.
    """
    if override is not None:
        return override

    intervals = ranges.intervals()
    if not intervals:
        return FALLBACK_VIEWPORT

    low = min(interval.min for interval in intervals)
    high = max(interval.max for interval in intervals)
    padding = (high - low) * _PADDING_RATIO
    return Interval(max(0.0, low - padding), high + padding)
