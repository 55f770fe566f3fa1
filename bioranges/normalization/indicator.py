import math

from bioranges.normalization.models import BiomarkerEntity


def value_position(entity: BiomarkerEntity) -> float:
    """Where the current value sits in the chart viewport, as 0-100 percent."""
    span = entity.graph_max - entity.graph_min
    if span <= 0:
        return 0.0
    position = (entity.value - entity.graph_min) / span * 100
    return max(0.0, min(100.0, position))


def optimal_deviation(entity: BiomarkerEntity) -> str | None:
    """Signed whole-percent distance from the optimal band's midpoint, e.g. ``+12%``.

    The sign follows the unrounded deviation, so a small negative deviation
    reads ``0%`` rather than ``+0%``. Without an optimal band the result is
    ``+0%``. A zero midpoint has no percentage and gives None.
    """
    optimal = entity.ranges.optimal
    if optimal is None:
        return "+0%"
    midpoint = (optimal.min + optimal.max) / 2
    if midpoint == 0:
        return None
    deviation = (entity.value - midpoint) / midpoint * 100
    sign = "+" if deviation >= 0 else ""
    return f"{sign}{math.floor(deviation + 0.5)}%"
