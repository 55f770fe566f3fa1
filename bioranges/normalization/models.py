from dataclasses import dataclass

from bioranges.ranges.models import HistoricalPoint, RangeSet, Status

RawRow = dict[str, str | None]


@dataclass(frozen=True)
class BiomarkerEntity:
    """A biomarker reading normalized against one demographic's reference bands."""

    name: str
    unit: str
    value: float
    status: Status
    ranges: RangeSet
    graph_min: float
    graph_max: float
    historical_data: tuple[HistoricalPoint, ...] | None = None

    def to_dict(self) -> dict[str, object]:
        """JSON-ready representation."""
        history = None
        if self.historical_data is not None:
            history = [
                {"value": point.value, "date": point.date, "status": point.status.value}
                for point in self.historical_data
            ]
        return {
            "name": self.name,
            "unit": self.unit,
            "value": self.value,
            "status": self.status.value,
            "ranges": self.ranges.to_dict(),
            "graph_min": self.graph_min,
            "graph_max": self.graph_max,
            "historical_data": history,
        }
