from bioranges.normalization.indicator import optimal_deviation, value_position
from bioranges.normalization.models import BiomarkerEntity
from bioranges.ranges.models import Interval, RangeSet, Status


def _make_entity(
    value: float,
    graph_min: float = 0.0,
    graph_max: float = 100.0,
    optimal: Interval | None = Interval(80, 100),
) -> BiomarkerEntity:
    return BiomarkerEntity(
        name="Metabolic Health Score",
        unit="score",
        value=value,
        status=Status.OPTIMAL,
        ranges=RangeSet(optimal=optimal),
        graph_min=graph_min,
        graph_max=graph_max,
    )


class TestValuePosition:
    def test_inside_viewport(self) -> None:
        assert value_position(_make_entity(25)) == 25.0

    def test_clamped(self) -> None:
        assert value_position(_make_entity(150)) == 100.0
        assert value_position(_make_entity(-5)) == 0.0

    def test_zero_width_viewport(self) -> None:
        assert value_position(_make_entity(5, graph_min=5, graph_max=5)) == 0.0


class TestOptimalDeviation:
    def test_below_midpoint(self) -> None:
        assert optimal_deviation(_make_entity(78)) == "-13%"

    def test_above_midpoint(self) -> None:
        assert optimal_deviation(_make_entity(99)) == "+10%"

    def test_at_midpoint(self) -> None:
        assert optimal_deviation(_make_entity(90)) == "+0%"

    def test_half_rounds_up(self) -> None:
        assert optimal_deviation(_make_entity(9, optimal=Interval(0, 16))) == "+13%"
        assert optimal_deviation(_make_entity(7, optimal=Interval(0, 16))) == "-12%"

    def test_without_optimal_band(self) -> None:
        assert optimal_deviation(_make_entity(78, optimal=None)) == "+0%"

    def test_zero_midpoint(self) -> None:
        assert optimal_deviation(_make_entity(1, optimal=Interval(0, 0))) is None

    def test_small_negative_deviation_has_no_plus_sign(self) -> None:
        assert optimal_deviation(_make_entity(89.7)) == "0%"
