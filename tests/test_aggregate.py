"""Tests for averaging entropy analyses over operating conditions."""

import pytest

from vcrc.core.errors import ArgumentError, ValidationError
from vcrc.cycle.components import Compressor, Condenser, Evaporator
from vcrc.cycle.simple import SimpleVCRC
from vcrc.entropy.aggregate import aggregate_analysis, average_results
from vcrc.entropy.analyzer import analyze
from vcrc.entropy.result import Loss


def _celsius(t: float) -> float:
    return t + 273.15


def _cycle(indoor: float, outdoor: float) -> SimpleVCRC:
    return SimpleVCRC(
        Evaporator("R32", _celsius(indoor - 7), 5.0),
        Compressor(0.8),
        Condenser("R32", _celsius(outdoor + 10), 3.0),
    )


INDOOR = [18, 19, 20, 21, 22]
OUTDOOR = [36, 37, 38, 39, 40]


@pytest.fixture(scope="module")
def cycles():
    return [_cycle(i, o) for i, o in zip(INDOOR, OUTDOOR)]


class TestAggregateAnalysis:
    def test_operating_range(self, cycles):
        cold = [_celsius(t) for t in INDOOR]
        hot = [_celsius(t) for t in OUTDOOR]
        result = aggregate_analysis(cycles, cold, hot)
        singles = [analyze(c, tc, th) for c, tc, th in zip(cycles, cold, hot)]
        expected = sum(r.thermodynamic_perfection for r in singles) / len(singles)
        assert result.thermodynamic_perfection == pytest.approx(expected)
        assert sum(result.loss_fractions.values()) == pytest.approx(1.0)
        assert result.energy_loss_ratios[Loss.COMPRESSOR] == pytest.approx(0.2)

    def test_identical_conditions(self, cycles):
        cycle = cycles[0]
        single = analyze(cycle, _celsius(18), _celsius(36))
        result = aggregate_analysis([cycle] * 7, [_celsius(18)] * 7, [_celsius(36)] * 7)
        assert result == single
        assert result.thermodynamic_perfection == single.thermodynamic_perfection
        assert result.loss_fractions == single.loss_fractions

    def test_length_mismatch(self, cycles):
        cold = [_celsius(t) for t in INDOOR]
        hot = [_celsius(t) for t in OUTDOOR]
        with pytest.raises(ArgumentError, match="The lists should have the same length!"):
            aggregate_analysis(cycles + [cycles[0]], cold, hot)

    def test_empty(self):
        with pytest.raises(ArgumentError):
            aggregate_analysis([], [], [])

    def test_invalid_condition_propagates(self, cycles):
        with pytest.raises(ValidationError):
            aggregate_analysis(cycles[:1], [_celsius(20)], [_celsius(20)])


class TestAverageResults:
    def test_mean_of_two(self, cycles):
        a = analyze(cycles[0], _celsius(18), _celsius(36))
        b = analyze(cycles[-1], _celsius(22), _celsius(40))
        mean = average_results([a, b])
        assert mean.eer == pytest.approx((a.eer + b.eer) / 2)
        assert mean.analysis_relative_error == pytest.approx(
            (a.analysis_relative_error + b.analysis_relative_error) / 2
        )
        for loss in Loss:
            assert mean.loss_fractions[loss] == pytest.approx(
                (a.loss_fractions[loss] + b.loss_fractions[loss]) / 2
            )

    def test_returns_plain_floats(self, cycles):
        result = average_results([analyze(cycles[0], _celsius(18), _celsius(36))])
        assert type(result.eer) is float
        assert all(type(v) is float for v in result.exergy_destruction.values())

    def test_empty(self):
        with pytest.raises(ArgumentError):
            average_results([])
