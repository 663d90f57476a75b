"""Tests for the simple vapor-compression refrigeration cycle."""

import pytest

from vcrc.core.fluids import Phase
from vcrc.cycle.components import Compressor, Condenser, Evaporator, GasCooler
from vcrc.cycle.simple import SimpleVCRC
from vcrc.entropy.nodes import EvaporatorNode, ExpansionValveNode, HeatReleaserNode
from vcrc.entropy.result import Loss


def _celsius(t: float) -> float:
    return t + 273.15


def _subcritical() -> SimpleVCRC:
    """R32 cycle: 5 °C / 8 K superheat, η = 0.8, 45 °C / 3 K subcooling."""
    return SimpleVCRC(
        Evaporator("R32", _celsius(5), 8.0),
        Compressor(0.8),
        Condenser("R32", _celsius(45), 3.0),
    )


def _transcritical() -> SimpleVCRC:
    return SimpleVCRC(
        Evaporator("R744", _celsius(5), 8.0),
        Compressor(0.8),
        GasCooler("R744", _celsius(35)),
    )


@pytest.fixture(scope="module")
def cycle():
    return _subcritical()


class TestSubcriticalPoints:
    def test_point1_is_evaporator_outlet(self, cycle):
        assert cycle.point1 == cycle.evaporator.outlet
        assert cycle.point1.phase == Phase.GAS

    def test_point2s_is_isentropic_discharge(self, cycle):
        assert cycle.point2s.entropy == pytest.approx(cycle.point1.entropy, rel=1e-6)
        assert cycle.point2s.pressure == pytest.approx(cycle.condenser.pressure)

    def test_point2_is_real_discharge(self, cycle):
        expected = cycle.point1.enthalpy + (cycle.point2s.enthalpy - cycle.point1.enthalpy) / 0.8
        assert cycle.point2.enthalpy == pytest.approx(expected, rel=1e-6)
        assert cycle.point2.temperature > cycle.point2s.temperature

    def test_point3_is_condenser_outlet(self, cycle):
        assert cycle.point3 == cycle.condenser.outlet
        assert cycle.point3.phase == Phase.LIQUID

    def test_point4_is_evaporator_inlet(self, cycle):
        assert cycle.point4.enthalpy == pytest.approx(cycle.point3.enthalpy, rel=1e-6)
        assert cycle.point4.pressure == pytest.approx(cycle.evaporator.pressure)
        assert cycle.point4.phase == Phase.TWO_PHASE

    def test_points_in_flow_order(self, cycle):
        assert list(cycle.points) == ["1", "2s", "2", "3", "4"]


class TestSubcriticalMetrics:
    def test_components(self, cycle):
        assert not cycle.is_transcritical
        assert cycle.condenser is cycle.heat_releaser
        assert cycle.gas_cooler is None
        assert cycle.refrigerant.name == "R32"

    def test_mass_flows(self, cycle):
        assert cycle.evaporator_specific_mass_flow == 1.0
        assert cycle.heat_releaser_specific_mass_flow == 1.0

    def test_isentropic_work(self, cycle):
        assert cycle.isentropic_specific_work == pytest.approx(
            cycle.point2s.enthalpy - cycle.point1.enthalpy
        )

    def test_specific_work(self, cycle):
        assert cycle.specific_work == pytest.approx(cycle.isentropic_specific_work / 0.8)

    def test_capacities(self, cycle):
        assert cycle.specific_cooling_capacity == pytest.approx(
            cycle.point1.enthalpy - cycle.point4.enthalpy
        )
        assert cycle.specific_heating_capacity == pytest.approx(
            cycle.point2.enthalpy - cycle.point3.enthalpy
        )

    def test_eer(self, cycle):
        assert cycle.eer == pytest.approx(cycle.specific_cooling_capacity / cycle.specific_work)
        assert cycle.eer == pytest.approx(4.326011919496399, rel=1e-3)

    def test_cop(self, cycle):
        assert cycle.cop == pytest.approx(5.326011919496398, rel=1e-3)
        assert cycle.cop == pytest.approx(cycle.eer + 1, rel=1e-6)

    def test_energy_balance(self, cycle):
        assert cycle.energy_balance_error < 1e-6

    def test_summary(self, cycle):
        d = cycle.summary()
        assert d["cycle_type"] == "simple"
        assert d["eer"] == pytest.approx(cycle.eer)
        assert len(d["components"]) == 3
        assert set(d["points"]) == {"1", "2s", "2", "3", "4"}

    def test_repr(self, cycle):
        assert "SimpleVCRC" in repr(cycle)


class TestEntropyNodes:
    def test_nodes(self, cycle):
        nodes = cycle.entropy_nodes()
        assert [type(n) for n in nodes] == [EvaporatorNode, HeatReleaserNode, ExpansionValveNode]
        assert nodes[1].loss == Loss.CONDENSER

    def test_valve_destroys_exergy(self, cycle):
        valve = cycle.entropy_nodes()[2]
        assert valve.exergy_destruction(_celsius(18), _celsius(35)) > 0


class TestCoolingAndHeatingCase:
    def test_r32_reference_case(self):
        """R32, 5 °C / 5 K superheat, η = 0.8, 45 °C / 3 K subcooling."""
        cycle = SimpleVCRC(
            Evaporator("R32", _celsius(5), 5.0),
            Compressor(0.8),
            Condenser("R32", _celsius(45), 3.0),
        )
        assert 0 < cycle.eer < float("inf")
        assert cycle.cop == pytest.approx(cycle.eer + 1, rel=1e-6)


class TestTranscritical:
    def test_gas_cooler(self):
        cycle = _transcritical()
        assert cycle.is_transcritical
        assert cycle.condenser is None
        assert cycle.gas_cooler is cycle.heat_releaser
        assert cycle.heat_releaser.pressure > cycle.refrigerant.critical_pressure

    def test_energy_balance(self):
        cycle = _transcritical()
        assert cycle.eer > 0
        assert cycle.cop == pytest.approx(cycle.eer + 1, rel=1e-6)
        assert cycle.entropy_nodes()[1].loss == Loss.GAS_COOLER
