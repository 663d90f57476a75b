"""Tests for the declarative cycle solver."""

import pytest

from vcrc.core.errors import ConfigurationError, ValidationError
from vcrc.cycle.components import Condenser, GasCooler
from vcrc.cycle.simple import SimpleVCRC
from vcrc.cycle.solver import CycleDefinition, CycleType, build_heat_releaser, solve_cycle
from vcrc.cycle.two_stage import VCRCWithCIC, VCRCWithEconomizer, VCRCWithIIC


class TestCycleDefinition:
    def test_defaults(self):
        defn = CycleDefinition()
        assert defn.cycle_type == CycleType.SIMPLE
        assert defn.refrigerant == "R32"
        assert defn.gas_cooler_temperature is None
        assert not defn.optimize_intermediate_pressure

    def test_to_dict(self):
        d = CycleDefinition(cycle_type=CycleType.ECONOMIZER).to_dict()
        assert d["cycle_type"] == "economizer"
        assert d["compressor_efficiency"] == 0.8

    def test_from_dict(self):
        defn = CycleDefinition.from_dict(
            {"cycle_type": "complete_intercooling", "refrigerant": "R134a", "superheat": 8.0}
        )
        assert defn.cycle_type == CycleType.COMPLETE_INTERCOOLING
        assert defn.refrigerant == "R134a"
        assert defn.superheat == 8.0
        assert defn.subcooling == 3.0

    def test_dict_roundtrip(self):
        defn = CycleDefinition(cycle_type=CycleType.ECONOMIZER, intermediate_pressure=1.5e6)
        assert CycleDefinition.from_dict(defn.to_dict()) == defn

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="thrust"):
            CycleDefinition.from_dict({"thrust": 1000.0})

    def test_unknown_cycle_type(self):
        with pytest.raises(ConfigurationError, match="Unknown cycle type"):
            CycleDefinition.from_dict({"cycle_type": "cascade"})


class TestBuildHeatReleaser:
    def test_condenser(self):
        assert isinstance(build_heat_releaser(CycleDefinition()), Condenser)

    def test_gas_cooler(self):
        defn = CycleDefinition(refrigerant="R744", gas_cooler_temperature=308.15)
        assert isinstance(build_heat_releaser(defn), GasCooler)

    def test_missing_heat_releaser(self):
        with pytest.raises(ConfigurationError):
            build_heat_releaser(CycleDefinition(condensing_temperature=None))


class TestSolveCycle:
    def test_simple(self):
        cycle = solve_cycle(CycleDefinition())
        assert isinstance(cycle, SimpleVCRC)
        assert cycle.eer > 0
        assert cycle.cop == pytest.approx(cycle.eer + 1, rel=1e-6)

    def test_economizer(self):
        cycle = solve_cycle(CycleDefinition(cycle_type=CycleType.ECONOMIZER))
        assert isinstance(cycle, VCRCWithEconomizer)
        assert cycle.economizer.temperature_difference == 7.0

    def test_complete_intercooling(self):
        cycle = solve_cycle(CycleDefinition(cycle_type=CycleType.COMPLETE_INTERCOOLING))
        assert isinstance(cycle, VCRCWithCIC)

    def test_incomplete_intercooling(self):
        defn = CycleDefinition.from_dict({"cycle_type": "incomplete_intercooling"})
        cycle = solve_cycle(defn)
        assert isinstance(cycle, VCRCWithIIC)
        assert cycle.cycle_type == defn.cycle_type.value

    def test_transcritical_intermediate_flow_is_rejected(self):
        defn = CycleDefinition(
            cycle_type=CycleType.COMPLETE_INTERCOOLING,
            refrigerant="R744",
            evaporating_temperature=263.15,
            gas_cooler_temperature=308.15,
        )
        with pytest.raises(ConfigurationError, match="Intermediate specific mass flow"):
            solve_cycle(defn)

    def test_explicit_intermediate_pressure(self):
        cycle = solve_cycle(
            CycleDefinition(cycle_type=CycleType.COMPLETE_INTERCOOLING, intermediate_pressure=1.6e6)
        )
        assert cycle.intermediate_pressure == 1.6e6

    def test_optimized_intermediate_pressure(self):
        default = solve_cycle(CycleDefinition(cycle_type=CycleType.COMPLETE_INTERCOOLING))
        optimized = solve_cycle(
            CycleDefinition(
                cycle_type=CycleType.COMPLETE_INTERCOOLING, optimize_intermediate_pressure=True
            )
        )
        assert optimized.eer >= default.eer * (1 - 1e-4)

    def test_transcritical(self):
        cycle = solve_cycle(
            CycleDefinition(refrigerant="R744", gas_cooler_temperature=308.15)
        )
        assert cycle.is_transcritical

    def test_zeotropic_refrigerant(self):
        with pytest.raises(ValidationError):
            solve_cycle(CycleDefinition(refrigerant="R407C"))

    def test_logs_cycle_type(self, caplog):
        with caplog.at_level("INFO", logger="vcrc.cycle.solver"):
            solve_cycle(CycleDefinition())
        assert "Solving simple cycle with R32" in caplog.text
