"""Tests for utility modules."""

import pytest

from vcrc.utils.constants import BAR_TO_PA, P_ATM, T_CELSIUS_OFFSET
from vcrc.utils.units import (
    convert,
    get_unit_registry,
    pressure_from_si,
    pressure_to_si,
    specific_energy_from_si,
    temperature_delta_to_si,
    temperature_from_si,
    temperature_to_si,
)


class TestConstants:
    def test_p_atm(self):
        assert P_ATM == pytest.approx(101325.0)

    def test_celsius_offset(self):
        assert T_CELSIUS_OFFSET == pytest.approx(273.15)

    def test_bar_conversion(self):
        assert BAR_TO_PA == pytest.approx(1e5)


class TestUnits:
    def test_pressure_bar_to_pa(self):
        assert pressure_to_si(1.0, "bar") == pytest.approx(1e5, rel=1e-4)

    def test_pressure_psi_to_pa(self):
        assert pressure_to_si(14.696, "psi") == pytest.approx(101325, rel=1e-2)

    def test_pressure_from_si(self):
        assert pressure_from_si(2.5e6, "MPa") == pytest.approx(2.5)

    def test_temperature_celsius_to_kelvin(self):
        assert temperature_to_si(0, "degC") == pytest.approx(273.15, rel=1e-4)

    def test_temperature_fahrenheit_to_kelvin(self):
        assert temperature_to_si(32, "degF") == pytest.approx(273.15, rel=1e-4)

    def test_temperature_from_si(self):
        assert temperature_from_si(318.15, "degC") == pytest.approx(45.0)

    def test_temperature_delta(self):
        assert temperature_delta_to_si(5.0, "degC") == pytest.approx(5.0)
        assert temperature_delta_to_si(5.0, "K") == pytest.approx(5.0)
        assert temperature_delta_to_si(9.0, "degF") == pytest.approx(5.0)

    def test_specific_energy(self):
        assert specific_energy_from_si(250e3) == pytest.approx(250.0)

    def test_convert(self):
        assert convert(1.0, "MPa", "bar") == pytest.approx(10.0)

    def test_registry_is_shared(self):
        assert get_unit_registry() is get_unit_registry()
