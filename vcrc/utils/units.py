"""Unit conversion utilities for VCRC.

Provides a lightweight unit conversion system built on top of pint,
with convenience functions for the quantities a refrigeration engineer
usually types in (°C, K differences, bar, kJ/kg).
"""

from __future__ import annotations

from functools import lru_cache

import pint

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()
_ureg.default_format = "~P"  # short pretty format


def get_unit_registry() -> pint.UnitRegistry:
    """Return the shared pint UnitRegistry instance."""
    return _ureg


Q_ = _ureg.Quantity


def pressure_to_si(value: float, unit: str) -> float:
    """Convert pressure value to Pascals.

    Args:
        value: Numeric pressure value.
        unit: Source unit string (e.g. "bar", "psi", "MPa", "kPa").

    Returns:
        Pressure in Pa.
    """
    return Q_(value, unit).to("Pa").magnitude


def pressure_from_si(value_pa: float, unit: str) -> float:
    """Convert pressure from Pascals to target unit."""
    return Q_(value_pa, "Pa").to(unit).magnitude


def temperature_to_si(value: float, unit: str) -> float:
    """Convert an absolute temperature to Kelvin.

    Args:
        value: Numeric temperature value.
        unit: Source unit string (e.g. "degC", "degF", "K").

    Returns:
        Temperature in K.
    """
    return Q_(value, unit).to("K").magnitude


def temperature_from_si(value_k: float, unit: str) -> float:
    """Convert an absolute temperature from Kelvin to target unit."""
    return Q_(value_k, "K").to(unit).magnitude


def temperature_delta_to_si(value: float, unit: str) -> float:
    """Convert a temperature difference to Kelvin.

    Offset units are interpreted as differences, so ``5 degC`` becomes
    ``5 K`` rather than ``278.15 K``.
    """
    if unit in ("degC", "degF", "celsius", "fahrenheit"):
        unit = f"delta_{unit}"
    return Q_(value, unit).to("K").magnitude


def specific_energy_from_si(value_j_kg: float, unit: str = "kJ/kg") -> float:
    """Convert a specific energy from J/kg to target unit."""
    return Q_(value_j_kg, "J/kg").to(unit).magnitude


@lru_cache(maxsize=256)
def convert(value: float, from_unit: str, to_unit: str) -> float:
    """General-purpose unit conversion.

    Args:
        value: Numeric value in *from_unit*.
        from_unit: Source unit string.
        to_unit: Target unit string.

    Returns:
        Converted numeric value.
    """
    return Q_(value, from_unit).to(to_unit).magnitude
