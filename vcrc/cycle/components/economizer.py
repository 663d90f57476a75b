"""Economizer component."""

from __future__ import annotations

from typing import Any

from vcrc.core.errors import ConfigurationError
from vcrc.cycle.components.base import CycleComponent
from vcrc.cycle.validators import validate_economizer


class Economizer(CycleComponent):
    """Auxiliary heat exchanger subcooling the main flow with the intermediate flow.

    Args:
        temperature_difference: Temperature difference at the "cold" side [K].
        superheat: Superheat of the intermediate flow at the outlet [K].
        name: Component name.
    """

    component_type = "economizer"

    def __init__(self, temperature_difference: float, superheat: float, name: str = "economizer"):
        self.name = name
        self._temperature_difference = temperature_difference
        self._superheat = superheat
        validate_economizer(self).raise_if_invalid(ConfigurationError)

    @property
    def temperature_difference(self) -> float:
        return self._temperature_difference

    @property
    def superheat(self) -> float:
        return self._superheat

    def summary(self) -> dict[str, Any]:
        d = super().summary()
        d["temperature_difference_K"] = self.temperature_difference
        d["superheat_K"] = self.superheat
        return d
