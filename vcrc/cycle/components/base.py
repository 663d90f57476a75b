"""Base classes for cycle components.

Defines the common interface for all cycle components
(evaporator, compressor, heat releasers, economizer).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from vcrc.core.fluids import CyclePoint, Refrigerant


class CycleComponent(ABC):
    """Abstract base class for a cycle component.

    A component holds declarative operating parameters, validated on
    construction and never changed afterwards.
    """

    name: str = ""
    component_type: str = ""

    def summary(self) -> dict[str, Any]:
        """Return a summary dictionary of the component parameters."""
        return {
            "name": self.name,
            "type": self.component_type,
        }


class HeatExchangerComponent(CycleComponent):
    """A component that exchanges heat with an external source at one pressure.

    Subclasses resolve their boundary ``outlet`` point once, on
    construction, from their own parameters.
    """

    def __init__(self, refrigerant_name: str, temperature: float):
        self._refrigerant = Refrigerant(refrigerant_name)
        self._temperature = temperature

    @property
    def refrigerant_name(self) -> str:
        return self._refrigerant.name

    @property
    def refrigerant(self) -> Refrigerant:
        return self._refrigerant

    @property
    def temperature(self) -> float:
        """Characteristic temperature [K]."""
        return self._temperature

    @property
    def pressure(self) -> float:
        """Absolute operating pressure [Pa]."""
        return self.outlet.pressure

    @property
    @abstractmethod
    def outlet(self) -> CyclePoint:
        """Refrigerant state at the component outlet."""
        ...

    def summary(self) -> dict[str, Any]:
        d = super().summary()
        d["refrigerant"] = self.refrigerant_name
        d["temperature_K"] = self.temperature
        d["pressure_bar"] = self.pressure / 1e5
        return d


class HeatReleaser(HeatExchangerComponent):
    """Condenser (subcritical cycles) or gas cooler (transcritical cycles)."""
