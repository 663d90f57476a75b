"""Common contract of vapor-compression refrigeration cycle models.

A cycle is solved once, on construction, from its component
parameters. All specific quantities are per kilogram of refrigerant
circulating through the evaporator.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from vcrc.core.errors import ConfigurationError, ValidationError
from vcrc.core.fluids import CyclePoint, Refrigerant
from vcrc.cycle.components.base import HeatReleaser
from vcrc.cycle.components.compressor import Compressor
from vcrc.cycle.components.evaporator import Evaporator
from vcrc.cycle.components.heat_releaser import Condenser, GasCooler
from vcrc.cycle.validators import (
    validate_cycle,
    validate_no_glide,
    validate_refrigerant,
    validate_single_refrigerant,
)
from vcrc.entropy.nodes import EntropyNode

logger = logging.getLogger(__name__)


class VCRC(ABC):
    """Vapor-compression refrigeration cycle.

    Args:
        evaporator: Evaporator.
        compressor: Compressor.
        heat_releaser: Condenser (subcritical) or gas cooler (transcritical).

    Raises:
        ConfigurationError: If the components use different refrigerants or
            the condensing temperature does not exceed the evaporating one.
        ValidationError: If the fluid is not a suitable refrigerant or, for a
            subcritical cycle, it has a temperature glide.
    """

    cycle_type: str = ""

    def __init__(self, evaporator: Evaporator, compressor: Compressor, heat_releaser: HeatReleaser):
        self.evaporator = evaporator
        self.compressor = compressor
        self.heat_releaser = heat_releaser

        validate_single_refrigerant(self).raise_if_invalid(ConfigurationError)
        validate_refrigerant(self.refrigerant).raise_if_invalid(ValidationError)
        if not self.is_transcritical:
            validate_no_glide(
                self.refrigerant, evaporator.pressure, heat_releaser.pressure
            ).raise_if_invalid(ValidationError)
        validate_cycle(self).raise_if_invalid(ConfigurationError)

    # --- Components ---

    @property
    def refrigerant(self) -> Refrigerant:
        return self.evaporator.refrigerant

    @property
    def is_transcritical(self) -> bool:
        return isinstance(self.heat_releaser, GasCooler)

    @property
    def condenser(self) -> Condenser | None:
        return self.heat_releaser if isinstance(self.heat_releaser, Condenser) else None

    @property
    def gas_cooler(self) -> GasCooler | None:
        return self.heat_releaser if isinstance(self.heat_releaser, GasCooler) else None

    # --- State points ---

    @property
    @abstractmethod
    def points(self) -> dict[str, CyclePoint]:
        """Named state points in flow order, starting at the evaporator outlet."""
        ...

    @property
    @abstractmethod
    def evaporator_inlet(self) -> CyclePoint:
        ...

    @property
    @abstractmethod
    def isentropic_discharge(self) -> CyclePoint:
        """Isentropic compressor discharge feeding the heat releaser."""
        ...

    @property
    @abstractmethod
    def discharge(self) -> CyclePoint:
        """Real compressor discharge feeding the heat releaser."""
        ...

    # --- Metrics ---

    @property
    def evaporator_specific_mass_flow(self) -> float:
        return 1.0

    @property
    @abstractmethod
    def heat_releaser_specific_mass_flow(self) -> float:
        ...

    @property
    @abstractmethod
    def isentropic_specific_work(self) -> float:
        """Specific work of ideal compression [J/kg]."""
        ...

    @property
    def specific_work(self) -> float:
        """Specific work of real compression [J/kg]."""
        return self.isentropic_specific_work / self.compressor.efficiency

    @property
    def specific_cooling_capacity(self) -> float:
        return self.evaporator_specific_mass_flow * (
            self.evaporator.outlet.enthalpy - self.evaporator_inlet.enthalpy
        )

    @property
    def specific_heating_capacity(self) -> float:
        return self.heat_releaser_specific_mass_flow * (
            self.discharge.enthalpy - self.heat_releaser.outlet.enthalpy
        )

    @property
    def eer(self) -> float:
        """Energy efficiency ratio (cooling)."""
        return self.specific_cooling_capacity / self.specific_work

    @property
    def cop(self) -> float:
        """Coefficient of performance (heating)."""
        return self.specific_heating_capacity / self.specific_work

    @property
    def energy_balance_error(self) -> float:
        """Relative residual of q_heating = q_cooling + w."""
        heating = self.specific_heating_capacity
        return abs(heating - self.specific_cooling_capacity - self.specific_work) / heating

    @abstractmethod
    def entropy_nodes(self) -> list[EntropyNode]:
        """Components of the cycle as entropy analysis nodes."""
        ...

    def summary(self) -> dict[str, Any]:
        return {
            "cycle_type": self.cycle_type,
            "refrigerant": self.refrigerant.name,
            "transcritical": self.is_transcritical,
            "evaporating_pressure": self.evaporator.pressure,
            "heat_releaser_pressure": self.heat_releaser.pressure,
            "isentropic_specific_work": self.isentropic_specific_work,
            "specific_work": self.specific_work,
            "specific_cooling_capacity": self.specific_cooling_capacity,
            "specific_heating_capacity": self.specific_heating_capacity,
            "eer": self.eer,
            "cop": self.cop,
            "energy_balance_error": self.energy_balance_error,
            "components": [
                self.evaporator.summary(),
                self.compressor.summary(),
                self.heat_releaser.summary(),
            ],
            "points": {name: point.to_dict() for name, point in self.points.items()},
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(refrigerant='{self.refrigerant.name}', "
            f"eer={self.eer:.3f}, cop={self.cop:.3f})"
        )
