"""Declarative cycle solver for VCRC.

Builds the cycle components from a flat :class:`CycleDefinition` and
solves the requested cycle architecture.

Supported cycle architectures:
- Simple: evaporator → compressor → heat releaser → expansion valve
- Economizer: two-stage compression, intermediate flow subcools the main
  flow in an economizer and is mixed between the stages
- Complete intercooling: two-stage compression through an intermediate
  vessel
- Incomplete intercooling: two-stage compression, the intermediate vessel
  vapour is mixed with the first-stage discharge
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any

from vcrc.core.errors import ConfigurationError
from vcrc.cycle.components.base import HeatReleaser
from vcrc.cycle.components.compressor import Compressor
from vcrc.cycle.components.economizer import Economizer
from vcrc.cycle.components.evaporator import Evaporator
from vcrc.cycle.components.heat_releaser import Condenser, GasCooler
from vcrc.cycle.model import VCRC
from vcrc.cycle.simple import SimpleVCRC
from vcrc.cycle.two_stage import (
    VCRCWithCIC,
    VCRCWithEconomizer,
    VCRCWithIIC,
    max_eer_intermediate_pressure,
)

logger = logging.getLogger(__name__)


class CycleType(Enum):
    """Cycle architecture."""

    SIMPLE = "simple"
    ECONOMIZER = "economizer"
    COMPLETE_INTERCOOLING = "complete_intercooling"
    INCOMPLETE_INTERCOOLING = "incomplete_intercooling"


@dataclass
class CycleDefinition:
    """Definition of a complete cycle.

    A gas cooler is used when ``gas_cooler_temperature`` is set, a condenser
    otherwise.
    """

    cycle_type: CycleType = CycleType.SIMPLE
    refrigerant: str = "R32"

    # Evaporator
    evaporating_temperature: float = 278.15  # K (dew point)
    superheat: float = 5.0  # K

    # Compressor
    compressor_efficiency: float = 0.8

    # Condenser (subcritical)
    condensing_temperature: float | None = 318.15  # K (bubble point)
    subcooling: float = 3.0  # K

    # Gas cooler (transcritical)
    gas_cooler_temperature: float | None = None  # K at the outlet
    gas_cooler_pressure: float | None = None  # Pa

    # Economizer (economizer cycle only)
    economizer_temperature_difference: float = 7.0  # K
    economizer_superheat: float = 5.0  # K

    # Two-stage cycles
    intermediate_pressure: float | None = None  # Pa
    optimize_intermediate_pressure: bool = False

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["cycle_type"] = self.cycle_type.value
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CycleDefinition:
        """Restore a definition from a plain dictionary (e.g. parsed JSON).

        Raises:
            ConfigurationError: On unknown keys or an unknown cycle type.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown cycle definition keys: {', '.join(sorted(unknown))}")
        values = dict(data)
        if "cycle_type" in values and not isinstance(values["cycle_type"], CycleType):
            try:
                values["cycle_type"] = CycleType(values["cycle_type"])
            except ValueError as exc:
                raise ConfigurationError(f"Unknown cycle type: {values['cycle_type']}") from exc
        return cls(**values)


def build_heat_releaser(defn: CycleDefinition) -> HeatReleaser:
    if defn.gas_cooler_temperature is not None:
        return GasCooler(defn.refrigerant, defn.gas_cooler_temperature, defn.gas_cooler_pressure)
    if defn.condensing_temperature is None:
        raise ConfigurationError(
            "Either a condensing temperature or a gas cooler outlet temperature is required!"
        )
    return Condenser(defn.refrigerant, defn.condensing_temperature, defn.subcooling)


def solve_cycle(definition: CycleDefinition) -> VCRC:
    """Build the components and solve the cycle.

    Dispatches to the appropriate model based on cycle type.

    Args:
        definition: Complete cycle definition.

    Returns:
        Solved cycle model.

    Raises:
        ConfigurationError: If a component or the cycle is inconsistent.
        ValidationError: If the refrigerant is unsuitable.
    """
    logger.info("Solving %s cycle with %s", definition.cycle_type.value, definition.refrigerant)
    evaporator = Evaporator(
        definition.refrigerant, definition.evaporating_temperature, definition.superheat
    )
    compressor = Compressor(definition.compressor_efficiency)
    heat_releaser = build_heat_releaser(definition)

    if definition.cycle_type == CycleType.SIMPLE:
        return SimpleVCRC(evaporator, compressor, heat_releaser)

    if definition.cycle_type == CycleType.ECONOMIZER:
        cycle_cls = VCRCWithEconomizer
        extra: dict[str, Any] = {
            "economizer": Economizer(
                definition.economizer_temperature_difference, definition.economizer_superheat
            )
        }
    elif definition.cycle_type == CycleType.COMPLETE_INTERCOOLING:
        cycle_cls = VCRCWithCIC
        extra = {}
    elif definition.cycle_type == CycleType.INCOMPLETE_INTERCOOLING:
        cycle_cls = VCRCWithIIC
        extra = {}
    else:
        raise ConfigurationError(f"Unknown cycle type: {definition.cycle_type}")

    intermediate_pressure = definition.intermediate_pressure
    if intermediate_pressure is None and definition.optimize_intermediate_pressure:
        intermediate_pressure = max_eer_intermediate_pressure(
            cycle_cls, evaporator, compressor, heat_releaser, **extra
        )
    return cycle_cls(
        evaporator,
        compressor,
        heat_releaser,
        intermediate_pressure=intermediate_pressure,
        **extra,
    )
