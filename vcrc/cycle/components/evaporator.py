"""Evaporator component."""

from __future__ import annotations

import logging
from typing import Any

from vcrc.core.errors import ConfigurationError
from vcrc.core.fluids import CyclePoint
from vcrc.cycle.components.base import HeatExchangerComponent
from vcrc.cycle.validators import validate_evaporator

logger = logging.getLogger(__name__)


class Evaporator(HeatExchangerComponent):
    """Evaporator with a superheated outlet.

    Args:
        refrigerant_name: CoolProp refrigerant name.
        temperature: Evaporating temperature (dew point) [K].
        superheat: Superheat at the outlet [K].
        name: Component name.

    Raises:
        ConfigurationError: If the temperature is outside the
            (triple; critical) range or the superheat outside [0; 50] K.
    """

    component_type = "evaporator"

    def __init__(
        self,
        refrigerant_name: str,
        temperature: float,
        superheat: float,
        name: str = "evaporator",
    ):
        super().__init__(refrigerant_name, temperature)
        self.name = name
        self._superheat = superheat
        validate_evaporator(self, self.refrigerant).raise_if_invalid(ConfigurationError)
        self._outlet = self.refrigerant.superheated(temperature, superheat)
        logger.debug(
            "Evaporator outlet: p=%.0f Pa, T=%.2f K", self._outlet.pressure, self._outlet.temperature
        )

    @property
    def superheat(self) -> float:
        return self._superheat

    @property
    def outlet(self) -> CyclePoint:
        return self._outlet

    def summary(self) -> dict[str, Any]:
        d = super().summary()
        d["superheat_K"] = self.superheat
        return d
