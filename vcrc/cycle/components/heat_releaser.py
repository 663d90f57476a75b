"""Heat releaser components: condenser and gas cooler."""

from __future__ import annotations

import logging
from typing import Any

from vcrc.core.errors import ConfigurationError
from vcrc.core.fluids import CyclePoint
from vcrc.cycle.components.base import HeatReleaser
from vcrc.cycle.validators import validate_condenser, validate_gas_cooler
from vcrc.utils.constants import (
    BAR_TO_PA,
    R744_GAS_COOLER_INTERCEPT,
    R744_GAS_COOLER_MAX_TEMPERATURE,
    R744_GAS_COOLER_SLOPE,
    T_CELSIUS_OFFSET,
)

logger = logging.getLogger(__name__)


class Condenser(HeatReleaser):
    """Condenser of a subcritical cycle.

    Args:
        refrigerant_name: CoolProp refrigerant name.
        temperature: Condensing temperature (bubble point) [K].
        subcooling: Subcooling at the outlet [K].
        name: Component name.
    """

    component_type = "condenser"

    def __init__(
        self,
        refrigerant_name: str,
        temperature: float,
        subcooling: float,
        name: str = "condenser",
    ):
        super().__init__(refrigerant_name, temperature)
        self.name = name
        self._subcooling = subcooling
        validate_condenser(self, self.refrigerant).raise_if_invalid(ConfigurationError)
        self._outlet = self.refrigerant.subcooled(temperature, subcooling)

    @property
    def subcooling(self) -> float:
        return self._subcooling

    @property
    def outlet(self) -> CyclePoint:
        return self._outlet

    def summary(self) -> dict[str, Any]:
        d = super().summary()
        d["subcooling_K"] = self.subcooling
        return d


def r744_gas_cooler_pressure(outlet_temperature: float) -> float:
    """Optimal R744 gas cooler pressure [Pa] for an outlet temperature [K].

    Linear correlation by Yang et al. (2015), valid up to 60 °C:
        p [bar] = 2.759 · t [°C] − 9.912
    """
    celsius = outlet_temperature - T_CELSIUS_OFFSET
    return (R744_GAS_COOLER_SLOPE * celsius + R744_GAS_COOLER_INTERCEPT) * BAR_TO_PA


class GasCooler(HeatReleaser):
    """Gas cooler of a transcritical cycle.

    Args:
        refrigerant_name: CoolProp refrigerant name.
        outlet_temperature: Refrigerant temperature at the outlet [K].
        pressure: Absolute pressure [Pa]. May be omitted only for R744
            with an outlet temperature up to 60 °C.
        name: Component name.

    Raises:
        ConfigurationError: If the pressure cannot be determined, or the
            outlet temperature or pressure is not supercritical.
    """

    component_type = "gas_cooler"

    def __init__(
        self,
        refrigerant_name: str,
        outlet_temperature: float,
        pressure: float | None = None,
        name: str = "gas_cooler",
    ):
        super().__init__(refrigerant_name, outlet_temperature)
        self.name = name
        if pressure is None:
            if self.refrigerant_name != "R744" or outlet_temperature > R744_GAS_COOLER_MAX_TEMPERATURE:
                raise ConfigurationError(
                    "It is impossible to automatically calculate the absolute pressure "
                    "in the gas cooler! It is necessary to define it."
                )
            pressure = r744_gas_cooler_pressure(outlet_temperature)
            logger.debug("R744 gas cooler pressure from correlation: %.0f Pa", pressure)
        self._pressure = pressure
        validate_gas_cooler(self, self.refrigerant).raise_if_invalid(ConfigurationError)
        self._outlet = self.refrigerant.resolve("P", pressure, "T", outlet_temperature)

    @property
    def pressure(self) -> float:
        return self._pressure

    @property
    def outlet(self) -> CyclePoint:
        return self._outlet
