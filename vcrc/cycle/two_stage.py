"""Two-stage vapor-compression refrigeration cycles.

All variants compress the refrigerant in two stages with an intermediate
pressure between the evaporating and heat releaser pressures:

- VCRCWithEconomizer: part of the heat releaser outlet flow is expanded to
  the intermediate pressure and subcools the main flow in an economizer,
  then is mixed with the first-stage discharge.
- VCRCWithCIC: complete intercooling in an intermediate vessel (flash
  tank); the first-stage discharge is bubbled through saturated liquid.
- VCRCWithIIC: incomplete intercooling; the flash tank vapour is mixed
  with the first-stage discharge, which is not desuperheated to saturation.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable

from scipy.optimize import minimize_scalar

from vcrc.core.errors import ConfigurationError, PropertyResolutionError
from vcrc.core.fluids import CyclePoint, Refrigerant, TwoPhase
from vcrc.cycle.components.base import HeatReleaser
from vcrc.cycle.components.compressor import Compressor
from vcrc.cycle.components.economizer import Economizer
from vcrc.cycle.components.evaporator import Evaporator
from vcrc.cycle.model import VCRC
from vcrc.cycle.validators import (
    validate_economizer_cycle,
    validate_intercooling_cycle,
    validate_intermediate_flow,
    validate_intermediate_pressure,
)
from vcrc.entropy.nodes import (
    EconomizerNode,
    EntropyNode,
    EvaporatorNode,
    ExpansionValveNode,
    HeatReleaserNode,
    MixingNode,
)

logger = logging.getLogger(__name__)

# (evaporating pressure, heat releaser pressure, refrigerant) -> intermediate pressure
PressurePolicy = Callable[[float, float, Refrigerant], float]


def geometric_mean_pressure(low: float, high: float, refrigerant: Refrigerant) -> float:
    """Geometric mean of *low* and *high* [Pa].

    Falls back to the geometric mean of *low* and the critical pressure when
    the result is not below the critical pressure.
    """
    pressure = math.sqrt(low * high)
    if pressure >= refrigerant.critical_pressure:
        capped = math.sqrt(low * refrigerant.critical_pressure)
        logger.warning(
            "Intermediate pressure %.0f Pa is not subcritical for %s, using %.0f Pa",
            pressure,
            refrigerant.name,
            capped,
        )
        return capped
    return pressure


class TwoStageVCRC(VCRC):
    """Base class for cycles with two-stage compression.

    Args:
        evaporator: Evaporator.
        compressor: Compressor (shared by both stages).
        heat_releaser: Condenser or gas cooler.
        intermediate_pressure: Absolute intermediate pressure [Pa]. Derived
            from *pressure_policy* when omitted.
        pressure_policy: Callable returning the intermediate pressure from
            the evaporating and heat releaser pressures.
    """

    def __init__(
        self,
        evaporator: Evaporator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        intermediate_pressure: float | None = None,
        pressure_policy: PressurePolicy = geometric_mean_pressure,
    ):
        super().__init__(evaporator, compressor, heat_releaser)
        if intermediate_pressure is None:
            intermediate_pressure = pressure_policy(
                evaporator.pressure, heat_releaser.pressure, self.refrigerant
            )
        self.intermediate_pressure = intermediate_pressure
        validate_intermediate_pressure(self).raise_if_invalid(ConfigurationError)

        refrigerant = self.refrigerant
        self.point1 = evaporator.outlet
        self.point2s = refrigerant.isentropic_compression(self.point1, intermediate_pressure)
        self.point2 = refrigerant.compression(
            self.point1, intermediate_pressure, compressor.efficiency
        )
        self.point5 = heat_releaser.outlet
        self.point6 = refrigerant.isenthalpic_expansion(self.point5, intermediate_pressure)

    def _compress_second_stage(self) -> None:
        refrigerant = self.refrigerant
        self.point4s = refrigerant.isentropic_compression(self.point3, self.heat_releaser.pressure)
        self.point4 = refrigerant.compression(
            self.point3, self.heat_releaser.pressure, self.compressor.efficiency
        )

    @property
    def isentropic_discharge(self) -> CyclePoint:
        return self.point4s

    @property
    def discharge(self) -> CyclePoint:
        return self.point4

    @property
    def intermediate_specific_mass_flow(self) -> float:
        return self.heat_releaser_specific_mass_flow - self.evaporator_specific_mass_flow

    @property
    def isentropic_specific_work(self) -> float:
        first_stage = self.evaporator_specific_mass_flow * (
            self.point2s.enthalpy - self.point1.enthalpy
        )
        second_stage = self.heat_releaser_specific_mass_flow * (
            self.point4s.enthalpy - self.point3.enthalpy
        )
        return first_stage + second_stage

    def summary(self) -> dict[str, Any]:
        d = super().summary()
        d["intermediate_pressure"] = self.intermediate_pressure
        d["heat_releaser_specific_mass_flow"] = self.heat_releaser_specific_mass_flow
        d["intermediate_specific_mass_flow"] = self.intermediate_specific_mass_flow
        return d


class VCRCWithEconomizer(TwoStageVCRC):
    """Two-stage cycle with an economizer.

    Points:
        1      evaporator outlet
        2s, 2  first-stage compression of 1 to the intermediate pressure
        3      mixing of 2 (main flow) and 7 (intermediate flow)
        4s, 4  second-stage compression of 3 to the heat releaser pressure
        5      heat releaser outlet
        6      expansion of 5 to the intermediate pressure
        7      intermediate flow at the economizer outlet (superheated)
        8      main flow at the economizer outlet (cooled to T6 + ΔT)
        9      expansion of 8 to the evaporating pressure
    """

    cycle_type = "economizer"

    def __init__(
        self,
        evaporator: Evaporator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        economizer: Economizer,
        intermediate_pressure: float | None = None,
        pressure_policy: PressurePolicy = geometric_mean_pressure,
    ):
        self.economizer = economizer
        super().__init__(
            evaporator, compressor, heat_releaser, intermediate_pressure, pressure_policy
        )
        refrigerant = self.refrigerant

        self.point7 = refrigerant.superheated_at_pressure(
            self.intermediate_pressure, economizer.superheat
        )
        validate_economizer_cycle(self).raise_if_invalid(ConfigurationError)
        self.point8 = refrigerant.cooling_to(
            self.point5, self.point6.temperature + economizer.temperature_difference
        )
        self.point9 = refrigerant.isenthalpic_expansion(self.point8, evaporator.pressure)

        self._heat_releaser_mass_flow = 1.0 + (self.point5.enthalpy - self.point8.enthalpy) / (
            self.point7.enthalpy - self.point6.enthalpy
        )
        validate_intermediate_flow(self).raise_if_invalid(ConfigurationError)
        self.point3 = refrigerant.mixing(
            self.evaporator_specific_mass_flow,
            self.point2,
            self.intermediate_specific_mass_flow,
            self.point7,
        )
        self._compress_second_stage()

        logger.debug(
            "Economizer cycle solved: %s, p_int=%.0f Pa, m_hr=%.4f, EER=%.3f",
            refrigerant.name,
            self.intermediate_pressure,
            self._heat_releaser_mass_flow,
            self.eer,
        )

    @property
    def points(self) -> dict[str, CyclePoint]:
        return {
            "1": self.point1,
            "2s": self.point2s,
            "2": self.point2,
            "3": self.point3,
            "4s": self.point4s,
            "4": self.point4,
            "5": self.point5,
            "6": self.point6,
            "7": self.point7,
            "8": self.point8,
            "9": self.point9,
        }

    @property
    def evaporator_inlet(self) -> CyclePoint:
        return self.point9

    @property
    def heat_releaser_specific_mass_flow(self) -> float:
        return self._heat_releaser_mass_flow

    def entropy_nodes(self) -> list[EntropyNode]:
        main = self.evaporator_specific_mass_flow
        intermediate = self.intermediate_specific_mass_flow
        return [
            EvaporatorNode(main, self.point9, self.point1),
            HeatReleaserNode(
                self.heat_releaser_specific_mass_flow,
                self.point4s,
                self.point5,
                transcritical=self.is_transcritical,
            ),
            ExpansionValveNode(intermediate, self.point5, self.point6),
            ExpansionValveNode(main, self.point8, self.point9),
            EconomizerNode(
                intermediate, self.point6, self.point7, main, self.point5, self.point8
            ),
            MixingNode(main, self.point2, intermediate, self.point7, self.point3),
        ]

    def summary(self) -> dict[str, Any]:
        d = super().summary()
        d["components"].append(self.economizer.summary())
        return d


class VCRCWithCIC(TwoStageVCRC):
    """Two-stage cycle with complete intercooling in an intermediate vessel.

    Points:
        1      evaporator outlet
        2s, 2  first-stage compression of 1 to the intermediate pressure
        3      dew point at the intermediate pressure (vessel vapour outlet)
        4s, 4  second-stage compression of 3 to the heat releaser pressure
        5      heat releaser outlet
        6      expansion of 5 to the intermediate pressure (two-phase)
        7      bubble point at the intermediate pressure (vessel liquid outlet)
        8      expansion of 7 to the evaporating pressure
    """

    cycle_type = "complete_intercooling"

    def __init__(
        self,
        evaporator: Evaporator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        intermediate_pressure: float | None = None,
        pressure_policy: PressurePolicy = geometric_mean_pressure,
    ):
        super().__init__(
            evaporator, compressor, heat_releaser, intermediate_pressure, pressure_policy
        )
        validate_intercooling_cycle(self).raise_if_invalid(ConfigurationError)
        refrigerant = self.refrigerant

        self.point3 = refrigerant.saturation_point(
            TwoPhase.DEW, pressure=self.intermediate_pressure
        )
        self._compress_second_stage()
        self.point7 = refrigerant.saturation_point(
            TwoPhase.BUBBLE, pressure=self.intermediate_pressure
        )
        self.point8 = refrigerant.isenthalpic_expansion(self.point7, evaporator.pressure)

        # Liquid evaporated in the vessel to desuperheat the first-stage discharge
        self.barbotage_specific_mass_flow = (self.point2.enthalpy - self.point3.enthalpy) / (
            self.point3.enthalpy - self.point7.enthalpy
        )
        self._heat_releaser_mass_flow = (1.0 + self.barbotage_specific_mass_flow) / (
            1.0 - self.point6.quality
        )
        validate_intermediate_flow(self).raise_if_invalid(ConfigurationError)

        logger.debug(
            "Intercooling cycle solved: %s, p_int=%.0f Pa, m_hr=%.4f, EER=%.3f",
            refrigerant.name,
            self.intermediate_pressure,
            self._heat_releaser_mass_flow,
            self.eer,
        )

    @property
    def points(self) -> dict[str, CyclePoint]:
        return {
            "1": self.point1,
            "2s": self.point2s,
            "2": self.point2,
            "3": self.point3,
            "4s": self.point4s,
            "4": self.point4,
            "5": self.point5,
            "6": self.point6,
            "7": self.point7,
            "8": self.point8,
        }

    @property
    def evaporator_inlet(self) -> CyclePoint:
        return self.point8

    @property
    def heat_releaser_specific_mass_flow(self) -> float:
        return self._heat_releaser_mass_flow

    def entropy_nodes(self) -> list[EntropyNode]:
        main = self.evaporator_specific_mass_flow
        heat_releaser = self.heat_releaser_specific_mass_flow
        return [
            EvaporatorNode(main, self.point8, self.point1),
            HeatReleaserNode(
                heat_releaser, self.point4s, self.point5, transcritical=self.is_transcritical
            ),
            ExpansionValveNode(heat_releaser, self.point5, self.point6),
            ExpansionValveNode(main, self.point7, self.point8),
            MixingNode(
                main, self.point2, self.barbotage_specific_mass_flow, self.point7, self.point3
            ),
        ]


class VCRCWithIIC(TwoStageVCRC):
    """Two-stage cycle with incomplete intercooling.

    The separator vapour is mixed with the first-stage discharge instead of
    desuperheating it in liquid, so the second stage sucks superheated
    vapour.

    Points:
        1      evaporator outlet
        2s, 2  first-stage compression of 1 to the intermediate pressure
        3      mixing of 2 (main flow) and 7 (separator vapour)
        4s, 4  second-stage compression of 3 to the heat releaser pressure
        5      heat releaser outlet
        6      expansion of 5 to the intermediate pressure (separator inlet)
        7      dew point at the intermediate pressure (separator vapour outlet)
        8      bubble point at the intermediate pressure (separator liquid outlet)
        9      expansion of 8 to the evaporating pressure
    """

    cycle_type = "incomplete_intercooling"

    def __init__(
        self,
        evaporator: Evaporator,
        compressor: Compressor,
        heat_releaser: HeatReleaser,
        intermediate_pressure: float | None = None,
        pressure_policy: PressurePolicy = geometric_mean_pressure,
    ):
        super().__init__(
            evaporator, compressor, heat_releaser, intermediate_pressure, pressure_policy
        )
        validate_intercooling_cycle(self).raise_if_invalid(ConfigurationError)
        refrigerant = self.refrigerant

        self._heat_releaser_mass_flow = self.evaporator_specific_mass_flow / (
            1.0 - self.point6.quality
        )
        validate_intermediate_flow(self).raise_if_invalid(ConfigurationError)

        self.point7 = refrigerant.saturation_point(
            TwoPhase.DEW, pressure=self.intermediate_pressure
        )
        self.point8 = refrigerant.saturation_point(
            TwoPhase.BUBBLE, pressure=self.intermediate_pressure
        )
        self.point9 = refrigerant.isenthalpic_expansion(self.point8, evaporator.pressure)
        self.point3 = refrigerant.mixing(
            self.evaporator_specific_mass_flow,
            self.point2,
            self.intermediate_specific_mass_flow,
            self.point7,
        )
        self._compress_second_stage()

        logger.debug(
            "Incomplete intercooling cycle solved: %s, p_int=%.0f Pa, m_hr=%.4f, EER=%.3f",
            refrigerant.name,
            self.intermediate_pressure,
            self._heat_releaser_mass_flow,
            self.eer,
        )

    @property
    def points(self) -> dict[str, CyclePoint]:
        return {
            "1": self.point1,
            "2s": self.point2s,
            "2": self.point2,
            "3": self.point3,
            "4s": self.point4s,
            "4": self.point4,
            "5": self.point5,
            "6": self.point6,
            "7": self.point7,
            "8": self.point8,
            "9": self.point9,
        }

    @property
    def evaporator_inlet(self) -> CyclePoint:
        return self.point9

    @property
    def heat_releaser_specific_mass_flow(self) -> float:
        return self._heat_releaser_mass_flow

    def entropy_nodes(self) -> list[EntropyNode]:
        main = self.evaporator_specific_mass_flow
        heat_releaser = self.heat_releaser_specific_mass_flow
        return [
            EvaporatorNode(main, self.point9, self.point1),
            HeatReleaserNode(
                heat_releaser, self.point4s, self.point5, transcritical=self.is_transcritical
            ),
            ExpansionValveNode(heat_releaser, self.point5, self.point6),
            ExpansionValveNode(main, self.point8, self.point9),
            MixingNode(
                main, self.point2, self.intermediate_specific_mass_flow, self.point7, self.point3
            ),
        ]


def max_eer_intermediate_pressure(
    cycle_cls: type[TwoStageVCRC],
    evaporator: Evaporator,
    compressor: Compressor,
    heat_releaser: HeatReleaser,
    **kwargs,
) -> float:
    """Intermediate pressure [Pa] that maximises the EER of a two-stage cycle.

    Bounded scalar search between the evaporating pressure and the lower of
    the heat releaser and critical pressures. Candidates for which the cycle
    cannot be closed are logged and scored as zero EER.

    Args:
        cycle_cls: VCRCWithEconomizer, VCRCWithCIC or VCRCWithIIC.
        evaporator: Evaporator.
        compressor: Compressor.
        heat_releaser: Condenser or gas cooler.
        **kwargs: Extra constructor arguments (e.g. ``economizer``).
    """
    low = evaporator.pressure
    high = min(heat_releaser.pressure, evaporator.refrigerant.critical_pressure)

    def objective(pressure: float) -> float:
        try:
            cycle = cycle_cls(
                evaporator, compressor, heat_releaser, intermediate_pressure=pressure, **kwargs
            )
        except (ConfigurationError, PropertyResolutionError) as exc:
            logger.warning("Infeasible intermediate pressure %.0f Pa: %s", pressure, exc)
            return 0.0
        return -cycle.eer

    result = minimize_scalar(objective, bounds=(low, high), method="bounded")
    if not result.success:
        raise ConfigurationError(f"Intermediate pressure search did not converge: {result.message}")
    logger.info(
        "Max-EER intermediate pressure for %s: %.0f Pa (EER=%.3f)",
        cycle_cls.__name__,
        result.x,
        -result.fun,
    )
    return float(result.x)
