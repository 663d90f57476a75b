"""Physical-consistency rules for refrigerants, components and cycles.

Every ``validate_*`` function is pure: it evaluates an ordered list of
:class:`~vcrc.utils.validation.Rule` objects and returns the violations.
Component and cycle constructors decide which error class a violation
becomes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vcrc.core.fluids import Refrigerant
from vcrc.utils.constants import (
    GLIDE_TOLERANCE,
    MAX_TEMPERATURE_DELTA,
    PA_TO_MPA,
    T_CELSIUS_OFFSET,
)
from vcrc.utils.validation import Rule, ValidationResult, check_rules, validate_range

if TYPE_CHECKING:
    from vcrc.cycle.components.compressor import Compressor
    from vcrc.cycle.components.economizer import Economizer
    from vcrc.cycle.components.evaporator import Evaporator
    from vcrc.cycle.components.heat_releaser import Condenser, GasCooler
    from vcrc.cycle.model import VCRC
    from vcrc.cycle.two_stage import TwoStageVCRC, VCRCWithCIC, VCRCWithEconomizer, VCRCWithIIC


def _celsius(temperature: float) -> float:
    return round(temperature - T_CELSIUS_OFFSET, 2)


# --- Refrigerant ---

REFRIGERANT_RULES = [
    Rule(
        "refrigerant_name",
        lambda r: r.name.startswith("R"),
        "The selected fluid is not a refrigerant (its name should start with 'R')!",
    ),
    Rule(
        "refrigerant_type",
        lambda r: r.is_single_component or r.is_azeotropic_blend,
        "Refrigerant should be a single component or an azeotropic blend!",
    ),
]


def validate_refrigerant(refrigerant: Refrigerant) -> ValidationResult:
    """Check the refrigerant naming convention and blend type."""
    return check_rules(refrigerant, REFRIGERANT_RULES)


def validate_no_glide(refrigerant: Refrigerant, *pressures: float) -> ValidationResult:
    """Check that the phase change at each of *pressures* [Pa] is isothermal."""
    result = ValidationResult()
    for pressure in pressures:
        glide = refrigerant.glide(pressure)
        if glide > GLIDE_TOLERANCE:
            result.error(
                "refrigerant_glide",
                "Refrigerant should not have a temperature glide!",
                value=glide,
                limit=GLIDE_TOLERANCE,
            )
            break
    return result


# --- Components ---


def validate_evaporator(evaporator: Evaporator, refrigerant: Refrigerant) -> ValidationResult:
    result = ValidationResult()
    validate_range(
        "evaporating_temperature",
        evaporator.temperature,
        refrigerant.triple_temperature,
        refrigerant.critical_temperature,
        result,
        message=(
            "Evaporating temperature should be in "
            f"({_celsius(refrigerant.triple_temperature)};"
            f"{_celsius(refrigerant.critical_temperature)}) °C!"
        ),
        inclusive=False,
    )
    validate_range(
        "superheat",
        evaporator.superheat,
        0.0,
        MAX_TEMPERATURE_DELTA,
        result,
        message="Superheat in the evaporator should be in [0;50] K!",
    )
    return result


def validate_compressor(compressor: Compressor) -> ValidationResult:
    return check_rules(
        compressor,
        [
            Rule(
                "isentropic_efficiency",
                lambda c: 0.0 < c.efficiency <= 1.0,
                "Isentropic efficiency of the compressor should be in (0;100] %!",
            )
        ],
    )


def validate_condenser(condenser: Condenser, refrigerant: Refrigerant) -> ValidationResult:
    result = ValidationResult()
    validate_range(
        "condensing_temperature",
        condenser.temperature,
        refrigerant.triple_temperature,
        refrigerant.critical_temperature,
        result,
        message=(
            "Condensing temperature should be in "
            f"({_celsius(refrigerant.triple_temperature)};"
            f"{_celsius(refrigerant.critical_temperature)}) °C!"
        ),
        inclusive=False,
    )
    validate_range(
        "subcooling",
        condenser.subcooling,
        0.0,
        MAX_TEMPERATURE_DELTA,
        result,
        message="Subcooling in the condenser should be in [0;50] K!",
    )
    return result


def validate_gas_cooler(gas_cooler: GasCooler, refrigerant: Refrigerant) -> ValidationResult:
    return check_rules(
        gas_cooler,
        [
            Rule(
                "gas_cooler_temperature",
                lambda g: g.temperature > refrigerant.critical_temperature,
                "Gas cooler outlet temperature should be greater than "
                f"{_celsius(refrigerant.critical_temperature)} °C!",
            ),
            Rule(
                "gas_cooler_pressure",
                lambda g: g.pressure > refrigerant.critical_pressure,
                "Gas cooler absolute pressure should be greater than "
                f"{round(refrigerant.critical_pressure * PA_TO_MPA, 2)} MPa!",
            ),
        ],
    )


def validate_economizer(economizer: Economizer) -> ValidationResult:
    result = ValidationResult()
    validate_range(
        "economizer_temperature_difference",
        economizer.temperature_difference,
        0.0,
        MAX_TEMPERATURE_DELTA,
        result,
        message="Temperature difference at the economizer 'cold' side should be in (0;50) K!",
        inclusive=False,
    )
    validate_range(
        "economizer_superheat",
        economizer.superheat,
        0.0,
        MAX_TEMPERATURE_DELTA,
        result,
        message="Superheat in the economizer should be in [0;50] K!",
    )
    return result


# --- Cycles ---

SINGLE_REFRIGERANT_RULE = Rule(
    "single_refrigerant",
    lambda c: c.evaporator.refrigerant_name == c.heat_releaser.refrigerant_name,
    "Only one refrigerant should be selected!",
)

CYCLE_RULES = [
    Rule(
        "condensing_temperature",
        lambda c: c.condenser is None or c.condenser.temperature > c.evaporator.temperature,
        "Condensing temperature should be greater than evaporating temperature!",
    ),
]


def validate_single_refrigerant(cycle: VCRC) -> ValidationResult:
    return check_rules(cycle, [SINGLE_REFRIGERANT_RULE])


def validate_cycle(cycle: VCRC) -> ValidationResult:
    """Check that the components can be closed into one loop."""
    return check_rules(cycle, CYCLE_RULES)


INTERMEDIATE_PRESSURE_RULES = [
    Rule(
        "intermediate_pressure_low",
        lambda c: c.intermediate_pressure > c.evaporator.pressure,
        "Intermediate pressure should be greater than evaporating pressure!",
    ),
    Rule(
        "intermediate_pressure_high",
        lambda c: c.intermediate_pressure < c.heat_releaser.pressure,
        "Intermediate pressure should be less than condensing or gas cooler pressure!",
    ),
]


def validate_intermediate_pressure(cycle: TwoStageVCRC) -> ValidationResult:
    return check_rules(cycle, INTERMEDIATE_PRESSURE_RULES)


ECONOMIZER_CYCLE_RULES = [
    Rule(
        "economizer_hot_side",
        lambda c: c.point7.temperature < c.point5.temperature,
        "Wrong temperature difference at the economizer 'hot' side!",
    ),
    Rule(
        "economizer_cold_side",
        lambda c: c.point6.temperature + c.economizer.temperature_difference
        < c.point5.temperature,
        "Too high temperature difference at the economizer 'cold' side!",
    ),
]


def validate_economizer_cycle(cycle: VCRCWithEconomizer) -> ValidationResult:
    return check_rules(cycle, ECONOMIZER_CYCLE_RULES)


def validate_intercooling_cycle(cycle: VCRCWithCIC | VCRCWithIIC) -> ValidationResult:
    return check_rules(
        cycle,
        [
            Rule(
                "intermediate_vessel_inlet",
                lambda c: c.point6.quality is not None and 0.0 < c.point6.quality < 1.0,
                "There should be a two-phase refrigerant at the intermediate vessel inlet!",
            )
        ],
    )


INTERMEDIATE_FLOW_RULES = [
    Rule(
        "intermediate_specific_mass_flow",
        lambda c: 0.0 < c.intermediate_specific_mass_flow < 1.0,
        "Intermediate specific mass flow should be in (0;100) % of the evaporator flow!",
    ),
]


def validate_intermediate_flow(cycle: TwoStageVCRC) -> ValidationResult:
    return check_rules(cycle, INTERMEDIATE_FLOW_RULES)
