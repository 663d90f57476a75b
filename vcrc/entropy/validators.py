"""Boundary rules of an entropy analysis."""

from __future__ import annotations

from dataclasses import dataclass

from vcrc.utils.constants import TEMPERATURE_TOLERANCE
from vcrc.utils.validation import Rule, ValidationResult, check_rules


@dataclass(frozen=True)
class AnalysisBoundaries:
    """Source temperatures [K] against the cycle's heat exchanger outlets."""

    cold_source: float
    hot_source: float
    evaporator_outlet_temperature: float
    heat_releaser_outlet_temperature: float


BOUNDARY_RULES = [
    Rule(
        "source_temperatures",
        lambda b: abs(b.hot_source - b.cold_source) > TEMPERATURE_TOLERANCE,
        "Indoor and outdoor temperatures should not be equal!",
    ),
    Rule(
        "cold_source_temperature",
        lambda b: b.cold_source > b.evaporator_outlet_temperature,
        "Wrong temperature difference in the evaporator! Increase 'cold' source temperature.",
    ),
    Rule(
        "hot_source_temperature",
        lambda b: b.hot_source < b.heat_releaser_outlet_temperature,
        "Wrong temperature difference in the condenser or gas cooler! "
        "Decrease 'hot' source temperature.",
    ),
]


def validate_boundaries(boundaries: AnalysisBoundaries, fail_fast: bool = True) -> ValidationResult:
    return check_rules(boundaries, BOUNDARY_RULES, fail_fast=fail_fast)
