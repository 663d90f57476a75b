"""Entropy analysis result types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Loss(Enum):
    """Cycle components that destroy exergy."""

    COMPRESSOR = "compressor"
    CONDENSER = "condenser"
    GAS_COOLER = "gas_cooler"
    EXPANSION_VALVES = "expansion_valves"
    EVAPORATOR = "evaporator"
    ECONOMIZER = "economizer"
    MIXING = "mixing"


def empty_losses() -> dict[Loss, float]:
    return {loss: 0.0 for loss in Loss}


@dataclass(frozen=True)
class EntropyAnalysisResult:
    """Outcome of an entropy analysis.

    Specific quantities in J/kg of refrigerant circulating through the
    evaporator; ratios as decimal fractions.
    """

    thermodynamic_perfection: float
    min_specific_work: float  # J/kg
    min_specific_work_ratio: float
    specific_work: float  # J/kg, calculated from the losses
    eer: float
    cop: float
    total_exergy_destruction: float  # J/kg
    exergy_destruction: dict[Loss, float] = field(default_factory=empty_losses)
    loss_fractions: dict[Loss, float] = field(default_factory=empty_losses)
    energy_loss_ratios: dict[Loss, float] = field(default_factory=empty_losses)
    analysis_relative_error: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "thermodynamic_perfection": self.thermodynamic_perfection,
            "min_specific_work": self.min_specific_work,
            "min_specific_work_ratio": self.min_specific_work_ratio,
            "specific_work": self.specific_work,
            "eer": self.eer,
            "cop": self.cop,
            "total_exergy_destruction": self.total_exergy_destruction,
            "exergy_destruction": {k.value: v for k, v in self.exergy_destruction.items()},
            "loss_fractions": {k.value: v for k, v in self.loss_fractions.items()},
            "energy_loss_ratios": {k.value: v for k, v in self.energy_loss_ratios.items()},
            "analysis_relative_error": self.analysis_relative_error,
        }
