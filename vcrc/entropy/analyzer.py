"""Entropy analysis engine.

Splits the specific work of a solved cycle into the minimum work of a
reverse Carnot cycle between the two sources and the exergy destroyed in
each component. The compressor loss is not computed from states: it
follows from the isentropic work rebuilt from all other losses and the
compressor efficiency, so the difference between the rebuilt and the
model isentropic work measures the consistency of the analysis.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vcrc.core.errors import ValidationError
from vcrc.entropy.result import EntropyAnalysisResult, Loss, empty_losses
from vcrc.entropy.validators import AnalysisBoundaries, validate_boundaries
from vcrc.utils.constants import ZERO_LOSS_TOLERANCE

if TYPE_CHECKING:
    from vcrc.cycle.model import VCRC

logger = logging.getLogger(__name__)


def min_specific_work(cooling_capacity: float, cold_source: float, hot_source: float) -> float:
    """Specific work [J/kg] of a reverse Carnot cycle between the sources [K]."""
    return cooling_capacity * (hot_source - cold_source) / cold_source


def analyze(model: VCRC, cold_source: float, hot_source: float) -> EntropyAnalysisResult:
    """Perform the entropy analysis of a solved cycle.

    The two source temperatures are accepted in any order; the lower one
    is the cold source (indoor air for cooling).

    Args:
        model: Solved cycle.
        cold_source: Temperature of one source [K].
        hot_source: Temperature of the other source [K].

    Returns:
        EntropyAnalysisResult with the loss breakdown.

    Raises:
        ValidationError: If the sources are equal or incompatible with
            the evaporator or heat releaser outlet temperatures.
    """
    cold, hot = sorted((cold_source, hot_source))
    validate_boundaries(
        AnalysisBoundaries(
            cold_source=cold,
            hot_source=hot,
            evaporator_outlet_temperature=model.evaporator.outlet.temperature,
            heat_releaser_outlet_temperature=model.heat_releaser.outlet.temperature,
        )
    ).raise_if_invalid(ValidationError)

    losses = empty_losses()
    for node in model.entropy_nodes():
        losses[node.loss] += node.exergy_destruction(cold, hot)

    min_work = min_specific_work(model.specific_cooling_capacity, cold, hot)
    efficiency = model.compressor.efficiency
    isentropic_work = min_work + sum(losses.values())
    losses[Loss.COMPRESSOR] = isentropic_work * (1.0 / efficiency - 1.0)
    specific_work = isentropic_work / efficiency
    total = sum(losses.values())

    if abs(total) < ZERO_LOSS_TOLERANCE:
        perfection = 1.0
        fractions = empty_losses()
    else:
        # Ratio to the model work; equals min / (min + total) up to the analysis error
        perfection = min_work / model.specific_work
        fractions = {loss: value / total for loss, value in losses.items()}

    model_isentropic_work = model.isentropic_specific_work
    result = EntropyAnalysisResult(
        thermodynamic_perfection=perfection,
        min_specific_work=min_work,
        min_specific_work_ratio=min_work / specific_work,
        specific_work=specific_work,
        eer=model.eer,
        cop=model.cop,
        total_exergy_destruction=total,
        exergy_destruction=losses,
        loss_fractions=fractions,
        energy_loss_ratios={loss: value / specific_work for loss, value in losses.items()},
        analysis_relative_error=abs(isentropic_work - model_isentropic_work)
        / model_isentropic_work,
    )
    logger.info(
        "Entropy analysis of %s cycle (%s) between %.2f K and %.2f K: perfection=%.4f, error=%.2e",
        model.cycle_type,
        model.refrigerant.name,
        cold,
        hot,
        perfection,
        result.analysis_relative_error,
    )
    return result
