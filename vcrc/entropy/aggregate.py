"""Averaging of entropy analyses over several operating conditions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

import numpy as np

from vcrc.core.errors import ArgumentError
from vcrc.entropy.analyzer import analyze
from vcrc.entropy.result import EntropyAnalysisResult, Loss

if TYPE_CHECKING:
    from vcrc.cycle.model import VCRC

logger = logging.getLogger(__name__)

_SCALAR_FIELDS = (
    "thermodynamic_perfection",
    "min_specific_work",
    "min_specific_work_ratio",
    "specific_work",
    "eer",
    "cop",
    "total_exergy_destruction",
    "analysis_relative_error",
)
_LOSS_FIELDS = ("exergy_destruction", "loss_fractions", "energy_loss_ratios")


def average_results(results: Sequence[EntropyAnalysisResult]) -> EntropyAnalysisResult:
    """Elementwise arithmetic mean of several analysis results.

    Raises:
        ArgumentError: If *results* is empty.
    """
    if not results:
        raise ArgumentError("At least one result is required for averaging!")
    # The mean of identical values is not always bit-identical in floating point
    if all(r == results[0] for r in results[1:]):
        return results[0]

    scalars = {
        name: float(np.mean([getattr(r, name) for r in results])) for name in _SCALAR_FIELDS
    }
    per_loss = {
        name: {
            loss: float(np.mean([getattr(r, name)[loss] for r in results])) for loss in Loss
        }
        for name in _LOSS_FIELDS
    }
    return EntropyAnalysisResult(**scalars, **per_loss)


def aggregate_analysis(
    cycles: Sequence[VCRC],
    cold_sources: Sequence[float],
    hot_sources: Sequence[float],
) -> EntropyAnalysisResult:
    """Analyze each (cycle, cold source, hot source) triple and average the results.

    Args:
        cycles: Solved cycles, one per operating condition.
        cold_sources: Cold source temperatures [K].
        hot_sources: Hot source temperatures [K].

    Raises:
        ArgumentError: If the sequences differ in length or are empty.
        ValidationError: If any single analysis is invalid.
    """
    if not len(cycles) == len(cold_sources) == len(hot_sources):
        raise ArgumentError("The lists should have the same length!")
    if not cycles:
        raise ArgumentError("At least one operating condition is required!")

    results = [
        analyze(cycle, cold, hot) for cycle, cold, hot in zip(cycles, cold_sources, hot_sources)
    ]
    logger.info("Averaging %d entropy analyses", len(results))
    return average_results(results)
