"""Single-stage vapor-compression refrigeration cycle."""

from __future__ import annotations

import logging

from vcrc.core.fluids import CyclePoint
from vcrc.cycle.components.base import HeatReleaser
from vcrc.cycle.components.compressor import Compressor
from vcrc.cycle.components.evaporator import Evaporator
from vcrc.cycle.model import VCRC
from vcrc.entropy.nodes import EntropyNode, EvaporatorNode, ExpansionValveNode, HeatReleaserNode

logger = logging.getLogger(__name__)


class SimpleVCRC(VCRC):
    """Simple (single-stage) cycle.

    Points:
        1  evaporator outlet
        2s isentropic compression of 1 to the heat releaser pressure
        2  real compression of 1 (compressor discharge)
        3  heat releaser outlet
        4  isenthalpic expansion of 3 to the evaporating pressure
    """

    cycle_type = "simple"

    def __init__(self, evaporator: Evaporator, compressor: Compressor, heat_releaser: HeatReleaser):
        super().__init__(evaporator, compressor, heat_releaser)
        refrigerant = self.refrigerant

        self.point1 = evaporator.outlet
        self.point2s = refrigerant.isentropic_compression(self.point1, heat_releaser.pressure)
        self.point2 = refrigerant.compression(
            self.point1, heat_releaser.pressure, compressor.efficiency
        )
        self.point3 = heat_releaser.outlet
        self.point4 = refrigerant.isenthalpic_expansion(self.point3, evaporator.pressure)

        logger.debug(
            "Simple cycle solved: %s, p_evap=%.0f Pa, p_hr=%.0f Pa, EER=%.3f",
            refrigerant.name,
            evaporator.pressure,
            heat_releaser.pressure,
            self.eer,
        )

    @property
    def points(self) -> dict[str, CyclePoint]:
        return {
            "1": self.point1,
            "2s": self.point2s,
            "2": self.point2,
            "3": self.point3,
            "4": self.point4,
        }

    @property
    def evaporator_inlet(self) -> CyclePoint:
        return self.point4

    @property
    def isentropic_discharge(self) -> CyclePoint:
        return self.point2s

    @property
    def discharge(self) -> CyclePoint:
        return self.point2

    @property
    def heat_releaser_specific_mass_flow(self) -> float:
        return 1.0

    @property
    def isentropic_specific_work(self) -> float:
        return self.point2s.enthalpy - self.point1.enthalpy

    def entropy_nodes(self) -> list[EntropyNode]:
        return [
            EvaporatorNode(self.evaporator_specific_mass_flow, self.point4, self.point1),
            HeatReleaserNode(
                self.heat_releaser_specific_mass_flow,
                self.point2s,
                self.point3,
                transcritical=self.is_transcritical,
            ),
            ExpansionValveNode(self.heat_releaser_specific_mass_flow, self.point3, self.point4),
        ]
