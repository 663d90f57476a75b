"""Entropy analysis nodes.

A node describes one component of a solved cycle by the states and
specific mass flows that cross it. Given the temperatures of the cold and
hot sources, it computes the specific exergy destruction [J/kg] of that
component. Mass flows are relative to the flow through the evaporator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from vcrc.core.fluids import CyclePoint
from vcrc.entropy.result import Loss


class EntropyNode(ABC):
    """A component contributing one term to the exergy balance."""

    loss: Loss

    @abstractmethod
    def exergy_destruction(self, cold_source: float, hot_source: float) -> float:
        """Specific exergy destruction [J/kg] for sources at *cold_source* and *hot_source* [K]."""
        ...


@dataclass(frozen=True)
class EvaporatorNode(EntropyNode):
    mass_flow: float
    inlet: CyclePoint
    outlet: CyclePoint

    loss = Loss.EVAPORATOR

    def exergy_destruction(self, cold_source: float, hot_source: float) -> float:
        return (
            self.mass_flow
            * hot_source
            * (
                (self.outlet.entropy - self.inlet.entropy)
                - (self.outlet.enthalpy - self.inlet.enthalpy) / cold_source
            )
        )


@dataclass(frozen=True)
class HeatReleaserNode(EntropyNode):
    """Condenser or gas cooler, fed from the isentropic discharge state."""

    mass_flow: float
    isentropic_inlet: CyclePoint
    outlet: CyclePoint
    transcritical: bool = False

    @property
    def loss(self) -> Loss:  # type: ignore[override]
        return Loss.GAS_COOLER if self.transcritical else Loss.CONDENSER

    def exergy_destruction(self, cold_source: float, hot_source: float) -> float:
        return self.mass_flow * (
            (self.isentropic_inlet.enthalpy - self.outlet.enthalpy)
            - hot_source * (self.isentropic_inlet.entropy - self.outlet.entropy)
        )


@dataclass(frozen=True)
class ExpansionValveNode(EntropyNode):
    mass_flow: float
    inlet: CyclePoint
    outlet: CyclePoint

    loss = Loss.EXPANSION_VALVES

    def exergy_destruction(self, cold_source: float, hot_source: float) -> float:
        return self.mass_flow * hot_source * (self.outlet.entropy - self.inlet.entropy)


@dataclass(frozen=True)
class EconomizerNode(EntropyNode):
    """Recuperative heat exchanger between the intermediate (cold) and main (hot) flows."""

    cold_mass_flow: float
    cold_inlet: CyclePoint
    cold_outlet: CyclePoint
    hot_mass_flow: float
    hot_inlet: CyclePoint
    hot_outlet: CyclePoint

    loss = Loss.ECONOMIZER

    def exergy_destruction(self, cold_source: float, hot_source: float) -> float:
        return hot_source * (
            self.cold_mass_flow * (self.cold_outlet.entropy - self.cold_inlet.entropy)
            - self.hot_mass_flow * (self.hot_inlet.entropy - self.hot_outlet.entropy)
        )


@dataclass(frozen=True)
class MixingNode(EntropyNode):
    """Adiabatic mixing of two streams into *outlet*."""

    first_mass_flow: float
    first: CyclePoint
    second_mass_flow: float
    second: CyclePoint
    outlet: CyclePoint

    loss = Loss.MIXING

    def exergy_destruction(self, cold_source: float, hot_source: float) -> float:
        return hot_source * (
            (self.first_mass_flow + self.second_mass_flow) * self.outlet.entropy
            - (self.first_mass_flow * self.first.entropy + self.second_mass_flow * self.second.entropy)
        )
