"""Refrigerant property interface wrapping CoolProp.

Provides the thermodynamic state provider every cycle is built on: a
refrigerant resolves two independent properties into an immutable
:class:`CyclePoint`, and offers the process helpers a cycle needs
(saturation, superheating, subcooling, compression, throttling, mixing).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

import CoolProp.CoolProp as CP

from vcrc.core.errors import ConfigurationError, PropertyResolutionError
from vcrc.utils.constants import PRESSURE_TOLERANCE, TEMPERATURE_TOLERANCE

logger = logging.getLogger(__name__)

# CoolProp input pairs, keyed by alphabetically sorted property names
_INPUT_PAIRS = {
    ("H", "P"): CP.HmassP_INPUTS,
    ("P", "Q"): CP.PQ_INPUTS,
    ("P", "S"): CP.PSmass_INPUTS,
    ("P", "T"): CP.PT_INPUTS,
    ("Q", "T"): CP.QT_INPUTS,
}

_ZEOTROPIC_BLEND = re.compile(r"^R4\d{2}")
_AZEOTROPIC_BLEND = re.compile(r"^R5\d{2}")


class Phase(Enum):
    """Phase of a refrigerant state."""

    LIQUID = "liquid"
    GAS = "gas"
    TWO_PHASE = "two_phase"
    SUPERCRITICAL = "supercritical"
    SUPERCRITICAL_GAS = "supercritical_gas"
    SUPERCRITICAL_LIQUID = "supercritical_liquid"
    CRITICAL_POINT = "critical_point"
    UNKNOWN = "unknown"

    @classmethod
    def from_coolprop(cls, index: int) -> Phase:
        return _COOLPROP_PHASES.get(index, cls.UNKNOWN)


_COOLPROP_PHASES = {
    CP.iphase_liquid: Phase.LIQUID,
    CP.iphase_gas: Phase.GAS,
    CP.iphase_twophase: Phase.TWO_PHASE,
    CP.iphase_supercritical: Phase.SUPERCRITICAL,
    CP.iphase_supercritical_gas: Phase.SUPERCRITICAL_GAS,
    CP.iphase_supercritical_liquid: Phase.SUPERCRITICAL_LIQUID,
    CP.iphase_critical_point: Phase.CRITICAL_POINT,
}


class TwoPhase(Enum):
    """Named points on the saturation curve."""

    BUBBLE = "bubble"
    DEW = "dew"


# Vapour quality of each named saturation point
VAPOR_QUALITY: dict[TwoPhase, float] = {
    TwoPhase.BUBBLE: 0.0,
    TwoPhase.DEW: 1.0,
}


@dataclass(frozen=True)
class CyclePoint:
    """Thermodynamic state of the refrigerant at one location in the cycle.

    All properties in SI units.
    """

    pressure: float  # Pa
    temperature: float  # K
    enthalpy: float  # J/kg
    entropy: float  # J/(kg·K)
    quality: float | None = None  # vapour quality (None outside the dome)
    phase: Phase = Phase.UNKNOWN
    refrigerant: str = ""

    @property
    def is_two_phase(self) -> bool:
        return self.quality is not None and 0.0 <= self.quality <= 1.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "pressure": self.pressure,
            "temperature": self.temperature,
            "enthalpy": self.enthalpy,
            "entropy": self.entropy,
            "quality": self.quality,
            "phase": self.phase.value,
        }


class Refrigerant:
    """Thermodynamic properties of a single refrigerant.

    Wraps CoolProp's low-level AbstractState. The backend object is mutated
    on every query, so an instance must not be shared between threads.

    Args:
        name: CoolProp fluid name (e.g. "R32", "R744", "R134a").
        backend: CoolProp backend string. ``"HEOS"`` for built-in,
                 ``"REFPROP"`` if RefProp is installed.

    Raises:
        PropertyResolutionError: If CoolProp does not know the fluid.
    """

    def __init__(self, name: str, backend: str = "HEOS"):
        self.name = name
        self.backend = backend
        try:
            self._state = CP.AbstractState(backend, name)
            # Cache critical and triple points; unsupported mixtures fail here
            self.critical_temperature = self._state.T_critical()
            self.critical_pressure = self._state.p_critical()
            self.triple_temperature = self._state.Ttriple()
        except Exception as exc:
            raise PropertyResolutionError(
                f"Cannot create refrigerant '{name}' with backend '{backend}': {exc}"
            ) from exc

    # --- Refrigerant classification ---

    @property
    def is_azeotropic_blend(self) -> bool:
        return bool(_AZEOTROPIC_BLEND.match(self.name))

    @property
    def is_zeotropic_blend(self) -> bool:
        return bool(_ZEOTROPIC_BLEND.match(self.name))

    @property
    def is_single_component(self) -> bool:
        return not self.is_azeotropic_blend and not self.is_zeotropic_blend

    def glide(self, pressure: float) -> float:
        """Temperature glide [K] of the phase change at *pressure* [Pa]."""
        dew = self.saturation_point(TwoPhase.DEW, pressure=pressure)
        bubble = self.saturation_point(TwoPhase.BUBBLE, pressure=pressure)
        return abs(dew.temperature - bubble.temperature)

    # --- Core property access ---

    def resolve(self, prop_a: str, value_a: float, prop_b: str, value_b: float) -> CyclePoint:
        """Resolve a full state from two independent properties.

        Args:
            prop_a: CoolProp key of the first property ("P", "T", "H", "S", "Q").
            value_a: First property value (SI).
            prop_b: CoolProp key of the second property.
            value_b: Second property value (SI).

        Returns:
            CyclePoint at the requested state.

        Raises:
            PropertyResolutionError: If the pair is unsupported or CoolProp
                cannot resolve the state.
        """
        (key_a, val_a), (key_b, val_b) = sorted(
            ((prop_a.upper(), value_a), (prop_b.upper(), value_b)), key=lambda kv: kv[0]
        )
        pair = _INPUT_PAIRS.get((key_a, key_b))
        if pair is None:
            raise PropertyResolutionError(f"Unsupported input pair ({prop_a}, {prop_b})")
        try:
            self._state.update(pair, val_a, val_b)
        except Exception as exc:
            raise PropertyResolutionError(
                f"State update failed for {self.name} at "
                f"{key_a}={val_a:g}, {key_b}={val_b:g}: {exc}"
            ) from exc
        return self._extract_point()

    def _extract_point(self) -> CyclePoint:
        s = self._state
        phase = Phase.from_coolprop(s.phase())
        return CyclePoint(
            pressure=s.p(),
            temperature=s.T(),
            enthalpy=s.hmass(),
            entropy=s.smass(),
            quality=s.Q() if phase is Phase.TWO_PHASE else None,
            phase=phase,
            refrigerant=self.name,
        )

    # --- Saturation ---

    def saturation_point(
        self,
        kind: TwoPhase,
        *,
        temperature: float | None = None,
        pressure: float | None = None,
    ) -> CyclePoint:
        """Bubble or dew point at the given temperature [K] or pressure [Pa]."""
        quality = VAPOR_QUALITY[kind]
        if temperature is not None:
            return self.resolve("T", temperature, "Q", quality)
        if pressure is not None:
            return self.resolve("P", pressure, "Q", quality)
        raise ValueError("Either temperature or pressure must be given")

    def superheated(self, dew_temperature: float, superheat: float) -> CyclePoint:
        """Dew point at *dew_temperature* [K] heated isobarically by *superheat* [K]."""
        if superheat < 0:
            raise ConfigurationError("Invalid superheat!")
        dew = self.saturation_point(TwoPhase.DEW, temperature=dew_temperature)
        if superheat < TEMPERATURE_TOLERANCE:
            return dew
        return self.heating_to(dew, dew.temperature + superheat)

    def superheated_at_pressure(self, pressure: float, superheat: float) -> CyclePoint:
        """Dew point at *pressure* [Pa] heated isobarically by *superheat* [K]."""
        if superheat < 0:
            raise ConfigurationError("Invalid superheat!")
        dew = self.saturation_point(TwoPhase.DEW, pressure=pressure)
        if superheat < TEMPERATURE_TOLERANCE:
            return dew
        return self.heating_to(dew, dew.temperature + superheat)

    def subcooled(self, bubble_temperature: float, subcooling: float) -> CyclePoint:
        """Bubble point at *bubble_temperature* [K] cooled isobarically by *subcooling* [K]."""
        if subcooling < 0:
            raise ConfigurationError("Invalid subcooling!")
        bubble = self.saturation_point(TwoPhase.BUBBLE, temperature=bubble_temperature)
        if subcooling < TEMPERATURE_TOLERANCE:
            return bubble
        return self.cooling_to(bubble, bubble.temperature - subcooling)

    # --- Processes ---

    def heating_to(self, point: CyclePoint, temperature: float) -> CyclePoint:
        """Isobaric heating of *point* up to *temperature* [K]."""
        if temperature <= point.temperature:
            raise ConfigurationError(
                f"During the heating process, the temperature should increase "
                f"({temperature:.2f} K <= {point.temperature:.2f} K)!"
            )
        return self.resolve("P", point.pressure, "T", temperature)

    def cooling_to(self, point: CyclePoint, temperature: float) -> CyclePoint:
        """Isobaric cooling of *point* down to *temperature* [K]."""
        if temperature >= point.temperature:
            raise ConfigurationError(
                f"During the cooling process, the temperature should decrease "
                f"({temperature:.2f} K >= {point.temperature:.2f} K)!"
            )
        return self.resolve("P", point.pressure, "T", temperature)

    def isentropic_compression(self, point: CyclePoint, pressure: float) -> CyclePoint:
        """Ideal compression of *point* to *pressure* [Pa]."""
        if pressure <= point.pressure:
            raise ConfigurationError(
                "Compressor outlet pressure should be higher than its inlet pressure!"
            )
        return self.resolve("P", pressure, "S", point.entropy)

    def compression(self, point: CyclePoint, pressure: float, efficiency: float) -> CyclePoint:
        """Real compression of *point* to *pressure* [Pa].

        The enthalpy rise of the isentropic process is divided by the
        isentropic *efficiency* (0–1]:
            h_out = h_in + (h_s - h_in) / η
        """
        isentropic = self.isentropic_compression(point, pressure)
        enthalpy = point.enthalpy + (isentropic.enthalpy - point.enthalpy) / efficiency
        return self.resolve("H", enthalpy, "P", pressure)

    def isenthalpic_expansion(self, point: CyclePoint, pressure: float) -> CyclePoint:
        """Throttling of *point* to *pressure* [Pa]."""
        if pressure >= point.pressure:
            raise ConfigurationError(
                "Expansion valve outlet pressure should be lower than its inlet pressure!"
            )
        return self.resolve("H", point.enthalpy, "P", pressure)

    def mixing(
        self,
        first_mass_flow: float,
        first: CyclePoint,
        second_mass_flow: float,
        second: CyclePoint,
    ) -> CyclePoint:
        """Adiabatic mixing of two streams at the same pressure.

        Args:
            first_mass_flow: Specific mass flow of the first stream.
            first: State of the first stream.
            second_mass_flow: Specific mass flow of the second stream.
            second: State of the second stream.
        """
        if abs(first.pressure - second.pressure) > PRESSURE_TOLERANCE:
            raise ConfigurationError("The mixing process is possible only for flows with the same pressure!")
        total = first_mass_flow + second_mass_flow
        enthalpy = (first_mass_flow * first.enthalpy + second_mass_flow * second.enthalpy) / total
        return self.resolve("H", enthalpy, "P", first.pressure)

    def __repr__(self) -> str:
        return f"Refrigerant('{self.name}', backend='{self.backend}')"


def list_refrigerants() -> list[str]:
    """Return CoolProp fluids (and their aliases) that follow the R-number convention."""
    names: set[str] = set()
    for fluid in CP.get_global_param_string("FluidsList").split(","):
        aliases = CP.get_fluid_param_string(fluid, "aliases").split(",")
        for alias in [fluid, *aliases]:
            alias = alias.strip()
            if alias.startswith("R") and alias[1:2].isdigit():
                names.add(alias)
    return sorted(names)
