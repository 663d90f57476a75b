"""Compressor component."""

from __future__ import annotations

from typing import Any

from vcrc.core.errors import ConfigurationError
from vcrc.cycle.components.base import CycleComponent
from vcrc.cycle.validators import validate_compressor


class Compressor(CycleComponent):
    """Compressor characterised by its isentropic efficiency.

    Both stages of a two-stage cycle share the same efficiency.

    Args:
        efficiency: Isentropic efficiency (0–1].
        name: Component name.
    """

    component_type = "compressor"

    def __init__(self, efficiency: float, name: str = "compressor"):
        self.name = name
        self._efficiency = efficiency
        validate_compressor(self).raise_if_invalid(ConfigurationError)

    @property
    def efficiency(self) -> float:
        return self._efficiency

    def summary(self) -> dict[str, Any]:
        d = super().summary()
        d["efficiency"] = self.efficiency
        return d
