"""Components of a vapor-compression refrigeration cycle."""

from vcrc.cycle.components.compressor import Compressor
from vcrc.cycle.components.economizer import Economizer
from vcrc.cycle.components.evaporator import Evaporator
from vcrc.cycle.components.heat_releaser import Condenser, GasCooler

__all__ = ["Compressor", "Condenser", "Economizer", "Evaporator", "GasCooler"]
