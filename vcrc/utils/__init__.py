"""Utility modules for VCRC."""

from vcrc.utils.constants import P_ATM, T_CELSIUS_OFFSET
from vcrc.utils.units import convert, get_unit_registry

__all__ = ["P_ATM", "T_CELSIUS_OFFSET", "convert", "get_unit_registry"]
