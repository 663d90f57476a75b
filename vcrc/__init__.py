"""VCRC: vapor-compression refrigeration cycle modelling and entropy analysis."""

__app_name__ = "vcrc"
__version__ = "0.1.0"
