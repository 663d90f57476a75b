"""Vapor-compression refrigeration cycles for VCRC.

Provides declarative components (evaporator, compressor,
condenser, gas cooler, economizer) and the cycle models that close them
into single-stage and two-stage loops.
"""
