"""Entropy (exergy) analysis of vapor-compression refrigeration cycles.

Decomposes the specific work of a solved cycle into the minimum work of an
ideal reverse Carnot cycle and the exergy destroyed in each component.
"""
