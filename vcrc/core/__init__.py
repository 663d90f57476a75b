"""Core modules for VCRC.

This package contains the building blocks shared by every cycle:
- fluids: CoolProp-based refrigerant property interface and cycle points
- errors: error taxonomy
- config: analysis state persistence (JSON)
"""
