"""Error taxonomy for VCRC."""

from __future__ import annotations


class VCRCError(Exception):
    """Base class for all errors raised by VCRC."""


class ConfigurationError(VCRCError, ValueError):
    """Raised when component parameters or the cycle topology are unrealizable."""


class ValidationError(VCRCError, ValueError):
    """Raised when a named physical-consistency rule is violated.

    Args:
        message: Human-readable message of the (first) violated rule.
        rules: Names of all violated rules.
    """

    def __init__(self, message: str, rules: list[str] | None = None):
        super().__init__(message)
        self.rules = rules or []


class ArgumentError(VCRCError, ValueError):
    """Raised when caller-supplied collections break a structural precondition."""


class PropertyResolutionError(VCRCError):
    """Raised when a refrigerant state cannot be resolved."""
