"""Rule checking and input validation for VCRC.

Rules are plain ``(parameter, predicate, message)`` records evaluated in
order against a target object. Checking never mutates the target and never
raises by itself; the caller decides whether the collected
:class:`ValidationResult` is reported or turned into an exception.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable

from vcrc.core.errors import ValidationError


class Severity(Enum):
    """Severity level for validation messages."""

    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def merge(self, other: ValidationResult) -> None:
        self.messages.extend(other.messages)

    def raise_if_invalid(self, error_cls: type[Exception] = ValidationError) -> None:
        """Raise *error_cls* carrying the first error message, if any.

        :class:`ValidationError` additionally receives the names of all
        violated rules.
        """
        errors = self.errors
        if not errors:
            return
        if issubclass(error_cls, ValidationError):
            raise error_cls(errors[0].message, rules=[m.parameter for m in errors])
        raise error_cls(errors[0].message)


@dataclass(frozen=True)
class Rule:
    """A named predicate over a validation target.

    Args:
        parameter: Rule name reported with a violation.
        predicate: Returns ``True`` when the target satisfies the rule.
        message: Human-readable message reported with a violation.
        severity: Severity of a violation.
    """

    parameter: str
    predicate: Callable[[Any], bool]
    message: str | Callable[[Any], str]
    severity: Severity = Severity.ERROR

    def describe(self, target: Any) -> str:
        return self.message(target) if callable(self.message) else self.message


def check_rules(
    target: Any,
    rules: Iterable[Rule],
    result: ValidationResult | None = None,
    fail_fast: bool = False,
) -> ValidationResult:
    """Evaluate *rules* in order against *target*.

    Args:
        target: Object handed to every predicate.
        rules: Ordered rules.
        result: Existing result to append to (a new one if omitted).
        fail_fast: Stop after the first violated error-level rule.

    Returns:
        ValidationResult with one message per violated rule.
    """
    result = result if result is not None else ValidationResult()
    for rule in rules:
        if rule.predicate(target):
            continue
        result.add(rule.severity, rule.parameter, rule.describe(target))
        if fail_fast and rule.severity == Severity.ERROR:
            break
    return result


# --- Common validators ---


def validate_range(
    name: str,
    value: float,
    low: float,
    high: float,
    result: ValidationResult,
    severity: Severity = Severity.ERROR,
    message: str | None = None,
    inclusive: bool = True,
) -> None:
    """Validate that a value falls within [low, high] (or (low, high))."""
    if inclusive:
        outside = value < low or value > high
        bounds = f"[{low}, {high}]"
    else:
        outside = value <= low or value >= high
        bounds = f"({low}, {high})"
    if outside:
        result.add(
            severity,
            name,
            message or f"{name} = {value} is outside {bounds}",
            value=value,
            limit=(low, high),
        )
