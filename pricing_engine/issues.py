"""Calculation issues returned alongside results.

None of these are raised. Calculators attach them to their results so the
caller can decide whether to block an action or only show a warning.
"""
from dataclasses import dataclass

WARNING = "warning"
ERROR = "error"


@dataclass(frozen=True)
class CalculationIssue:
    reason: str
    code: str = "issue"
    severity: str = WARNING

    @property
    def is_error(self) -> bool:
        return self.severity == ERROR

    def __str__(self):
        return self.reason


@dataclass(frozen=True)
class ConfigurationInvalidError(CalculationIssue):
    """Advisory: product-mix shares off 100% or a non-positive average ticket"""
    code: str = "configuration_invalid"
    severity: str = WARNING


@dataclass(frozen=True)
class UnreachableBreakEvenError(CalculationIssue):
    """Variable costs take 100% or more of revenue"""
    code: str = "unreachable_break_even"
    severity: str = ERROR


@dataclass(frozen=True)
class MarginExceedsCapacityError(CalculationIssue):
    """Category variable costs plus desired margin take 100% or more of the price"""
    code: str = "margin_exceeds_capacity"
    severity: str = ERROR


@dataclass(frozen=True)
class ZeroVolumeWarning(CalculationIssue):
    """Category has no modeled sales units"""
    code: str = "zero_volume"
    severity: str = WARNING
