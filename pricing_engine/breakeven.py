"""Global break-even revenue and cover count"""
import math
from dataclasses import dataclass
from typing import List, Tuple

from config.default_params import DAYS_PER_MONTH
from .issues import CalculationIssue, ConfigurationInvalidError, UnreachableBreakEvenError
from .models import VariableIncidenceConfig


@dataclass(frozen=True)
class BreakEvenResult:
    aggregate_variable_percent: float
    margin_ratio: float
    break_even_revenue: float
    break_even_covers: float
    unreachable: bool = False
    issues: Tuple[CalculationIssue, ...] = ()

    @property
    def contribution_margin_percent(self) -> float:
        return self.margin_ratio * 100

    @property
    def break_even_covers_rounded(self) -> int:
        """Covers rounded up to a whole cover"""
        return math.ceil(self.break_even_covers)

    @property
    def covers_per_day(self) -> float:
        return self.break_even_covers / DAYS_PER_MONTH


def aggregate_variable_percent(incidence: VariableIncidenceConfig) -> float:
    """Food cost + service + waste, plus delivery when it is enabled"""
    delivery = incidence.delivery_incidence if incidence.delivery_enabled else 0.0
    return (incidence.food_cost_incidence + incidence.service_incidence
            + incidence.waste_incidence + delivery)


def compute_break_even(total_fixed_costs: float, incidence: VariableIncidenceConfig,
                       average_ticket: float) -> BreakEvenResult:
    """
    Monthly revenue and covers needed for profit to reach zero.

    Args:
        total_fixed_costs: Monthly fixed costs (staff + other)
        incidence: Variable-cost incidences, % of revenue
        average_ticket: Average spend per cover

    Returns:
        BreakEvenResult. When variable costs take 100% or more of revenue the
        revenue is reported as 0 with ``unreachable`` set; a non-positive
        ticket reports 0 covers. Both cases carry an issue for the caller.
    """
    variable_pct = aggregate_variable_percent(incidence)
    margin_ratio = 1 - variable_pct / 100
    issues: List[CalculationIssue] = []

    if margin_ratio <= 0:
        revenue = 0.0
        unreachable = True
        issues.append(UnreachableBreakEvenError(
            f"Variable costs consume {variable_pct:.1f}% of revenue; "
            "no price can break even"
        ))
    else:
        revenue = total_fixed_costs / margin_ratio
        unreachable = False

    if average_ticket > 0:
        covers = revenue / average_ticket
    else:
        covers = 0.0
        issues.append(ConfigurationInvalidError(
            f"Average ticket must be positive to derive covers (got {average_ticket})"
        ))

    return BreakEvenResult(
        aggregate_variable_percent=variable_pct,
        margin_ratio=margin_ratio,
        break_even_revenue=revenue,
        break_even_covers=covers,
        unreachable=unreachable,
        issues=tuple(issues),
    )
