"""Monthly fixed-cost aggregation: staff roster plus other fixed-cost items"""
from dataclasses import dataclass
from typing import Dict, Iterable

from config.default_params import STAFF_COST_CATEGORY
from .models import Employee, FixedCostItem


@dataclass(frozen=True)
class FixedCostTotals:
    staff_cost: float
    other_cost: float
    total: float


def staff_cost(employees: Iterable[Employee]) -> float:
    """Salary plus employer contributions, summed over the roster"""
    return sum((e.monthly_cost for e in employees), 0.0)


def other_fixed_cost(fixed_costs: Iterable[FixedCostItem]) -> float:
    return sum((c.amount for c in fixed_costs), 0.0)


def aggregate_fixed_costs(employees: Iterable[Employee],
                          fixed_costs: Iterable[FixedCostItem]) -> FixedCostTotals:
    """
    Total monthly fixed costs.

    Amounts are taken as entered: negative values are not rejected here,
    data-entry validation belongs to whoever stores the configuration.
    """
    staff = staff_cost(employees)
    other = other_fixed_cost(fixed_costs)
    return FixedCostTotals(staff_cost=staff, other_cost=other, total=staff + other)


def fixed_costs_by_category(fixed_costs: Iterable[FixedCostItem],
                            employees: Iterable[Employee] = (),
                            include_staff: bool = False) -> Dict[str, float]:
    """Fixed costs grouped by tag, in order of first appearance"""
    grouped: Dict[str, float] = {}
    if include_staff:
        grouped[STAFF_COST_CATEGORY] = staff_cost(employees)
    for cost in fixed_costs:
        grouped[cost.category] = grouped.get(cost.category, 0.0) + cost.amount
    return grouped
