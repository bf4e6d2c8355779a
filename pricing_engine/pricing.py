"""Per-category pricing: fixed-cost allocation, break-even and recommended price, projection"""
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple, Union

from .issues import CalculationIssue, MarginExceedsCapacityError, ZeroVolumeWarning
from .models import ProductMix, RevenueCategory, VariableIncidenceConfig
from .product_mix import units_for_category, validate_product_mix

BREAKDOWN_TOLERANCE = 1e-6


@dataclass(frozen=True)
class PriceBreakdown:
    raw_material_cost: float
    fixed_cost_per_unit: float
    variable_cost_amount: float
    profit_amount: float

    @property
    def total(self) -> float:
        return (self.raw_material_cost + self.fixed_cost_per_unit
                + self.variable_cost_amount + self.profit_amount)


@dataclass(frozen=True)
class MonthlyProjection:
    revenue: float
    costs: float
    profit: float
    margin_percent: float


@dataclass(frozen=True)
class PricingResult:
    category_id: str
    volume_units: int
    category_fixed_costs: float
    fixed_cost_per_unit: float
    category_variable_percent: float
    break_even_price: float
    recommended_price: float
    breakdown: PriceBreakdown
    projection: MonthlyProjection
    issues: Tuple[CalculationIssue, ...] = ()

    valid = True

    @property
    def breakdown_consistent(self) -> bool:
        return abs(self.breakdown.total - self.recommended_price) < BREAKDOWN_TOLERANCE


@dataclass(frozen=True)
class PricingError:
    category_id: str
    reason: str
    volume_units: int
    category_fixed_costs: float
    fixed_cost_per_unit: float
    category_variable_percent: float
    issues: Tuple[CalculationIssue, ...] = ()

    valid = False


PricingOutcome = Union[PricingResult, PricingError]


def category_variable_percent(category: RevenueCategory,
                              incidence: VariableIncidenceConfig) -> float:
    """
    Variable-cost % applying to a category, from its flags.

    Food-cost incidence is left out: the raw-material cost passed to
    ``price_category`` already is the food cost of one unit.
    """
    flags = category.variable_cost_flags
    pct = 0.0
    if flags.packaging:
        pct += incidence.service_incidence
    if flags.waste:
        pct += incidence.waste_incidence
    if flags.delivery and incidence.delivery_enabled:
        pct += incidence.delivery_incidence
    return pct


def monthly_projection(volume_units: int, recommended_price: float, raw_material_cost: float,
                       category_fixed_costs: float, variable_pct: float) -> MonthlyProjection:
    revenue = volume_units * recommended_price
    costs = (volume_units * raw_material_cost + category_fixed_costs
             + revenue * variable_pct / 100)
    profit = revenue - costs
    margin = profit / revenue * 100 if revenue > 0 else 0.0
    return MonthlyProjection(revenue=revenue, costs=costs, profit=profit, margin_percent=margin)


def price_category(category: RevenueCategory, mix: ProductMix, total_fixed_costs: float,
                   incidence: VariableIncidenceConfig, raw_material_cost: float,
                   desired_margin_percent: float) -> PricingOutcome:
    """
    Recommended selling price for one category of the product mix.

    The category carries its revenue share of the fixed costs, spread over
    its monthly units. The price is grossed up so that the category's
    variable costs and the desired margin are both percentages of it.

    Args:
        category: Category to price
        mix: Product mix the category belongs to (gives the cover volume)
        total_fixed_costs: Monthly fixed costs of the whole restaurant
        incidence: Variable-cost incidences, % of revenue
        raw_material_cost: Food cost of one unit
        desired_margin_percent: Profit as % of the selling price

    Returns:
        PricingResult, or PricingError when variable costs plus margin leave
        nothing to cover the unit cost. Neither raises.
    """
    issues: List[CalculationIssue] = []

    mix_check = validate_product_mix(mix)
    if mix_check.issue is not None:
        issues.append(mix_check.issue)

    volume_units = units_for_category(mix, category)
    category_fixed = total_fixed_costs * (category.revenue_share_percent / 100)
    if volume_units > 0:
        fixed_per_unit = category_fixed / volume_units
    else:
        fixed_per_unit = 0.0
        issues.append(ZeroVolumeWarning(
            f"Category '{category.name}' has no modeled sales volume; "
            "fixed costs cannot be allocated per unit"
        ))

    variable_pct = category_variable_percent(category, incidence)
    cost_share = 1 - variable_pct / 100
    denominator = cost_share - desired_margin_percent / 100

    if denominator <= 0 or cost_share <= 0:
        reason = "Variable costs and desired margin exceed 100% of revenue"
        issues.append(MarginExceedsCapacityError(
            f"{reason} ({variable_pct:.1f}% variable + {desired_margin_percent:.1f}% margin "
            f"for '{category.name}')"
        ))
        return PricingError(
            category_id=category.id,
            reason=reason,
            volume_units=volume_units,
            category_fixed_costs=category_fixed,
            fixed_cost_per_unit=fixed_per_unit,
            category_variable_percent=variable_pct,
            issues=tuple(issues),
        )

    unit_cost = raw_material_cost + fixed_per_unit
    break_even_price = unit_cost / cost_share
    recommended_price = unit_cost / denominator

    breakdown = PriceBreakdown(
        raw_material_cost=raw_material_cost,
        fixed_cost_per_unit=fixed_per_unit,
        variable_cost_amount=recommended_price * variable_pct / 100,
        profit_amount=recommended_price * desired_margin_percent / 100,
    )
    projection = monthly_projection(volume_units, recommended_price, raw_material_cost,
                                    category_fixed, variable_pct)

    return PricingResult(
        category_id=category.id,
        volume_units=volume_units,
        category_fixed_costs=category_fixed,
        fixed_cost_per_unit=fixed_per_unit,
        category_variable_percent=variable_pct,
        break_even_price=break_even_price,
        recommended_price=recommended_price,
        breakdown=breakdown,
        projection=projection,
        issues=tuple(issues),
    )


def price_all_categories(mix: ProductMix, total_fixed_costs: float,
                         incidence: VariableIncidenceConfig,
                         inputs: Mapping[str, Tuple[float, float]],
                         default_inputs: Optional[Tuple[float, float]] = None
                         ) -> Dict[str, PricingOutcome]:
    """
    Price every category in mix order.

    ``inputs`` maps category id to ``(raw_material_cost, desired_margin_percent)``.
    Categories without inputs use ``default_inputs``, or are skipped when
    that is None.
    """
    results: Dict[str, PricingOutcome] = {}
    for category in mix.categories:
        params = inputs.get(category.id, default_inputs)
        if params is None:
            continue
        raw_material_cost, margin = params
        results[category.id] = price_category(
            category, mix, total_fixed_costs, incidence, raw_material_cost, margin
        )
    return results
