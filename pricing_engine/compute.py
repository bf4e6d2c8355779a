import logging
from typing import Iterable, Optional

from .breakeven import compute_break_even
from .costs import aggregate_fixed_costs, fixed_costs_by_category
from .models import BepConfig, Employee
from .pricing import PricingOutcome, price_category
from .product_mix import find_category, mix_metrics, validate_product_mix

logger = logging.getLogger(__name__)


def compute(cfg: BepConfig, employees: Iterable[Employee]):
    """
    Compute the global break-even view from one configuration snapshot.

    Args:
        cfg: Configuration as loaded from the store for this call
        employees: Staff roster

    Returns:
        dict with fixed-cost totals, fixed costs per tag, mix validation and
        metrics, the break-even result and every issue raised along the way
    """
    employees = list(employees)
    totals = aggregate_fixed_costs(employees, cfg.fixed_costs)
    by_category = fixed_costs_by_category(cfg.fixed_costs, employees, include_staff=True)

    mix_check = validate_product_mix(cfg.product_mix)
    metrics = mix_metrics(cfg.product_mix)
    bep = compute_break_even(totals.total, cfg.variable_incidence, cfg.average_ticket)

    issues = list(bep.issues)
    if mix_check.issue is not None:
        issues.append(mix_check.issue)
    for issue in issues:
        logger.warning("%s: %s", issue.code, issue.reason)

    logger.debug("Fixed costs %.2f, break-even revenue %.2f, covers %.2f",
                 totals.total, bep.break_even_revenue, bep.break_even_covers)

    return {
        "fixed_costs": totals,
        "fixed_costs_by_category": by_category,
        "mix_validation": mix_check,
        "mix_metrics": metrics,
        "break_even": bep,
        "issues": issues,
    }


def price_selected_category(cfg: BepConfig, employees: Iterable[Employee], category_id: str,
                            raw_material_cost: float,
                            desired_margin_percent: float) -> Optional[PricingOutcome]:
    """Price one category of the configured mix; None when the id is not in the mix"""
    category = find_category(cfg.product_mix, category_id)
    if category is None:
        logger.warning("Category %r not found in product mix", category_id)
        return None
    totals = aggregate_fixed_costs(employees, cfg.fixed_costs)
    result = price_category(category, cfg.product_mix, totals.total, cfg.variable_incidence,
                            raw_material_cost, desired_margin_percent)
    for issue in result.issues:
        logger.warning("%s: %s", issue.code, issue.reason)
    return result
