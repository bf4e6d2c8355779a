"""Operator edits on a BepConfig. Each returns a new config; the input is never modified."""
import uuid
from dataclasses import replace

from config.default_params import DEFAULT_FIXED_COST_CATEGORY
from .models import BepConfig, FixedCostItem, ProductMix


def new_id() -> str:
    return uuid.uuid4().hex[:9]


def add_fixed_cost(cfg: BepConfig, label: str, amount: float,
                   category: str = DEFAULT_FIXED_COST_CATEGORY) -> BepConfig:
    """Append a fixed-cost line. Blank labels and non-positive amounts are ignored."""
    if not label or not label.strip() or amount <= 0:
        return cfg
    item = FixedCostItem(id=new_id(), label=label.strip(), amount=float(amount), category=category)
    return replace(cfg, fixed_costs=cfg.fixed_costs + (item,))


def remove_fixed_cost(cfg: BepConfig, cost_id: str) -> BepConfig:
    return replace(cfg, fixed_costs=tuple(c for c in cfg.fixed_costs if c.id != cost_id))


def update_incidence(cfg: BepConfig, **changes) -> BepConfig:
    return replace(cfg, variable_incidence=replace(cfg.variable_incidence, **changes))


def set_average_ticket(cfg: BepConfig, average_ticket: float) -> BepConfig:
    return replace(cfg, average_ticket=float(average_ticket))


def set_product_mix(cfg: BepConfig, mix: ProductMix) -> BepConfig:
    return replace(cfg, product_mix=mix)


def set_monthly_cover_volume(cfg: BepConfig, volume: int) -> BepConfig:
    mix = replace(cfg.product_mix, monthly_cover_volume=max(0, int(volume)))
    return set_product_mix(cfg, mix)


def update_category(cfg: BepConfig, category_id: str, **changes) -> BepConfig:
    """Apply field changes to one category; an unknown id leaves the config as is"""
    mix = cfg.product_mix
    if not any(c.id == category_id for c in mix.categories):
        return cfg
    categories = tuple(
        replace(c, **changes) if c.id == category_id else c
        for c in mix.categories
    )
    return set_product_mix(cfg, replace(mix, categories=categories))
