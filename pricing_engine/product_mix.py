"""Product mix validation, normalization and volume metrics"""
import math
from dataclasses import dataclass, replace
from typing import Optional

from config.default_params import DAYS_PER_MONTH, SHARE_TOLERANCE
from .issues import ConfigurationInvalidError
from .models import ProductMix, RevenueCategory


@dataclass(frozen=True)
class MixValidation:
    is_valid: bool
    total_share_percent: float
    deviation: float  # positive = over-allocated, negative = under-allocated

    @property
    def issue(self) -> Optional[ConfigurationInvalidError]:
        if self.is_valid:
            return None
        side = "over" if self.deviation > 0 else "under"
        return ConfigurationInvalidError(
            f"Product mix shares sum to {self.total_share_percent:.2f}% "
            f"({side}-allocated by {abs(self.deviation):.2f} points); they should sum to 100%"
        )


@dataclass(frozen=True)
class MixMetrics:
    weighted_average_ticket: float
    target_revenue: float
    covers_per_day: float
    total_units: int


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def validate_product_mix(mix: ProductMix) -> MixValidation:
    """
    Check that revenue shares add up to 100%.

    Advisory only: calculators still run on an invalid mix using the
    shares as given.
    """
    total = sum((c.revenue_share_percent for c in mix.categories), 0.0)
    return MixValidation(
        is_valid=abs(total - 100) < SHARE_TOLERANCE,
        total_share_percent=total,
        deviation=total - 100,
    )


def units_for_category(mix: ProductMix, category: RevenueCategory) -> int:
    """Monthly units sold in a category: covers x units per cover, rounded half-up"""
    return round_half_up(mix.monthly_cover_volume * category.volume_unit_ratio)


def find_category(mix: ProductMix, category_id: str) -> Optional[RevenueCategory]:
    return next((c for c in mix.categories if c.id == category_id), None)


def weighted_average_ticket(mix: ProductMix) -> float:
    """Average spend per cover implied by the mix shares and category prices"""
    return sum((c.revenue_share_percent / 100 * c.average_price for c in mix.categories), 0.0)


def category_target_revenue(mix: ProductMix, category: RevenueCategory) -> float:
    target = mix.monthly_cover_volume * weighted_average_ticket(mix)
    return target * category.revenue_share_percent / 100


def mix_metrics(mix: ProductMix) -> MixMetrics:
    ticket = weighted_average_ticket(mix)
    return MixMetrics(
        weighted_average_ticket=ticket,
        target_revenue=mix.monthly_cover_volume * ticket,
        covers_per_day=mix.monthly_cover_volume / DAYS_PER_MONTH,
        total_units=sum(units_for_category(mix, c) for c in mix.categories),
    )


def normalize_product_mix(mix: ProductMix) -> ProductMix:
    """Rescale shares proportionally so they sum to 100. A zero total is left alone."""
    total = sum((c.revenue_share_percent for c in mix.categories), 0.0)
    if total <= 0:
        return mix
    factor = 100.0 / total
    return replace(mix, categories=tuple(
        replace(c, revenue_share_percent=c.revenue_share_percent * factor)
        for c in mix.categories
    ))
