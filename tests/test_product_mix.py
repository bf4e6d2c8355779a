"""Test product mix validation, units and mix metrics"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from pricing_engine.models import ProductMix, RevenueCategory, default_product_mix
from pricing_engine.issues import ConfigurationInvalidError
from pricing_engine.product_mix import (
    validate_product_mix, units_for_category, find_category, weighted_average_ticket,
    category_target_revenue, mix_metrics, normalize_product_mix
)


def mix_of(*shares, volume=1000):
    return ProductMix(
        monthly_cover_volume=volume,
        categories=[
            RevenueCategory(id=f"c{i}", name=f"Cat {i}", revenue_share_percent=s,
                            average_price=10.0, volume_unit_ratio=1.0)
            for i, s in enumerate(shares)
        ],
    )


def test_valid_mix():
    check = validate_product_mix(mix_of(55, 25, 10, 10))
    assert check.is_valid
    assert abs(check.total_share_percent - 100) < 1e-9
    assert abs(check.deviation) < 1e-9
    assert check.issue is None


def test_under_allocated_mix():
    """Shares summing to 92% -> invalid, deviation -8"""
    check = validate_product_mix(mix_of(50, 22, 10, 10))
    assert not check.is_valid
    assert abs(check.deviation - (-8.0)) < 1e-9
    assert isinstance(check.issue, ConfigurationInvalidError)
    assert "under-allocated" in check.issue.reason


def test_over_allocated_mix():
    check = validate_product_mix(mix_of(60, 50))
    assert not check.is_valid
    assert check.deviation == pytest.approx(10.0)
    assert "over-allocated" in check.issue.reason


def test_tolerance():
    assert validate_product_mix(mix_of(33.333, 33.333, 33.3375)).is_valid
    assert not validate_product_mix(mix_of(50, 49.98)).is_valid


def test_empty_mix_is_invalid():
    check = validate_product_mix(ProductMix(monthly_cover_volume=500))
    assert not check.is_valid
    assert check.deviation == -100.0


def test_units_for_category():
    mix = ProductMix(monthly_cover_volume=960, categories=[
        RevenueCategory(id="pizza", name="Pizza", revenue_share_percent=55, volume_unit_ratio=1.0),
        RevenueCategory(id="bev", name="Beverage", revenue_share_percent=45, volume_unit_ratio=1.5),
    ])
    assert units_for_category(mix, mix.categories[0]) == 960
    assert units_for_category(mix, mix.categories[1]) == 1440


def test_units_round_half_up():
    """2.5 units rounds to 3, not to the even 2"""
    mix = ProductMix(monthly_cover_volume=5, categories=[
        RevenueCategory(id="a", name="A", volume_unit_ratio=0.5),
    ])
    assert units_for_category(mix, mix.categories[0]) == 3


def test_units_zero_volume():
    mix = mix_of(100, volume=0)
    assert units_for_category(mix, mix.categories[0]) == 0


def test_unit_sum_close_to_unrounded_sum():
    mix = ProductMix(monthly_cover_volume=777, categories=[
        RevenueCategory(id=str(i), name=str(i), volume_unit_ratio=r)
        for i, r in enumerate([1.0, 0.33, 1.27, 0.05, 2.5])
    ])
    rounded = sum(units_for_category(mix, c) for c in mix.categories)
    exact = sum(mix.monthly_cover_volume * c.volume_unit_ratio for c in mix.categories)
    assert abs(rounded - exact) <= 0.5 * len(mix.categories)


def test_find_category():
    mix = default_product_mix()
    assert find_category(mix, "pizza").name == "Pizza"
    assert find_category(mix, "sushi") is None


def test_weighted_average_ticket_and_target_revenue():
    mix = ProductMix(monthly_cover_volume=1000, categories=[
        RevenueCategory(id="a", name="A", revenue_share_percent=60, average_price=10.0),
        RevenueCategory(id="b", name="B", revenue_share_percent=40, average_price=5.0),
    ])
    # 0.6*10 + 0.4*5 = 8
    assert abs(weighted_average_ticket(mix) - 8.0) < 1e-9
    metrics = mix_metrics(mix)
    assert abs(metrics.target_revenue - 8000.0) < 1e-9
    assert abs(metrics.covers_per_day - 1000 / 30) < 1e-9
    assert metrics.total_units == 2000
    assert abs(category_target_revenue(mix, mix.categories[0]) - 4800.0) < 1e-9


def test_normalize_rescales_to_100():
    mix = mix_of(46, 11, 5, 30)  # 92
    normalized = normalize_product_mix(mix)
    check = validate_product_mix(normalized)
    assert check.is_valid
    assert normalized.categories[0].revenue_share_percent == pytest.approx(50.0)
    # original untouched
    assert mix.categories[0].revenue_share_percent == 46


def test_normalize_zero_total_unchanged():
    mix = mix_of(0, 0)
    assert normalize_product_mix(mix) is mix


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
