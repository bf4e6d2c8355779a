"""Test per-category pricing, breakdown and monthly projection"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from pricing_engine.models import (
    ProductMix, RevenueCategory, VariableCostFlags, VariableIncidenceConfig
)
from pricing_engine.issues import (
    ConfigurationInvalidError, MarginExceedsCapacityError, ZeroVolumeWarning
)
from pricing_engine.pricing import (
    PricingError, PricingResult, category_variable_percent, monthly_projection,
    price_all_categories, price_category
)


def base_incidence(**overrides):
    params = dict(food_cost_incidence=30, service_incidence=5, waste_incidence=2,
                  delivery_enabled=False, delivery_incidence=0)
    params.update(overrides)
    return VariableIncidenceConfig(**params)


def pizza(**overrides):
    params = dict(id="pizza", name="Pizza", revenue_share_percent=55, average_price=9.0,
                  volume_unit_ratio=1.0, food_cost_target=25,
                  variable_cost_flags=VariableCostFlags(packaging=True, waste=True, delivery=True))
    params.update(overrides)
    return RevenueCategory(**params)


def base_mix(volume=960):
    return ProductMix(monthly_cover_volume=volume, categories=[
        pizza(),
        RevenueCategory(id="bev", name="Beverage", revenue_share_percent=25, average_price=3.5,
                        volume_unit_ratio=1.2,
                        variable_cost_flags=VariableCostFlags(packaging=True)),
        RevenueCategory(id="dessert", name="Dessert", revenue_share_percent=20, average_price=5.0,
                        volume_unit_ratio=0.3),
    ])


def test_pizza_scenario():
    """960 covers, 55% share, 6,500 fixed, 1.00 raw, 7% variable, 10% margin -> ~5.69"""
    mix = base_mix()
    res = price_category(mix.categories[0], mix, 6500.0, base_incidence(), 1.00, 10)
    assert isinstance(res, PricingResult)
    assert res.valid
    assert res.volume_units == 960
    assert abs(res.category_fixed_costs - 3575.0) < 1e-9
    assert abs(res.fixed_cost_per_unit - 3.72) < 0.01
    assert abs(res.category_variable_percent - 7.0) < 1e-9
    assert abs(res.recommended_price - 5.69) < 0.01
    assert abs(res.break_even_price - (1.0 + 3575.0 / 960) / 0.93) < 1e-9
    assert res.issues == ()


def test_breakdown_sums_to_price():
    mix = base_mix()
    inc = base_incidence(delivery_enabled=True, delivery_incidence=12)
    for category in mix.categories:
        for raw in (0.0, 0.35, 1.0, 4.2):
            for margin in (0, 5, 10, 25, 60):
                res = price_category(category, mix, 6500.0, inc, raw, margin)
                assert res.valid, f"{category.id} raw={raw} margin={margin}"
                assert abs(res.breakdown.total - res.recommended_price) < 1e-6
                assert res.breakdown_consistent


def test_recommended_not_below_break_even():
    mix = base_mix()
    for margin in (0, 1, 10, 50, 80):
        res = price_category(mix.categories[0], mix, 6500.0, base_incidence(), 1.0, margin)
        assert res.recommended_price >= res.break_even_price - 1e-12


def test_zero_margin_price_equals_break_even():
    mix = base_mix()
    res = price_category(mix.categories[0], mix, 6500.0, base_incidence(), 1.0, 0)
    assert abs(res.recommended_price - res.break_even_price) < 1e-12
    assert res.breakdown.profit_amount == 0


def test_projection_profit_matches_margin():
    """With volume, monthly profit is exactly the desired margin of revenue"""
    mix = base_mix()
    res = price_category(mix.categories[0], mix, 6500.0, base_incidence(), 1.0, 10)
    p = res.projection
    assert abs(p.revenue - 960 * res.recommended_price) < 1e-6
    expected_costs = 960 * 1.0 + 3575.0 + p.revenue * 0.07
    assert abs(p.costs - expected_costs) < 1e-6
    assert abs(p.profit - (p.revenue - p.costs)) < 1e-9
    assert abs(p.margin_percent - 10.0) < 1e-6


def test_margin_exceeds_capacity():
    mix = base_mix()
    res = price_category(mix.categories[0], mix, 6500.0, base_incidence(), 1.0, 95)
    assert isinstance(res, PricingError)
    assert not res.valid
    assert "exceed 100%" in res.reason
    assert any(isinstance(i, MarginExceedsCapacityError) for i in res.issues)
    # allocation figures still reported
    assert res.volume_units == 960
    assert abs(res.category_variable_percent - 7.0) < 1e-9


def test_no_variable_flags_full_margin_is_error():
    """No variable costs: 95% margin still prices, 100% margin does not"""
    cat = pizza(revenue_share_percent=10,
                variable_cost_flags=VariableCostFlags(packaging=False, waste=False, delivery=False))
    mix = ProductMix(monthly_cover_volume=960, categories=[cat])
    assert price_category(cat, mix, 6500.0, base_incidence(), 1.0, 95).valid
    res = price_category(cat, mix, 6500.0, base_incidence(), 1.0, 100)
    assert not res.valid
    assert any(isinstance(i, MarginExceedsCapacityError) for i in res.issues)


def test_variable_costs_alone_at_100_percent():
    inc = base_incidence(service_incidence=60, waste_incidence=40)
    mix = base_mix()
    res = price_category(mix.categories[0], mix, 6500.0, inc, 1.0, 0)
    assert not res.valid


def test_zero_volume_warning():
    mix = base_mix(volume=0)
    res = price_category(mix.categories[0], mix, 6500.0, base_incidence(), 1.0, 10)
    assert res.valid
    assert res.volume_units == 0
    assert res.fixed_cost_per_unit == 0
    assert any(isinstance(i, ZeroVolumeWarning) for i in res.issues)
    assert abs(res.recommended_price - 1.0 / 0.83) < 1e-9
    assert res.projection.revenue == 0
    assert res.projection.margin_percent == 0
    # fixed costs still land in the monthly projection
    assert abs(res.projection.costs - 3575.0) < 1e-9


def test_invalid_mix_attaches_warning_but_prices():
    mix = ProductMix(monthly_cover_volume=960, categories=[pizza()])  # 55% total
    res = price_category(mix.categories[0], mix, 6500.0, base_incidence(), 1.0, 10)
    assert res.valid
    assert any(isinstance(i, ConfigurationInvalidError) for i in res.issues)
    assert abs(res.category_fixed_costs - 3575.0) < 1e-9


def test_food_cost_incidence_not_in_category_percent():
    cat = pizza()
    low = category_variable_percent(cat, base_incidence(food_cost_incidence=0))
    high = category_variable_percent(cat, base_incidence(food_cost_incidence=60))
    assert low == high == 7.0


def test_delivery_flag_needs_delivery_enabled():
    cat = pizza()
    assert category_variable_percent(cat, base_incidence(delivery_incidence=10)) == 7.0
    assert category_variable_percent(
        cat, base_incidence(delivery_enabled=True, delivery_incidence=10)) == 17.0
    no_delivery = pizza(variable_cost_flags=VariableCostFlags(packaging=True, waste=True))
    assert category_variable_percent(
        no_delivery, base_incidence(delivery_enabled=True, delivery_incidence=10)) == 7.0


def test_price_all_categories():
    mix = base_mix()
    results = price_all_categories(
        mix, 6500.0, base_incidence(),
        {"pizza": (1.0, 10), "bev": (0.4, 95)},
    )
    assert list(results) == ["pizza", "bev"]
    assert results["pizza"].valid
    assert not results["bev"].valid  # 5% packaging + 95% margin


def test_price_all_categories_with_default_inputs():
    mix = base_mix()
    results = price_all_categories(mix, 6500.0, base_incidence(), {"bev": (0.4, 20)},
                                   default_inputs=(1.0, 10))
    assert list(results) == ["pizza", "bev", "dessert"]
    assert results["bev"].breakdown.raw_material_cost == 0.4
    assert results["dessert"].breakdown.raw_material_cost == 1.0


def test_monthly_projection():
    proj = monthly_projection(100, 10.0, 2.0, 300.0, 10.0)
    assert abs(proj.revenue - 1000.0) < 1e-9
    assert abs(proj.costs - 600.0) < 1e-9
    assert abs(proj.profit - 400.0) < 1e-9
    assert abs(proj.margin_percent - 40.0) < 1e-9


def test_monthly_projection_without_revenue():
    proj = monthly_projection(0, 10.0, 2.0, 300.0, 10.0)
    assert proj.revenue == 0
    assert proj.profit == -300.0
    assert proj.margin_percent == 0.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
