"""Tabular views of engine results for display."""

import pandas as pd

from pricing_engine.product_mix import category_target_revenue, units_for_category


def fixed_costs_table(fixed_costs, labels=None):
    """One row per fixed-cost line."""
    labels = labels or {}
    return pd.DataFrame(
        [{
            'Label': c.label,
            'Category': labels.get(c.category, c.category),
            'Amount': c.amount,
        } for c in fixed_costs],
        columns=['Label', 'Category', 'Amount']
    )


def product_mix_table(mix):
    """One row per category with its share, units and target revenue."""
    rows = []
    for c in mix.categories:
        rows.append({
            'Category': f"{c.emoji} {c.name}".strip(),
            'Share %': c.revenue_share_percent,
            'Average Price': c.average_price,
            'Units/Cover': c.volume_unit_ratio,
            'Units/Month': units_for_category(mix, c),
            'Target Revenue': category_target_revenue(mix, c),
            'Food Cost Target %': c.food_cost_target,
        })
    return pd.DataFrame(rows, columns=[
        'Category', 'Share %', 'Average Price', 'Units/Cover',
        'Units/Month', 'Target Revenue', 'Food Cost Target %'
    ])


def pricing_table(mix, results):
    """
    One row per priced category.

    Categories whose pricing failed keep their allocation figures and carry
    the reason in the 'Status' column; price and projection cells are left empty.
    """
    names = {c.id: f"{c.emoji} {c.name}".strip() for c in mix.categories}
    rows = []
    for category_id, res in results.items():
        row = {
            'Category': names.get(category_id, category_id),
            'Units': res.volume_units,
            'Fixed Cost/Unit': res.fixed_cost_per_unit,
            'Variable %': res.category_variable_percent,
            'Break-even Price': None,
            'Recommended Price': None,
            'Revenue': None,
            'Costs': None,
            'Profit': None,
            'Margin %': None,
            'Status': 'OK',
        }
        if res.valid:
            row.update({
                'Break-even Price': res.break_even_price,
                'Recommended Price': res.recommended_price,
                'Revenue': res.projection.revenue,
                'Costs': res.projection.costs,
                'Profit': res.projection.profit,
                'Margin %': res.projection.margin_percent,
            })
        else:
            row['Status'] = res.reason
        rows.append(row)
    return pd.DataFrame(rows, columns=[
        'Category', 'Units', 'Fixed Cost/Unit', 'Variable %', 'Break-even Price',
        'Recommended Price', 'Revenue', 'Costs', 'Profit', 'Margin %', 'Status'
    ])
