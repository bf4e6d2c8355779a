"""Visualization utilities for the break-even and pricing views."""

import plotly.graph_objects as go
import pandas as pd


def create_price_breakdown_chart(breakdown):
    """Donut of the four components of a recommended price."""
    labels = ['Raw material', 'Fixed costs', 'Variable costs', 'Profit']
    values = [
        breakdown.raw_material_cost,
        breakdown.fixed_cost_per_unit,
        breakdown.variable_cost_amount,
        breakdown.profit_amount,
    ]
    fig = go.Figure(data=[go.Pie(
        labels=labels,
        values=values,
        hole=0.5,
        sort=False,
        marker=dict(colors=['#3b82f6', '#f59e0b', '#a855f7', '#22c55e'])
    )])
    fig.update_layout(
        title=f'Price Breakdown (€{breakdown.total:,.2f})',
        height=350
    )
    return fig


def create_mix_share_chart(mix_df: pd.DataFrame):
    """Pie of revenue share by category."""
    fig = go.Figure(data=[go.Pie(
        labels=mix_df['Category'],
        values=mix_df['Share %'],
        sort=False
    )])
    fig.update_layout(title='Revenue Share by Category', height=350)
    return fig


def create_projection_chart(projection_df: pd.DataFrame):
    """Monthly revenue, costs and profit per category."""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=projection_df['Category'],
        y=projection_df['Revenue'],
        name='Revenue',
        marker_color='green'
    ))
    fig.add_trace(go.Bar(
        x=projection_df['Category'],
        y=projection_df['Costs'],
        name='Costs',
        marker_color='red'
    ))
    fig.add_trace(go.Bar(
        x=projection_df['Category'],
        y=projection_df['Profit'],
        name='Profit',
        marker_color='blue'
    ))
    fig.update_layout(
        title='Monthly Projection by Category',
        barmode='group',
        xaxis_title='Category',
        yaxis_title='€ / month',
        height=400
    )
    return fig


def create_break_even_chart(total_fixed_costs, margin_ratio, break_even_revenue, points=20):
    """Revenue vs total costs, crossing at the break-even revenue."""
    max_revenue = max(break_even_revenue * 2, 1.0)
    revenue = [max_revenue * i / points for i in range(points + 1)]
    variable_share = 1 - margin_ratio
    costs = [total_fixed_costs + r * variable_share for r in revenue]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=revenue,
        y=revenue,
        mode='lines',
        name='Revenue',
        line=dict(color='green', width=2)
    ))
    fig.add_trace(go.Scatter(
        x=revenue,
        y=costs,
        mode='lines',
        name='Total Costs',
        line=dict(color='red', width=2)
    ))
    if break_even_revenue > 0:
        fig.add_vline(x=break_even_revenue, line_dash="dash", line_color="gray")
    fig.update_layout(
        title='Break-even Point',
        xaxis_title='Monthly Revenue (€)',
        yaxis_title='€',
        height=400
    )
    return fig


def create_fixed_costs_chart(by_category, labels=None):
    """Bar chart of fixed costs grouped by tag."""
    labels = labels or {}
    names = [labels.get(k, k) for k in by_category]
    fig = go.Figure(data=[go.Bar(
        x=names,
        y=list(by_category.values()),
        marker_color='indianred'
    )])
    fig.update_layout(
        title='Monthly Fixed Costs',
        xaxis_title='Category',
        yaxis_title='€ / month',
        height=350
    )
    return fig
