"""Pricing calculator tab component."""

import streamlit as st

from config.default_params import DEFAULT_PRICING_INPUTS
from pricing_engine.compute import price_selected_category
from pricing_engine.pricing import price_all_categories
from utils.tables import pricing_table
from utils.visualizations import create_price_breakdown_chart, create_projection_chart
from components.break_even_tab import render_issues


def render_pricing_tab(cfg, employees, res):
    """Render the per-category pricing calculator."""
    mix = cfg.product_mix
    ids = [c.id for c in mix.categories]
    if not ids:
        st.info("Add categories to the product mix first")
        return

    col1, col2 = st.columns([1, 2])
    with col1:
        default_id = DEFAULT_PRICING_INPUTS['category_id']
        category_id = st.selectbox(
            "Category", ids,
            index=ids.index(default_id) if default_id in ids else 0,
            key="pricing_category",
            format_func=lambda cid: next(
                f"{c.emoji} {c.name}".strip() for c in mix.categories if c.id == cid)
        )
        raw_material_cost = st.number_input(
            "Raw material cost per unit (€)",
            key="pricing_raw_material_cost",
            min_value=0.0,
            value=DEFAULT_PRICING_INPUTS['raw_material_cost'],
            step=0.10,
            help="Food cost of one unit; food-cost incidence is not added on top"
        )
        margin = st.slider(
            "Desired profit margin (%)", 0, 60,
            int(DEFAULT_PRICING_INPUTS['desired_margin_percent']),
            key="pricing_margin"
        )

    result = price_selected_category(cfg, employees, category_id, raw_material_cost, margin)

    with col2:
        if result is None:
            st.error("Category not found")
            return
        render_issues(result.issues)
        if not result.valid:
            st.caption(
                f"Units/month: {result.volume_units:,} · fixed cost/unit "
                f"€{result.fixed_cost_per_unit:,.2f} · variable {result.category_variable_percent:.1f}%"
            )
            return

        c1, c2, c3 = st.columns(3)
        with c1:
            st.metric("Recommended Price", f"€{result.recommended_price:,.2f}")
        with c2:
            st.metric("Break-even Price", f"€{result.break_even_price:,.2f}")
        with c3:
            st.metric("Units/Month", f"{result.volume_units:,}")
        st.plotly_chart(create_price_breakdown_chart(result.breakdown), use_container_width=True)

        p = result.projection
        c1, c2, c3, c4 = st.columns(4)
        with c1:
            st.metric("Revenue", f"€{p.revenue:,.0f}")
        with c2:
            st.metric("Costs", f"€{p.costs:,.0f}")
        with c3:
            st.metric("Profit", f"€{p.profit:,.0f}")
        with c4:
            st.metric("Margin", f"{p.margin_percent:.1f}%")

    st.divider()
    st.markdown("### All Categories")
    st.caption("Same raw material cost and margin applied to every category")
    results = price_all_categories(
        mix, res["fixed_costs"].total, cfg.variable_incidence, {},
        default_inputs=(raw_material_cost, margin)
    )
    df = pricing_table(mix, results)
    st.dataframe(df, hide_index=True, use_container_width=True)
    priced = df[df['Status'] == 'OK']
    if not priced.empty:
        st.plotly_chart(create_projection_chart(priced), use_container_width=True)
