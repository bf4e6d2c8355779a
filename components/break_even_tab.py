"""Break-even tab component."""

import streamlit as st

from config.default_params import FIXED_COST_CATEGORIES, DEFAULT_FIXED_COST_CATEGORY
from pricing_engine.edits import add_fixed_cost, remove_fixed_cost
from utils.tables import fixed_costs_table
from utils.visualizations import create_break_even_chart, create_fixed_costs_chart


def render_issues(issues):
    for issue in issues:
        if issue.is_error:
            st.error(f"⛔ {issue.reason}")
        else:
            st.warning(f"⚠️ {issue.reason}")


def render_break_even_tab(cfg, res, store):
    """Render the global break-even view and the fixed-cost editor."""
    bep = res["break_even"]
    totals = res["fixed_costs"]

    render_issues(bep.issues)

    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Break-even Revenue", f"€{bep.break_even_revenue:,.0f}")
    with c2:
        st.metric("Covers/Month", f"{bep.break_even_covers_rounded:,}")
    with c3:
        st.metric("Covers/Day", f"{bep.covers_per_day:,.1f}")
    with c4:
        st.metric("Contribution Margin", f"{bep.contribution_margin_percent:.0f}%")

    st.plotly_chart(
        create_break_even_chart(totals.total, bep.margin_ratio, bep.break_even_revenue),
        use_container_width=True
    )

    st.divider()
    st.markdown("### Monthly Fixed Costs")
    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Staff (incl. contributions)", f"€{totals.staff_cost:,.0f}")
    with c2:
        st.metric("Other Fixed Costs", f"€{totals.other_cost:,.0f}")
    with c3:
        st.metric("Total", f"€{totals.total:,.0f}")

    col1, col2 = st.columns([3, 2])
    with col1:
        st.dataframe(
            fixed_costs_table(cfg.fixed_costs, FIXED_COST_CATEGORIES),
            hide_index=True,
            use_container_width=True
        )
        if cfg.fixed_costs:
            to_remove = st.selectbox(
                "Remove a cost",
                [None] + [c.id for c in cfg.fixed_costs],
                key="fixed_cost_remove",
                format_func=lambda cid: "—" if cid is None else next(
                    f"{c.label} (€{c.amount:,.0f})" for c in cfg.fixed_costs if c.id == cid
                )
            )
            if to_remove and st.button("🗑️ Remove", key="fixed_cost_remove_button"):
                store.save(remove_fixed_cost(cfg, to_remove))
                st.rerun()
    with col2:
        st.plotly_chart(
            create_fixed_costs_chart(res["fixed_costs_by_category"], FIXED_COST_CATEGORIES),
            use_container_width=True
        )

    with st.expander("➕ Add Fixed Cost"):
        label = st.text_input("Label", placeholder="e.g. Insurance", key="fixed_cost_label")
        amount = st.number_input("Monthly amount (€)", min_value=0.0, value=0.0, step=50.0,
                                 key="fixed_cost_amount")
        tags = list(FIXED_COST_CATEGORIES)
        category = st.selectbox(
            "Category", tags,
            key="fixed_cost_category",
            index=tags.index(DEFAULT_FIXED_COST_CATEGORY),
            format_func=lambda k: FIXED_COST_CATEGORIES[k]
        )
        if st.button("Save cost", key="fixed_cost_save"):
            updated = add_fixed_cost(cfg, label, amount, category)
            if updated is cfg:
                st.warning("Enter a label and a positive amount")
            else:
                store.save(updated)
                st.rerun()

    st.caption(f"Variable costs: {bep.aggregate_variable_percent:.1f}% of revenue")
