"""Product mix tab component."""

from dataclasses import replace

import streamlit as st

from config.default_params import MONTHLY_VOLUME_STEP
from pricing_engine.edits import set_monthly_cover_volume, set_product_mix, update_category
from pricing_engine.product_mix import normalize_product_mix
from utils.tables import product_mix_table
from utils.visualizations import create_mix_share_chart


def _save_volume(store):
    store.save(set_monthly_cover_volume(store.load(), st.session_state["mix_monthly_covers"]))


def _category_input(label, value, step, key):
    value = float(value)
    return st.number_input(label, min_value=min(0.0, value), value=value, step=step, key=key)


def render_product_mix_tab(cfg, res, store):
    """Render the product mix editor and its validation status."""
    mix = cfg.product_mix
    check = res["mix_validation"]
    metrics = res["mix_metrics"]

    if check.is_valid:
        st.success("✅ Revenue shares sum to 100%")
    else:
        st.warning(f"⚠️ {check.issue.reason}")
        if st.button("Rescale shares to 100%", key="mix_normalize"):
            store.save(set_product_mix(cfg, normalize_product_mix(mix)))
            st.rerun()

    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Average Ticket (mix)", f"€{metrics.weighted_average_ticket:,.2f}")
    with c2:
        st.metric("Target Revenue", f"€{metrics.target_revenue:,.0f}")
    with c3:
        st.metric("Covers/Day", f"~{round(metrics.covers_per_day)}")

    st.number_input(
        "Monthly covers",
        min_value=0,
        value=int(mix.monthly_cover_volume),
        step=MONTHLY_VOLUME_STEP,
        key="mix_monthly_covers",
        on_change=_save_volume,
        args=(store,)
    )

    col1, col2 = st.columns([3, 2])
    df = product_mix_table(mix)
    with col1:
        st.dataframe(df, hide_index=True, use_container_width=True)
    with col2:
        st.plotly_chart(create_mix_share_chart(df), use_container_width=True)

    st.markdown("### Edit Category")
    ids = [c.id for c in mix.categories]
    if not ids:
        st.info("No categories configured")
        return
    selected = st.selectbox(
        "Category", ids, key="mix_edit_category",
        format_func=lambda cid: next(
            f"{c.emoji} {c.name}".strip() for c in mix.categories if c.id == cid)
    )
    category = next(c for c in mix.categories if c.id == selected)

    c1, c2, c3 = st.columns(3)
    with c1:
        share = _category_input("Revenue share %", category.revenue_share_percent, 1.0,
                                f"share_{selected}")
    with c2:
        price = _category_input("Average price (€)", category.average_price, 0.5,
                                f"price_{selected}")
    with c3:
        ratio = _category_input("Units per cover", category.volume_unit_ratio, 0.1,
                                f"ratio_{selected}")

    flags = category.variable_cost_flags
    f1, f2, f3 = st.columns(3)
    with f1:
        packaging = st.checkbox("Packaging", flags.packaging, key=f"pack_{selected}")
    with f2:
        waste = st.checkbox("Waste", flags.waste, key=f"waste_{selected}")
    with f3:
        delivery = st.checkbox("Delivery", flags.delivery, key=f"deliv_{selected}")

    if st.button("Save category", key="mix_save_category"):
        store.save(update_category(
            cfg, selected,
            revenue_share_percent=share,
            average_price=price,
            volume_unit_ratio=ratio,
            variable_cost_flags=replace(flags, packaging=packaging, waste=waste,
                                        delivery=delivery),
        ))
        st.rerun()
