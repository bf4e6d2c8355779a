"""
Restaurant Break-even & Pricing - Engine UI
A minimal Streamlit interface that uses the engine as the single source of truth
"""

import logging
import os

import streamlit as st

from config.default_params import INCIDENCE_MAX, INCIDENCE_STEP
from pricing_engine.compute import compute
from pricing_engine.edits import set_average_ticket, update_incidence
from pricing_engine.store import JsonFileStore, ConfigurationStoreError
from components.break_even_tab import render_break_even_tab
from components.product_mix_tab import render_product_mix_tab
from components.pricing_tab import render_pricing_tab

logging.basicConfig(level=os.getenv("BEP_LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title="Break-even & Pricing",
    page_icon="🍕",
    layout="wide"
)


def get_store():
    return JsonFileStore(os.getenv("BEP_CONFIG_PATH", "bep_config.json"))


def _save_incidence(store, field):
    value = st.session_state[f"sidebar_{field}"]
    if field != "delivery_enabled":
        value = float(value)
    store.save(update_incidence(store.load(), **{field: value}))


def _save_ticket(store):
    store.save(set_average_ticket(store.load(), st.session_state["sidebar_average_ticket"]))


def _incidence_input(label, field, value, store, disabled=False):
    value = float(value)
    return st.sidebar.number_input(
        label, min_value=min(0.0, value), max_value=max(INCIDENCE_MAX, value), value=value,
        step=INCIDENCE_STEP, key=f"sidebar_{field}", disabled=disabled,
        on_change=_save_incidence, args=(store, field)
    )


def sidebar_config(cfg, store):
    """Variable incidences and average ticket. Each edit is saved as soon as it is made."""
    st.sidebar.header("⚙️ Configuration")
    inc = cfg.variable_incidence

    st.sidebar.subheader("Variable Incidence (%)")
    _incidence_input("Average food cost", "food_cost_incidence", inc.food_cost_incidence, store)
    _incidence_input("Packaging & service", "service_incidence", inc.service_incidence, store)
    _incidence_input("Waste & errors", "waste_incidence", inc.waste_incidence, store)
    st.sidebar.checkbox("Delivery enabled", inc.delivery_enabled,
                        key="sidebar_delivery_enabled",
                        on_change=_save_incidence, args=(store, "delivery_enabled"))
    _incidence_input("Delivery", "delivery_incidence", inc.delivery_incidence, store,
                     disabled=not inc.delivery_enabled)

    st.sidebar.subheader("Average Ticket")
    st.sidebar.number_input("Revenue per cover (€)", min_value=min(0.0, float(cfg.average_ticket)),
                            value=float(cfg.average_ticket), step=0.5,
                            key="sidebar_average_ticket",
                            on_change=_save_ticket, args=(store,))


def main():
    st.title("🍕 Break-even & Product-Mix Pricing")
    st.caption("Monthly break-even target and recommended prices per category")

    store = get_store()
    try:
        # Re-read on every run: costs may have changed since the last render
        cfg = store.load()
        employees = store.load_employees()
    except ConfigurationStoreError as e:
        logger.error("Configuration unavailable: %s", e)
        st.error(f"Configuration unavailable: {e}")
        st.stop()

    sidebar_config(cfg, store)
    res = compute(cfg, employees)

    tab1, tab2, tab3 = st.tabs(["📊 Break-even", "🥧 Product Mix", "🧮 Pricing Calculator"])
    with tab1:
        render_break_even_tab(cfg, res, store)
    with tab2:
        render_product_mix_tab(cfg, res, store)
    with tab3:
        render_pricing_tab(cfg, employees, res)


if __name__ == "__main__":
    main()
