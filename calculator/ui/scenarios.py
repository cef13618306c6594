"""Scenario save / compare UI."""

from __future__ import annotations
import pandas as pd
import streamlit as st

from calculator.calculators import CalculationInputs, ScenarioStore


def get_scenario_store() -> ScenarioStore:
    """Scenario store backed by this session's state."""
    st.session_state.setdefault("scenarios", {})
    return ScenarioStore(st.session_state.scenarios)


def render_scenario_controls(inputs: CalculationInputs) -> bool:
    """
    Render compare toggle and save buttons.

    Returns:
        True when compare mode is on
    """
    store = get_scenario_store()
    compare_mode = st.toggle("Compare Scenarios", key="compare_mode")

    s1, s2 = st.columns(2)
    with s1:
        if st.button("💾 Save Scenario 1", use_container_width=True):
            store.save(1, inputs)
            st.toast("Scenario 1 has been saved successfully.", icon="✅")
    with s2:
        if st.button("💾 Save Scenario 2", use_container_width=True):
            store.save(2, inputs)
            st.toast("Scenario 2 has been saved successfully.", icon="✅")

    return compare_mode


def render_scenario_comparison() -> None:
    store = get_scenario_store()
    if not store.has_any():
        st.info("ℹ️ Save a scenario to compare it here.")
        return

    st.subheader("Scenario Comparison")
    df = pd.DataFrame(store.compare()).rename(columns={
        "scenario": "Scenario",
        "selling_price": "Selling Price ($)",
        "product_cost": "Product Cost ($)",
        "net_profit": "Net Profit ($)",
        "profit_margin": "Profit Margin (%)",
    })
    st.dataframe(df.round(2), use_container_width=True, hide_index=True)
