"""
Results UI Component
====================

Metrics, advice and the detailed breakdown for one calculation.
"""

from __future__ import annotations
import streamlit as st

from calculator.calculators import (
    CalculationInputs,
    CalculationResults,
    format_units,
    get_contextual_advice,
)


def render_results(inputs: CalculationInputs, results: CalculationResults) -> None:
    """
    Render summary metrics display and advice.

    Args:
        inputs: Inputs the results were computed from
        results: Output of calculate_results
    """
    st.subheader("Results")

    c1, c2, c3 = st.columns(3)

    with c1:
        st.metric("Net Profit ($ / unit)", f"{results.net_profit:.2f}")

    with c2:
        st.metric(
            "Profit Margin (%)",
            f"{results.profit_margin:.1f}",
            delta=f"{results.profit_margin:.1f}%",
            delta_color="normal",
        )

    with c3:
        st.metric("Break-even Units", format_units(results.break_even_units))

    if results.net_profit < 0:
        st.error("⚠️ Negative profit! Consider reducing costs or increasing selling price.")

    advice = get_contextual_advice(results, inputs)
    if advice:
        st.markdown("#### Insights")
        for line in advice:
            st.markdown(f"- {line}")

    _render_breakdown(inputs, results)


def _render_breakdown(inputs: CalculationInputs, results: CalculationResults) -> None:
    with st.expander("📊 Detailed Breakdown"):
        st.write({
            "Selling price ($)": f"{inputs.selling_price:.2f}",
            "---": "---",
            "Product cost ($)": f"{inputs.product_cost:.2f}",
            "Referral fee ($)": f"{inputs.referral_fee:.2f}",
            "FBA fee ($)": f"{inputs.fba_fee:.2f}",
            "Shipping cost ($)": f"{inputs.shipping_cost:.2f}",
            "PPC budget ($)": f"{inputs.ppc_budget:.2f}",
            "Other fees ($)": f"{inputs.other_fees:.2f}",
            "Total costs ($)": f"{results.total_costs:.2f}",
            "---2": "---",
            "Net profit ($) [Price − Total costs]": f"{results.net_profit:.2f}",
            "Profit margin (%)": f"{results.profit_margin:.2f}",
            "Break-even units": format_units(results.break_even_units),
        })
