"""Static explainer sections: how it works, formulas, glossary."""

from __future__ import annotations
import streamlit as st


def render_how_it_works() -> None:
    st.markdown("---")
    st.subheader("How it works")
    st.markdown(
        "This calculator determines the profitability of a product by calculating:\n\n"
        "- **Net Profit**: Selling Price minus all costs (product cost, Amazon fees, shipping, PPC, etc.)\n"
        "- **Profit Margin**: Percentage of profit relative to selling price (Net Profit / Selling Price × 100)\n"
        "- **Break-Even Units**: Number of units needed to cover all costs and start making profit"
    )

    with st.expander("🧮 Algorithm Transparency"):
        st.code(
            "Net Profit = Selling Price – (Product Cost + Amazon Referral Fee + FBA Fee"
            " + Shipping + PPC + Other Fees)",
            language=None,
        )
        st.caption("Actual profit per unit after all costs are deducted from the selling price.")
        st.code("Profit Margin % = (Net Profit / Selling Price) × 100", language=None)
        st.caption("Share of the selling price that is profit. Higher margins mean better profitability.")
        st.code("Break-Even Units = ceil(Total Costs / (Selling Price – Product Cost))", language=None)
        st.caption("Units to sell before all costs are covered.")

    c1, c2 = st.columns(2)
    with c1:
        with st.expander("What is Break-Even?"):
            st.write(
                "The break-even point is the sales volume at which total revenues equal total "
                "costs, resulting in neither profit nor loss. It is calculated by dividing total "
                "fixed costs by the difference between unit selling price and variable cost per unit."
            )
    with c2:
        with st.expander("Why PPC matters?"):
            st.write(
                "Pay-Per-Click (PPC) advertising drives targeted traffic to your listing, "
                "increasing sales and potentially improving organic ranking. Include the per-unit "
                "ad spend so the margin reflects what you actually keep."
            )
