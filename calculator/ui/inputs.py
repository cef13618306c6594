"""
Product Inputs UI Component
===========================

Seven per-unit number inputs, seeded from defaults and share-link query
parameters, with the referral fee auto-filled from the selling price.
"""

from __future__ import annotations
from typing import Any, Dict, Mapping
import streamlit as st

from calculator.calculators import (
    CalculationInputs,
    get_smart_defaults,
    update_input,
)
from calculator.calculators.profit_calculator import INPUT_FIELDS
from services.utils.url_state import decode_state_from_url


# field -> (label, help)
FIELD_LABELS: Dict[str, tuple] = {
    "product_cost": ("Product Cost ($)", "What you pay your supplier per unit"),
    "selling_price": ("Selling Price ($) *", "Listing price per unit"),
    "referral_fee": ("Amazon Referral Fee ($)", "Auto-calculated at 15% of the selling price if left at 0"),
    "fba_fee": ("FBA Fee ($)", "Fulfillment fee per unit (pick, pack, ship)"),
    "shipping_cost": ("Shipping Cost ($)", "Inbound shipping to the fulfillment center, per unit"),
    "ppc_budget": ("PPC Budget ($ / unit)", "Pay-per-click advertising spend per unit sold"),
    "other_fees": ("Other Fees ($)", "Storage, prep, packaging and anything else per unit"),
}


def _widget_key(field: str) -> str:
    return f"in_{field}"


def init_inputs(query_params: Mapping[str, Any]) -> None:
    """Seed widget state once per session from defaults + share link."""
    if st.session_state.get("inputs_seeded"):
        return
    seed: Dict[str, float] = {field: 0.0 for field in INPUT_FIELDS}
    seed.update(get_smart_defaults())
    seed.update(decode_state_from_url(query_params))
    for field, value in seed.items():
        # number inputs have min_value=0; negatives from a hand-edited link are dropped
        st.session_state[_widget_key(field)] = max(0.0, float(value))
    st.session_state.inputs_seeded = True


def current_inputs() -> CalculationInputs:
    """Read the current record from widget state."""
    return CalculationInputs.from_dict({
        field: st.session_state.get(_widget_key(field), 0.0) or 0.0
        for field in INPUT_FIELDS
    })


def _on_selling_price_change() -> None:
    # Widget state already holds the new price; rebuild from the old referral fee
    price = float(st.session_state.get(_widget_key("selling_price")) or 0.0)
    before = current_inputs()
    updated = update_input(before, "selling_price", price)
    st.session_state[_widget_key("referral_fee")] = updated.referral_fee


def render_inputs() -> CalculationInputs:
    """
    Render the product information inputs.

    Returns:
        Current CalculationInputs
    """
    st.subheader("Product Information")

    c1, c2 = st.columns(2)
    columns = [c1, c2]
    for i, field in enumerate(INPUT_FIELDS):
        label, help_text = FIELD_LABELS[field]
        with columns[i % 2]:
            st.number_input(
                label,
                min_value=0.0,
                step=0.01,
                format="%.2f",
                key=_widget_key(field),
                help=help_text,
                on_change=_on_selling_price_change if field == "selling_price" else None,
            )

    inputs = current_inputs()
    if inputs.selling_price <= 0:
        st.caption("⚠️ Selling price must be greater than 0")
    return inputs
