"""
Streamlit entrypoint for the FBA Profit Calculator.
- Intro splash on first load
- Inputs -> live results, advice, charts
- Calculate button validates and logs the run
- Export, share link, email capture
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Add project root to Python path FIRST
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import streamlit as st

from calculator.calculators import calculate_results, validate_inputs
from calculator.ui import (
    init_inputs,
    render_email_capture,
    render_export_section,
    render_how_it_works,
    render_inputs,
    render_intro,
    render_profit_chart,
    render_results,
    render_scenario_comparison,
    render_scenario_controls,
)
from services.config_manager import configure_logging, load_settings
from services.storage import get_calculation_logger

configure_logging()
logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Page setup
# -----------------------------------------------------------------------------
st.set_page_config(page_title="FBA Profit Calculator", page_icon="📦", layout="wide")

render_intro()

settings = load_settings()
calc_logger = get_calculation_logger()

st.title("📦 Amazon FBA Profit Calculator")
st.caption("Calculate FBA fees, profit margins and break-even units for your Amazon products.")
st.markdown("---")

init_inputs(st.query_params)

# -----------------------------------------------------------------------------
# Inputs (left) / results (right)
# -----------------------------------------------------------------------------
left, right = st.columns(2)

with left:
    inputs = render_inputs()
    compare_mode = render_scenario_controls(inputs)

    if st.button("🧮 Calculate Profit", type="primary", use_container_width=True):
        errors = validate_inputs(inputs)
        if errors:
            st.error(f"Validation Error: {errors[0]}")
        else:
            with st.spinner("Calculating…"):
                calc_logger.log(inputs, calculate_results(inputs))
            warning = calc_logger.get_last_warning()
            if warning:
                logger.info("Calculation log degraded: %s", warning)

# Live recalculation on every rerun while the selling price is set
results = calculate_results(inputs) if inputs.selling_price > 0 else None

with right:
    if results is None:
        st.info("ℹ️ Enter a selling price to see your results.")
    else:
        render_results(inputs, results)

if results is not None:
    st.markdown("---")
    render_profit_chart(inputs, results)

    if compare_mode:
        render_scenario_comparison()

    render_export_section(inputs, results, settings.base_url)
    render_email_capture(inputs, results, calc_logger)

render_how_it_works()
