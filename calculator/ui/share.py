"""Share link, export buttons and email capture."""

from __future__ import annotations
import streamlit as st

from calculator.calculators import CalculationInputs, CalculationResults
from calculator.exporters import export_to_excel, export_to_json, export_to_pdf
from services.storage import CalculationLogger
from services.utils.url_state import encode_state_to_url


def is_valid_email(email: str) -> bool:
    email = (email or "").strip()
    return bool(email) and "@" in email


def render_export_section(
    inputs: CalculationInputs,
    results: CalculationResults,
    base_url: str,
) -> None:
    """
    Render export options section.

    Provides PDF, JSON and Excel downloads plus a shareable link.
    """
    st.markdown("---")
    st.subheader("Save / Share")

    col_pdf, col_json, col_excel = st.columns(3)
    with col_pdf:
        export_to_pdf(inputs, results)
    with col_json:
        export_to_json(inputs, results)
    with col_excel:
        export_to_excel(inputs, results)

    st.caption("Share link (use the copy icon):")
    st.code(encode_state_to_url(inputs, base_url), language=None)


def render_email_capture(
    inputs: CalculationInputs,
    results: CalculationResults,
    calc_logger: CalculationLogger,
) -> None:
    """Email form; logs the calculation together with the address."""
    st.markdown("---")
    st.subheader("📧 Get Your Results by Email")

    with st.form("email_form", clear_on_submit=True):
        email = st.text_input("Email", placeholder="you@example.com")
        submitted = st.form_submit_button("Send Results")

    if not submitted:
        return

    if not is_valid_email(email):
        st.warning("Please enter a valid email address.")
        return

    calc_logger.log(inputs, results, email=email.strip())
    warning = calc_logger.get_last_warning()
    if warning:
        st.error("Failed to send email. Please try again.")
    else:
        st.success("Your calculation results have been sent to your inbox.")
