"""Excel export functionality."""

from __future__ import annotations
import logging
from io import BytesIO
from datetime import datetime
from typing import Any, List, Optional, Tuple
import pandas as pd
import streamlit as st

from calculator.calculators import CalculationInputs, CalculationResults, format_units

logger = logging.getLogger(__name__)

SHEET_NAME = "FBA Profit"


def build_export_rows(
    inputs: CalculationInputs,
    results: CalculationResults,
) -> List[Tuple[str, Any]]:
    """Flatten inputs and results into (label, value) rows."""
    return [
        ("— Inputs —", ""),
        ("Product cost ($)", round(inputs.product_cost, 2)),
        ("Selling price ($)", round(inputs.selling_price, 2)),
        ("Referral fee ($)", round(inputs.referral_fee, 2)),
        ("FBA fee ($)", round(inputs.fba_fee, 2)),
        ("Shipping cost ($)", round(inputs.shipping_cost, 2)),
        ("PPC budget ($)", round(inputs.ppc_budget, 2)),
        ("Other fees ($)", round(inputs.other_fees, 2)),
        ("", ""),
        ("— Results —", ""),
        ("Total costs ($)", round(results.total_costs, 2)),
        ("Net profit ($)", round(results.net_profit, 2)),
        ("Profit margin (%)", round(results.profit_margin, 2)),
        ("Break-even units", format_units(results.break_even_units)),
    ]


def build_excel_report(export_rows: List[Tuple[str, Any]]) -> bytes:
    """Write the rows into a single-sheet workbook."""
    buf = BytesIO()
    bd_rows = [
        {"Item": k, "Value": ("" if v in (None, "") else v)}
        for k, v in export_rows
    ]

    with pd.ExcelWriter(buf, engine="xlsxwriter") as xw:
        df = pd.DataFrame(bd_rows, columns=["Item", "Value"])
        df.to_excel(xw, index=False, sheet_name=SHEET_NAME)
        ws = xw.sheets[SHEET_NAME]
        ws.set_column(0, 0, 32)
        ws.set_column(1, 1, 18)

    return buf.getvalue()


def export_to_excel(
    inputs: CalculationInputs,
    results: CalculationResults,
    now: Optional[datetime] = None,
) -> None:
    """Render Excel download button."""
    calc_id = (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
    try:
        payload = build_excel_report(build_export_rows(inputs, results))
    except (ImportError, ValueError) as e:
        logger.exception("Excel export failed")
        st.error(f"Excel export failed: {e}")
        return

    st.download_button(
        "Download Excel",
        data=payload,
        file_name=f"fba-profit-calculation_{calc_id}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        use_container_width=True,
    )
