"""PDF report export functionality."""

from __future__ import annotations
import logging
from datetime import datetime
from io import BytesIO
from typing import List, Optional, Tuple
import streamlit as st

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from calculator.calculators import CalculationInputs, CalculationResults, format_units

logger = logging.getLogger(__name__)

PDF_FILENAME = "fba-profit-calculation.pdf"
REPORT_TITLE = "Amazon FBA Profit Calculator Report"

FORMULA_LINES = [
    "Net Profit = Selling Price - (Product Cost + Fees + Shipping + PPC)",
    "Profit Margin % = (Net Profit / Selling Price) × 100",
    "Break-Even Units = ceil(Total Costs / (Selling Price - Product Cost))",
]


def input_rows(inputs: CalculationInputs) -> List[Tuple[str, str]]:
    return [
        ("Product Cost", f"${inputs.product_cost:.2f}"),
        ("Selling Price", f"${inputs.selling_price:.2f}"),
        ("Amazon Referral Fee", f"${inputs.referral_fee:.2f}"),
        ("FBA Fee", f"${inputs.fba_fee:.2f}"),
        ("Shipping Cost", f"${inputs.shipping_cost:.2f}"),
        ("PPC Budget", f"${inputs.ppc_budget:.2f}"),
        ("Other Fees", f"${inputs.other_fees:.2f}"),
    ]


def result_rows(results: CalculationResults) -> List[Tuple[str, str]]:
    return [
        ("Net Profit", f"${results.net_profit:.2f}"),
        ("Profit Margin", f"{results.profit_margin:.1f}%"),
        ("Break-even Units", format_units(results.break_even_units)),
    ]


def _table(rows: List[Tuple[str, str]]) -> Table:
    table = Table(rows, colWidths=[70 * mm, 40 * mm], hAlign="LEFT")
    table.setStyle(TableStyle([
        ("FONTSIZE", (0, 0), (-1, -1), 11),
        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
        ("LINEBELOW", (0, 0), (-1, -1), 0.25, "#dddddd"),
    ]))
    return table


def build_pdf_report(
    inputs: CalculationInputs,
    results: CalculationResults,
    now: Optional[datetime] = None,
) -> bytes:
    """
    Render the calculation report as a PDF document.

    Sections: title, generation date, input values, results and the
    formulas used.

    Returns:
        PDF file content
    """
    now = now or datetime.now()
    buf = BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        title=REPORT_TITLE,
        topMargin=20 * mm,
        bottomMargin=20 * mm,
        leftMargin=20 * mm,
        rightMargin=20 * mm,
    )
    styles = getSampleStyleSheet()

    story = [
        Paragraph(REPORT_TITLE, styles["Title"]),
        Paragraph(f"Generated: {now.strftime('%Y-%m-%d')}", styles["Normal"]),
        Spacer(1, 8 * mm),
        Paragraph("Input Values:", styles["Heading2"]),
        _table(input_rows(inputs)),
        Spacer(1, 8 * mm),
        Paragraph("Results:", styles["Heading2"]),
        _table(result_rows(results)),
        Spacer(1, 8 * mm),
        Paragraph("Calculation Methods:", styles["Heading2"]),
    ]
    story.extend(Paragraph(line, styles["Normal"]) for line in FORMULA_LINES)

    doc.build(story)
    return buf.getvalue()


def export_to_pdf(inputs: CalculationInputs, results: CalculationResults) -> None:
    """Render PDF download button."""
    try:
        payload = build_pdf_report(inputs, results)
    except Exception as e:
        # reportlab raises a wide range of layout errors
        logger.exception("PDF export failed")
        st.error(f"PDF export failed: {e}")
        return

    st.download_button(
        "Download PDF",
        data=payload,
        file_name=PDF_FILENAME,
        mime="application/pdf",
        use_container_width=True,
    )
