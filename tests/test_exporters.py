"""Tests for calculator/exporters"""

import json
from datetime import datetime, timezone
from io import BytesIO

import pandas as pd

from calculator.calculators import CalculationInputs, calculate_results
from calculator.exporters.excel_exporter import SHEET_NAME, build_excel_report, build_export_rows
from calculator.exporters.json_exporter import FORMULAS, build_json_report
from calculator.exporters.pdf_exporter import build_pdf_report, result_rows
from services.utils.url_state import URL_KEYS

INPUTS = CalculationInputs(product_cost=5, selling_price=20, referral_fee=3, fba_fee=4,
                           shipping_cost=1, ppc_budget=1, other_fees=1)
RESULTS = calculate_results(INPUTS)
NOW = datetime(2025, 7, 16, 20, 36, 18, tzinfo=timezone.utc)


def test_json_report_structure():
    data = json.loads(build_json_report(INPUTS, RESULTS, now=NOW))
    assert data["timestamp"] == "2025-07-16T20:36:18+00:00"
    assert data["inputs"]["sellingPrice"] == 20
    assert data["results"] == {
        "netProfit": 5,
        "profitMargin": 25.0,
        "breakEvenUnits": 1,
        "totalCosts": 15,
    }
    assert data["calculations"] == FORMULAS


def test_json_report_input_keys_are_camel_case():
    data = json.loads(build_json_report(INPUTS, RESULTS, now=NOW))
    assert set(data["inputs"]) == set(URL_KEYS.values())


def test_json_report_is_pretty_printed():
    text = build_json_report(INPUTS, RESULTS, now=NOW)
    assert text.startswith('{\n  "timestamp"')


def test_json_report_nulls_infinite_break_even():
    inputs = CalculationInputs(product_cost=20, selling_price=20, fba_fee=3)
    data = json.loads(build_json_report(inputs, calculate_results(inputs), now=NOW))
    assert data["results"]["breakEvenUnits"] is None


def test_pdf_report_is_pdf():
    pdf = build_pdf_report(INPUTS, RESULTS, now=NOW)
    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 1000


def test_pdf_result_rows_format():
    assert result_rows(RESULTS) == [
        ("Net Profit", "$5.00"),
        ("Profit Margin", "25.0%"),
        ("Break-even Units", "1"),
    ]


def test_excel_report_round_trips_rows():
    rows = build_export_rows(INPUTS, RESULTS)
    xlsx = build_excel_report(rows)
    assert xlsx[:2] == b"PK"

    df = pd.read_excel(BytesIO(xlsx), sheet_name=SHEET_NAME)
    assert list(df.columns) == ["Item", "Value"]
    values = dict(zip(df["Item"], df["Value"]))
    assert float(values["Net profit ($)"]) == 5
    assert float(values["Total costs ($)"]) == 15
