"""JSON export functionality."""

from __future__ import annotations
import json
import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, Optional
import streamlit as st

from calculator.calculators import CalculationInputs, CalculationResults

logger = logging.getLogger(__name__)

JSON_FILENAME = "fba-profit-calculation.json"

FORMULAS = {
    "netProfit": "Selling Price - (Product Cost + Fees + Shipping + PPC)",
    "profitMargin": "(Net Profit / Selling Price) × 100",
    "breakEvenUnits": "ceil(Total Costs / (Selling Price - Product Cost))",
}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _json_safe(value: Any) -> Any:
    # JSON has no infinity; keep the field but null it out
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def build_json_report(
    inputs: CalculationInputs,
    results: CalculationResults,
    now: Optional[datetime] = None,
) -> str:
    """Serialize inputs, results and formulas as pretty-printed JSON."""
    now = now or datetime.now(timezone.utc)
    data: Dict[str, Any] = {
        "timestamp": now.isoformat(),
        "inputs": {_camel(k): v for k, v in inputs.to_dict().items()},
        "results": {_camel(k): _json_safe(v) for k, v in results.to_dict().items()},
        "calculations": FORMULAS,
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def export_to_json(inputs: CalculationInputs, results: CalculationResults) -> None:
    """Render JSON download button."""
    try:
        payload = build_json_report(inputs, results)
    except (TypeError, ValueError) as e:
        logger.exception("JSON export failed")
        st.error(f"JSON export failed: {e}")
        return

    st.download_button(
        "Download JSON",
        data=payload.encode("utf-8"),
        file_name=JSON_FILENAME,
        mime="application/json",
        use_container_width=True,
    )
