"""Rule-based advice messages for a calculation."""

from __future__ import annotations
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import List

from .profit_calculator import CalculationInputs, CalculationResults


LOW_MARGIN_PCT = 15.0
GOOD_MARGIN_PCT = 20.0
EXCELLENT_MARGIN_PCT = 30.0
HIGH_REFERRAL_PCT = 20.0

# Monthly volume used for the "what if" projection line
PROJECTION_UNITS = 100


def get_contextual_advice(results: CalculationResults, inputs: CalculationInputs) -> List[str]:
    """
    Build advice lines from fixed margin and profit thresholds.

    Rules (in order):
    - negative profit warning
    - margin band: <15% low, >=30% excellent, >=20% good, 15-20% silent
    - break-even and 100-unit projection when profitable
    - referral fee above 20% of the selling price
    """
    advice: List[str] = []

    if results.net_profit < 0:
        advice.append("⚠️ Negative profit! Consider reducing costs or increasing selling price.")

    if results.profit_margin < LOW_MARGIN_PCT:
        advice.append("⚠️ Low profit margin. Aim for at least 15% for sustainable business.")
    elif results.profit_margin >= EXCELLENT_MARGIN_PCT:
        advice.append("✅ Excellent profit margin! This is considered healthy for FBA sellers.")
    elif results.profit_margin >= GOOD_MARGIN_PCT:
        advice.append("✅ Good profit margin. You're on the right track.")

    if results.net_profit > 0:
        projected = format_whole_dollars(results.net_profit * PROJECTION_UNITS)
        advice.append(
            f"💡 At this margin, you'd need to sell {format_units(results.break_even_units)} "
            f"units monthly to break even."
        )
        advice.append(f"📈 Selling {PROJECTION_UNITS} units monthly would net you ${projected}.")

    referral_pct = (inputs.referral_fee / inputs.selling_price * 100.0) if inputs.selling_price > 0 else 0.0
    if referral_pct > HIGH_REFERRAL_PCT:
        advice.append("⚠️ High referral fee percentage. Check if this is accurate for your category.")

    return advice


def format_units(units: float) -> str:
    """Render a break-even count; non-finite counts show as '∞'."""
    if not math.isfinite(units):
        return "∞"
    return str(int(units))


def format_whole_dollars(amount: float) -> str:
    """Round to whole dollars with ties going up (12.5 -> '13')."""
    return str(Decimal(repr(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
