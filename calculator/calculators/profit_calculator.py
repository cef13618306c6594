"""Profit, margin and break-even calculator - Pure calculation logic."""

from __future__ import annotations
import math
import re
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Mapping, Optional


# Referral fee auto-fill rate applied when the selling price is first entered
DEFAULT_REFERRAL_RATE = 0.15

INPUT_FIELDS = (
    "product_cost",
    "selling_price",
    "referral_fee",
    "fba_fee",
    "shipping_cost",
    "ppc_budget",
    "other_fees",
)

# Leading float, the way a browser number field parses "12.5abc"
_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class CalculationInputs:
    """Per-unit cost and fee inputs for a single product."""

    product_cost: float = 0.0
    selling_price: float = 0.0
    referral_fee: float = 0.0
    fba_fee: float = 0.0
    shipping_cost: float = 0.0
    ppc_budget: float = 0.0
    other_fees: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CalculationInputs":
        """Build inputs from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: float(v) for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class CalculationResults:
    net_profit: float
    profit_margin: float
    break_even_units: float
    total_costs: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def calculate_results(inputs: CalculationInputs) -> CalculationResults:
    """
    Calculate per-unit profit metrics.

    Break-even units are ceil(|total costs / (selling price - product cost)|)
    whenever net profit is non-zero. When the selling price equals the
    product cost the denominator is zero and the count is ``math.inf``;
    this is a known defect kept for compatibility with existing reports.

    Args:
        inputs: Per-unit costs and selling price

    Returns:
        CalculationResults with net profit, margin %, break-even units
        and total costs
    """
    total_costs = (
        inputs.product_cost
        + inputs.referral_fee
        + inputs.fba_fee
        + inputs.shipping_cost
        + inputs.ppc_budget
        + inputs.other_fees
    )

    net_profit = inputs.selling_price - total_costs
    profit_margin = (net_profit / inputs.selling_price * 100.0) if inputs.selling_price > 0 else 0.0

    if net_profit != 0:
        contribution = inputs.selling_price - inputs.product_cost
        if contribution == 0:
            # Zero contribution per unit, see docstring
            break_even_units: float = math.inf
        else:
            break_even_units = math.ceil(abs(total_costs / contribution))
    else:
        break_even_units = 0

    return CalculationResults(
        net_profit=net_profit,
        profit_margin=profit_margin,
        break_even_units=break_even_units,
        total_costs=total_costs,
    )


def validate_inputs(inputs: CalculationInputs) -> List[str]:
    """Return human-readable validation errors (empty list when valid)."""
    errors: List[str] = []

    if inputs.selling_price <= 0:
        errors.append("Selling price must be greater than 0")

    if inputs.product_cost < 0:
        errors.append("Product cost cannot be negative")

    return errors


def get_smart_defaults() -> Dict[str, float]:
    """Defaults for the fee fields (referral fee is auto-filled later)."""
    return {
        "referral_fee": 0.0,
        "fba_fee": 0.0,
        "shipping_cost": 0.0,
        "ppc_budget": 0.0,
        "other_fees": 0.0,
    }


def parse_number(text: Optional[Any]) -> float:
    """
    Leniently parse a number typed into a form or a query string.

    Examples:
        '12.5' -> 12.5
        '12abc' -> 12.0
        'abc' -> 0.0
    """
    if text is None:
        return 0.0
    if isinstance(text, (int, float)):
        value = float(text)
    else:
        match = _NUMBER_PREFIX.match(str(text))
        if not match:
            return 0.0
        value = float(match.group(0))
    return value if math.isfinite(value) else 0.0


def update_input(inputs: CalculationInputs, field: str, value: float) -> CalculationInputs:
    """
    Return a copy of ``inputs`` with one field changed.

    Negative values are rejected and the original record is returned.
    Setting the selling price while the referral fee is still 0 fills the
    referral fee in at 15% of the new price.
    """
    if field not in INPUT_FIELDS:
        raise KeyError(f"Unknown input field: {field}")

    value = float(value)
    if value < 0:
        return inputs

    changes: Dict[str, float] = {field: value}
    if field == "selling_price" and not inputs.referral_fee:
        changes["referral_fee"] = value * DEFAULT_REFERRAL_RATE

    return replace(inputs, **changes)
