"""Series for the price-sensitivity and volume-projection charts."""

from __future__ import annotations
from dataclasses import replace
from typing import List, Tuple

import pandas as pd

from .profit_calculator import CalculationInputs, CalculationResults, calculate_results


DEFAULT_VOLUME_RANGE: Tuple[int, int] = (10, 200)
DEFAULT_POINTS = 21

# Slider bounds (min, max, step)
PRICE_SLIDER = (1.0, 100.0, 0.5)
VOLUME_SLIDER = (10, 500, 10)


def default_price_range(selling_price: float) -> Tuple[float, float]:
    """Price window centred on the current selling price."""
    return max(5.0, selling_price - 10.0), selling_price + 10.0


def _sample(lo: float, hi: float, points: int) -> List[float]:
    """Evenly spaced samples over [lo, hi], both ends included."""
    if points < 2 or hi <= lo:
        return [float(lo)]
    step = (hi - lo) / (points - 1)
    return [lo + i * step for i in range(points)]


def price_sensitivity(
    inputs: CalculationInputs,
    price_range: Tuple[float, float],
    points: int = DEFAULT_POINTS,
) -> pd.DataFrame:
    """
    Re-run the calculation across a range of selling prices.

    All other inputs are held fixed.

    Returns:
        DataFrame with columns price, profit, margin, break_even
    """
    rows = []
    for price in _sample(price_range[0], price_range[1], points):
        res = calculate_results(replace(inputs, selling_price=price))
        rows.append({
            "price": round(price, 2),
            "profit": res.net_profit,
            "margin": res.profit_margin,
            "break_even": res.break_even_units,
        })
    return pd.DataFrame(rows, columns=["price", "profit", "margin", "break_even"])


def volume_projection(
    inputs: CalculationInputs,
    results: CalculationResults,
    volume_range: Tuple[float, float] = DEFAULT_VOLUME_RANGE,
    points: int = DEFAULT_POINTS,
) -> pd.DataFrame:
    """
    Scale per-unit results to monthly volumes.

    Returns:
        DataFrame with columns volume, total_profit, total_revenue,
        total_costs, profit_margin
    """
    rows = []
    for volume in _sample(volume_range[0], volume_range[1], points):
        total_profit = results.net_profit * volume
        total_revenue = inputs.selling_price * volume
        rows.append({
            "volume": int(round(volume)),
            "total_profit": total_profit,
            "total_revenue": total_revenue,
            "total_costs": results.total_costs * volume,
            "profit_margin": (total_profit / total_revenue * 100.0) if total_revenue > 0 else 0.0,
        })
    return pd.DataFrame(
        rows,
        columns=["volume", "total_profit", "total_revenue", "total_costs", "profit_margin"],
    )
