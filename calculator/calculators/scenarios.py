"""Two-slot scenario store for side-by-side comparison."""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from .profit_calculator import CalculationInputs, calculate_results


SLOTS = (1, 2)


class ScenarioStore:
    """Holds up to two saved input records."""

    def __init__(self, storage: Optional[Dict[int, CalculationInputs]] = None):
        # storage can be a dict kept in Streamlit session state
        self._slots: Dict[int, CalculationInputs] = storage if storage is not None else {}

    def save(self, slot: int, inputs: CalculationInputs) -> None:
        if slot not in SLOTS:
            raise ValueError(f"Scenario slot must be one of {SLOTS}, got {slot}")
        self._slots[slot] = inputs

    def get(self, slot: int) -> Optional[CalculationInputs]:
        return self._slots.get(slot)

    def has_any(self) -> bool:
        return any(slot in self._slots for slot in SLOTS)

    def compare(self) -> List[Dict[str, Any]]:
        """One summary row per filled slot, in slot order."""
        rows = []
        for slot in SLOTS:
            inputs = self._slots.get(slot)
            if inputs is None:
                continue
            res = calculate_results(inputs)
            rows.append({
                "scenario": f"Scenario {slot}",
                "selling_price": inputs.selling_price,
                "product_cost": inputs.product_cost,
                "net_profit": res.net_profit,
                "profit_margin": res.profit_margin,
            })
        return rows
