"""Calculator modules for profit computations."""

from .profit_calculator import (
    CalculationInputs,
    CalculationResults,
    calculate_results,
    validate_inputs,
    get_smart_defaults,
    parse_number,
    update_input,
)
from .advice import get_contextual_advice, format_units
from .scenarios import ScenarioStore

__all__ = [
    "CalculationInputs",
    "CalculationResults",
    "calculate_results",
    "validate_inputs",
    "get_smart_defaults",
    "parse_number",
    "update_input",
    "get_contextual_advice",
    "format_units",
    "ScenarioStore",
]
