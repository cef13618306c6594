"""UI components for the profit calculator."""

from .intro import render_intro
from .inputs import init_inputs, render_inputs
from .results import render_results
from .charts import render_profit_chart
from .scenarios import render_scenario_controls, render_scenario_comparison
from .share import render_export_section, render_email_capture
from .info import render_how_it_works

__all__ = [
    "render_intro",
    "init_inputs",
    "render_inputs",
    "render_results",
    "render_profit_chart",
    "render_scenario_controls",
    "render_scenario_comparison",
    "render_export_section",
    "render_email_capture",
    "render_how_it_works",
]
