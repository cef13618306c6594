"""
Calculation logger - Orchestrates Supabase and Local storage.
Implements fallback strategy: Supabase (primary) → Local (cache).
"""

from __future__ import annotations
import logging
import math
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from calculator.calculators import CalculationInputs, CalculationResults

from ..config_manager import Settings, load_settings
from .local_storage import LocalStorage
from .supabase_storage import CalculationLogError, SupabaseAuthError, SupabaseStorage

logger = logging.getLogger(__name__)


def build_row(
    inputs: CalculationInputs,
    results: CalculationResults,
    email: Optional[str] = None,
) -> Dict[str, Any]:
    """Map a calculation onto the calculations table columns."""
    units = results.break_even_units
    row: Dict[str, Any] = {
        "product_cost": inputs.product_cost,
        "selling_price": inputs.selling_price,
        "referral_fee": inputs.referral_fee,
        "fba_fee": inputs.fba_fee,
        "shipping_cost": inputs.shipping_cost,
        "ppc_budget": inputs.ppc_budget,
        "other_fees": inputs.other_fees,
        "net_profit": results.net_profit,
        "profit_margin": results.profit_margin,
        # INTEGER column; infinite counts are stored as NULL
        "break_even_units": int(units) if math.isfinite(units) else None,
    }
    if email:
        row["email"] = email
    return row


class CalculationLogger:
    """Best-effort, write-only calculation log with local fallback."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        remote: Optional[SupabaseStorage] = None,
        local: Optional[LocalStorage] = None,
    ):
        settings = settings or load_settings()
        self.remote = remote or SupabaseStorage(settings=settings)
        self.local = local or LocalStorage(settings.log_path)
        self._last_warning: Optional[str] = None

    def get_last_warning(self) -> Optional[str]:
        """Get last warning message (for UI display)."""
        return self._last_warning

    def log(
        self,
        inputs: CalculationInputs,
        results: CalculationResults,
        email: Optional[str] = None,
    ) -> bool:
        """
        Record a calculation. Never raises.

        Strategy:
        1. Try Supabase (primary sink)
        2. On failure or when not configured, append to the local file

        Returns:
            True if the row reached the remote sink
        """
        row = build_row(inputs, results, email)
        self._last_warning = None

        if self.remote.is_available():
            try:
                self.remote.insert(row)
                return True
            except CalculationLogError as e:
                if isinstance(e, SupabaseAuthError):
                    self.remote.disable()
                self._last_warning = f"Cloud logging unavailable: {e}. Saved locally."
                logger.warning("Error logging calculation: %s", e)

        self._append_local(row)
        return False

    def _append_local(self, row: Dict[str, Any]) -> Optional[Path]:
        stamped = dict(row, timestamp=datetime.now(timezone.utc).isoformat())
        try:
            return self.local.append(stamped)
        except OSError as e:
            self._last_warning = f"Could not write local calculation log: {e}"
            logger.warning("Error writing local calculation log %s: %s", self.local.file_path, e)
            return None


# ============================================================================
# Module-level logger instance (singleton pattern)
# ============================================================================
_calc_logger: Optional[CalculationLogger] = None


def get_calculation_logger() -> CalculationLogger:
    """Get or create the calculation logger instance."""
    global _calc_logger
    if _calc_logger is None:
        _calc_logger = CalculationLogger()
    return _calc_logger
