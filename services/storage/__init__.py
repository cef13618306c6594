"""Storage layer for the calculation log."""

from .supabase_storage import (
    SupabaseStorage,
    SupabaseError,
    SupabaseAuthError,
    CalculationLogError,
)
from .local_storage import LocalStorage
from .storage_manager import CalculationLogger, build_row, get_calculation_logger

__all__ = [
    "SupabaseStorage",
    "SupabaseError",
    "SupabaseAuthError",
    "CalculationLogError",
    "LocalStorage",
    "CalculationLogger",
    "build_row",
    "get_calculation_logger",
]
