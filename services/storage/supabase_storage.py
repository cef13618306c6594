"""
Supabase storage implementation.
Write-only inserts into the `calculations` table over the REST API.
"""

from __future__ import annotations
import json
import logging
from typing import Any, Dict, Optional

import requests

from ..config_manager import Settings, load_settings

logger = logging.getLogger(__name__)

TABLE = "calculations"
TIMEOUT = 15


class CalculationLogError(Exception):
    """Base class for calculation log failures."""


class SupabaseError(CalculationLogError):
    """Raised when a Supabase insert fails."""


class SupabaseAuthError(SupabaseError):
    """Raised when Supabase rejects the API key (HTTP 401/403)."""


class SupabaseStorage:
    """Handles Supabase REST inserts."""

    def __init__(
        self,
        url: Optional[str] = None,
        key: Optional[str] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or load_settings()
        self.url = (url or settings.supabase_url or "").rstrip("/")
        self.key = key or settings.supabase_key
        self._disabled = settings.remote_log_disabled

    def is_available(self) -> bool:
        """Check if Supabase is configured and not disabled."""
        return bool(self.url and self.key) and not self._disabled

    def disable(self) -> None:
        """Disable the remote sink for this session (after auth error)."""
        self._disabled = True

    def _headers(self) -> Dict[str, str]:
        return {
            "apikey": self.key or "",
            "Authorization": f"Bearer {self.key}",
            "Content-Type": "application/json",
            "Prefer": "return=minimal",
        }

    def insert(self, row: Dict[str, Any]) -> None:
        """
        Insert one row into the calculations table.

        Args:
            row: Column name -> value

        Raises:
            SupabaseError: If the request fails or is rejected
        """
        if not self.url:
            raise SupabaseError("Missing SUPABASE_URL")

        endpoint = f"{self.url}/rest/v1/{TABLE}"

        try:
            response = requests.post(
                endpoint,
                headers=self._headers(),
                data=json.dumps(row),
                timeout=TIMEOUT,
            )

            if response.status_code in (401, 403):
                raise SupabaseAuthError(
                    f"Supabase insert unauthorized (HTTP {response.status_code})"
                )

            response.raise_for_status()

        except requests.RequestException as e:
            raise SupabaseError(f"Supabase insert error: {e}") from e

        logger.debug("Inserted calculation row into %s", endpoint)
