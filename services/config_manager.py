"""
Configuration manager - Secrets and settings lookup.
Reads the environment first, then Streamlit secrets.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .utils import get_data_dir

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8501/"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_secret(name: str) -> Optional[str]:
    """Get secret from environment or Streamlit secrets."""
    value = os.environ.get(name)
    if value:
        return value
    try:
        import streamlit as st
        secret = st.secrets.get(name)
    except Exception:
        # No secrets.toml, or not running under Streamlit
        return None
    return str(secret) if secret not in (None, "") else None


def _is_truthy(value: Optional[str]) -> bool:
    return (value or "").strip() in ("1", "true", "True")


@dataclass(frozen=True)
class Settings:
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    remote_log_disabled: bool = False
    log_path: Path = get_data_dir() / "calculations.jsonl"
    base_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"

    def remote_log_ready(self) -> bool:
        return bool(self.supabase_url and self.supabase_key) and not self.remote_log_disabled


def load_settings() -> Settings:
    """Collect all settings into a frozen Settings record."""
    log_path = get_secret("CALCULATION_LOG_PATH")
    settings = Settings(
        supabase_url=get_secret("SUPABASE_URL"),
        supabase_key=get_secret("SUPABASE_ANON_KEY"),
        remote_log_disabled=_is_truthy(get_secret("DISABLE_CALCULATION_LOG")),
        log_path=Path(log_path).expanduser().resolve() if log_path else Settings.log_path,
        base_url=get_secret("APP_BASE_URL") or DEFAULT_BASE_URL,
        log_level=(get_secret("LOG_LEVEL") or "INFO").upper(),
    )
    if not settings.remote_log_ready():
        logger.debug("Remote calculation log not configured; using local file %s", settings.log_path)
    return settings


_configured = False


def configure_logging(level: Any = None) -> None:
    """Configure root logging once per process (Streamlit reruns the script)."""
    global _configured
    if _configured:
        return
    logging.basicConfig(
        level=level or load_settings().log_level,
        format=LOG_FORMAT,
    )
    _configured = True
