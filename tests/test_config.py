"""Tests for services/config_manager.py"""

import os
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from services import config_manager
from services.config_manager import DEFAULT_BASE_URL, Settings, get_secret, load_settings

KEYS = (
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "DISABLE_CALCULATION_LOG",
    "CALCULATION_LOG_PATH",
    "APP_BASE_URL",
    "LOG_LEVEL",
)


@pytest.fixture
def env(monkeypatch):
    for key in KEYS:
        monkeypatch.delenv(key, raising=False)
    # Keep tests independent of any local .streamlit/secrets.toml
    monkeypatch.setattr(config_manager, "get_secret", lambda name: os.environ.get(name))
    return monkeypatch


def test_get_secret_prefers_environment(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    assert get_secret("SUPABASE_URL") == "https://env.supabase.co"


def test_defaults(env):
    settings = load_settings()
    assert settings.supabase_url is None
    assert not settings.remote_log_ready()
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.log_level == "INFO"
    assert settings.log_path.name == "calculations.jsonl"


def test_from_environment(env, tmp_path):
    env.setenv("SUPABASE_URL", "https://x.supabase.co")
    env.setenv("SUPABASE_ANON_KEY", "k")
    env.setenv("CALCULATION_LOG_PATH", str(tmp_path / "log.jsonl"))
    env.setenv("APP_BASE_URL", "https://calc.example.com/")
    env.setenv("LOG_LEVEL", "debug")

    settings = load_settings()
    assert settings.remote_log_ready()
    assert settings.log_path == (tmp_path / "log.jsonl").resolve()
    assert settings.base_url == "https://calc.example.com/"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("flag,disabled", [("1", True), ("true", True), ("True", True), ("0", False), ("no", False)])
def test_disable_flag(env, flag, disabled):
    env.setenv("SUPABASE_URL", "https://x.supabase.co")
    env.setenv("SUPABASE_ANON_KEY", "k")
    env.setenv("DISABLE_CALCULATION_LOG", flag)
    settings = load_settings()
    assert settings.remote_log_disabled is disabled
    assert settings.remote_log_ready() is not disabled


def test_settings_is_frozen():
    with pytest.raises(FrozenInstanceError):
        Settings().base_url = "x"  # type: ignore[misc]


def test_default_log_path_under_project_data_dir():
    assert Settings().log_path.parent == Path(config_manager.__file__).resolve().parents[1] / "data"
