from __future__ import annotations

import logging

import pytest

from guestlist.config import ConfigError, load_settings
from guestlist.utils.logging import configure_root


def test_supabase_settings_from_env() -> None:
    settings = load_settings(
        {
            "SUPABASE_URL": "https://abc.supabase.co",
            "SUPABASE_ANON_KEY": "anon",
            "GUESTLIST_REQUEST_TIMEOUT_S": "5",
        }
    )

    assert settings.backend == "supabase"
    assert settings.url == "https://abc.supabase.co"
    assert settings.api_key == "anon"
    assert settings.request_timeout_s == 5
    assert settings.table == "guests"


def test_vite_prefixed_names_are_accepted() -> None:
    settings = load_settings(
        {"VITE_SUPABASE_URL": "https://abc.supabase.co", "VITE_SUPABASE_ANON_KEY": "anon"}
    )

    assert settings.url == "https://abc.supabase.co"


def test_missing_url_is_fatal() -> None:
    with pytest.raises(ConfigError, match="URL do Supabase"):
        load_settings({"SUPABASE_ANON_KEY": "anon"})


def test_missing_key_is_fatal() -> None:
    with pytest.raises(ConfigError, match="Chave anônima"):
        load_settings({"SUPABASE_URL": "https://abc.supabase.co"})


def test_local_backends_need_no_credentials() -> None:
    assert load_settings({"GUESTLIST_BACKEND": "sqlite"}).sqlite_path == "guests.db"
    assert load_settings({}, backend="memory").backend == "memory"


@pytest.mark.parametrize(
    "env",
    [
        {"GUESTLIST_BACKEND": "postgres"},
        {"GUESTLIST_BACKEND": "memory", "GUESTLIST_RETRIES": "many"},
        {"GUESTLIST_BACKEND": "memory", "GUESTLIST_REQUEST_TIMEOUT_S": "0"},
    ],
)
def test_invalid_values_raise(env) -> None:
    with pytest.raises(ConfigError):
        load_settings(env)


def test_log_level_env_override(monkeypatch) -> None:
    monkeypatch.setenv("GUESTLIST_LOG_LEVEL", "warning")

    assert configure_root() == logging.WARNING


def test_debug_flag_enables_debug(monkeypatch) -> None:
    monkeypatch.delenv("GUESTLIST_LOG_LEVEL", raising=False)
    monkeypatch.setenv("GUESTLIST_DEBUG", "yes")

    assert configure_root() == logging.DEBUG


@pytest.mark.parametrize(
    "environ, expected",
    [
        ({}, logging.INFO),
        ({"GUESTLIST_LOG_LEVEL": "10"}, logging.DEBUG),
        ({"GUESTLIST_LOG_LEVEL": "verbose"}, logging.INFO),
        ({"GUESTLIST_LOG_LEVEL": "error", "GUESTLIST_DEBUG": "1"}, logging.ERROR),
        ({"GUESTLIST_DEBUG": "off"}, logging.INFO),
    ],
)
def test_log_level_resolution(environ, expected) -> None:
    assert configure_root(environ=environ) == expected
    assert logging.getLogger().level == expected
