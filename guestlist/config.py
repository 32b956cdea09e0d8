"""Environment-backed configuration for the guest store connection.

Supabase credentials come from ``SUPABASE_URL`` / ``SUPABASE_ANON_KEY``. The
``VITE_`` prefixed names used by the browser build are accepted as fallbacks
so one ``.env`` file serves both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

BACKENDS: tuple[str, ...] = ("supabase", "sqlite", "memory")

_URL_VARS = ("SUPABASE_URL", "VITE_SUPABASE_URL")
_KEY_VARS = ("SUPABASE_ANON_KEY", "VITE_SUPABASE_ANON_KEY")


class ConfigError(RuntimeError):
    """Startup configuration is missing or invalid; the app must not start."""


@dataclass(frozen=True)
class StoreSettings:
    """Typed connection settings for the guest store."""

    backend: str = "supabase"
    url: str = ""
    api_key: str = ""
    table: str = "guests"
    sqlite_path: str = "guests.db"
    request_timeout_s: int = 10
    retries: int = 2

    def validate(self) -> "StoreSettings":
        if self.backend not in BACKENDS:
            raise ConfigError(
                f"Backend desconhecido '{self.backend}' (use one of: {', '.join(BACKENDS)})"
            )
        if self.backend == "supabase":
            if not self.url:
                raise ConfigError("URL do Supabase não encontrada")
            if not self.api_key:
                raise ConfigError("Chave anônima do Supabase não encontrada")
        if self.request_timeout_s <= 0:
            raise ConfigError("request_timeout_s must be positive")
        if self.retries < 0:
            raise ConfigError("retries must be >= 0")
        return self


def _first(env: Mapping[str, str], names: tuple[str, ...]) -> str:
    for name in names:
        value = (env.get(name) or "").strip()
        if value:
            return value
    return ""


def _as_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    *,
    backend: Optional[str] = None,
) -> StoreSettings:
    """Read and validate settings; raise :class:`ConfigError` when incomplete."""
    env = os.environ if environ is None else environ
    settings = StoreSettings(
        backend=(backend or env.get("GUESTLIST_BACKEND") or "supabase").strip().lower(),
        url=_first(env, _URL_VARS),
        api_key=_first(env, _KEY_VARS),
        table=(env.get("GUESTLIST_TABLE") or "guests").strip(),
        sqlite_path=(env.get("GUESTLIST_SQLITE_PATH") or "guests.db").strip(),
        request_timeout_s=_as_int(env, "GUESTLIST_REQUEST_TIMEOUT_S", 10),
        retries=_as_int(env, "GUESTLIST_RETRIES", 2),
    )
    return settings.validate()


__all__ = ["BACKENDS", "ConfigError", "StoreSettings", "load_settings"]
