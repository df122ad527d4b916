from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


class ConfigError(Exception):
    pass


# ---------------------- DATA CLASSES ----------------------

@dataclass
class SupabaseConfig:
    url: str
    service_key: str  # service key for write access


@dataclass
class DisplayConfig:
    currency_symbol: str = "$"


@dataclass
class AppConfig:
    supabase: SupabaseConfig
    display: DisplayConfig = field(default_factory=DisplayConfig)
    owner_id: Optional[str] = None
    log_level: str = "INFO"


# ---------------------- LOADING ----------------------

def load_config(secrets: Optional[Mapping[str, Any]] = None) -> AppConfig:
    if secrets is None:
        import streamlit as st
        secrets = st.secrets

    # --- Supabase ---
    if "supabase" not in secrets:
        raise ConfigError("Missing [supabase] section in secrets.toml")
    supabase_section = secrets["supabase"]
    try:
        supabase_cfg = SupabaseConfig(
            url=supabase_section["url"],
            service_key=supabase_section["service_key"],
        )
    except KeyError as e:
        raise ConfigError(f"Missing supabase setting: {e.args[0]}") from e

    # --- App ---
    app_section = secrets.get("app", {})
    owner_id = app_section.get("owner_id") or None

    display_cfg = DisplayConfig(
        currency_symbol=app_section.get("currency_symbol", "$"),
    )

    return AppConfig(
        supabase=supabase_cfg,
        display=display_cfg,
        owner_id=str(owner_id) if owner_id else None,
        log_level=str(app_section.get("log_level", "INFO")).upper(),
    )
