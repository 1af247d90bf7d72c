"""Centralised configuration handling for Pocketbook."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Mapping

import streamlit as st
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_IMAGE_MODEL = "dall-e-3"


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail in tests
        return None
    return None


class Settings(BaseSettings):
    """Application settings sourced from env vars and Streamlit secrets."""

    openai_api_key: str | None = None
    openai_base_url: str | None = None
    openai_model: str = DEFAULT_OPENAI_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL
    image_size: str = "1024x1024"
    data_dir: Path = Path("data")
    currency_symbol: str = "$"
    insights_mode: Literal["rules", "ai"] = "rules"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="POCKETBOOK_", extra="ignore")

    @property
    def openai_client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        if self.openai_api_key:
            kwargs["api_key"] = self.openai_api_key
        if self.openai_base_url:
            kwargs["base_url"] = self.openai_base_url
        return kwargs

    @property
    def store_path(self) -> Path:
        return self.data_dir / "local_storage.json"


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    overrides: dict[str, Any] = {}

    app_section = _streamlit_section("pocketbook")
    if app_section:
        overrides.update({key: value for key, value in app_section.items() if key in Settings.model_fields})

    openai_section = _streamlit_section("openai")
    if openai_section:
        secret_values = {
            "openai_api_key": openai_section.get("api_key") or openai_section.get("OPENAI_API_KEY"),
            "openai_base_url": openai_section.get("api_base"),
            "openai_model": openai_section.get("model"),
            "image_model": openai_section.get("image_model"),
        }
        overrides.update({k: v for k, v in secret_values.items() if v is not None})

    for field_name, env_name in (("openai_api_key", "OPENAI_API_KEY"), ("openai_base_url", "OPENAI_BASE_URL")):
        prefixed = f"POCKETBOOK_{env_name}"
        if field_name not in overrides and not os.getenv(prefixed) and os.getenv(env_name):
            overrides[field_name] = os.getenv(env_name)

    return Settings(**{k: v for k, v in overrides.items() if v is not None})
