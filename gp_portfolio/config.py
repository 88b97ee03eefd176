"""Centralized configuration objects for the GP Portfolio Generator."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load .env file if it exists
PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_PATH = PROJECT_ROOT / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


class AppSettings(BaseModel):
    """Streamlit/UI level configuration."""

    name: str = "GP Portfolio Generator"
    debug: bool = False
    notification_seconds: float = Field(3.0, gt=0.0, le=60.0)


class GenerationSettings(BaseModel):
    """Where and how the generation endpoint is reached."""

    provider: Literal["http", "mock"] = "http"
    endpoint_url: str = "http://localhost:3000/api/generate"
    # None means no local timeout; the network stack decides.
    request_timeout: Optional[float] = Field(None, gt=0.0)

    @field_validator("endpoint_url")
    @classmethod
    def _strip_endpoint(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("endpoint_url must not be empty")
        return value


class Settings(BaseModel):
    """Top-level settings container."""

    project_root: Path = PROJECT_ROOT
    app: AppSettings = AppSettings()
    generation: GenerationSettings = GenerationSettings()


def _settings_from_env() -> Dict[str, Any]:
    """Allow lightweight overriding via environment variables."""

    overrides: Dict[str, Any] = {}
    generation_overrides: Dict[str, Any] = {}

    env_map = {
        "GP_PORTFOLIO_ENDPOINT_URL": "endpoint_url",
        "GP_PORTFOLIO_PROVIDER": "provider",
        "GP_PORTFOLIO_REQUEST_TIMEOUT": "request_timeout",
    }

    for env_key, field_name in env_map.items():
        value = os.getenv(env_key)
        if value is None:
            continue
        if field_name == "request_timeout":
            generation_overrides[field_name] = float(value) if value else None
        else:
            generation_overrides[field_name] = value

    if generation_overrides:
        overrides["generation"] = generation_overrides

    app_overrides: Dict[str, Any] = {}
    app_debug = os.getenv("GP_PORTFOLIO_DEBUG")
    if app_debug is not None:
        app_overrides["debug"] = app_debug.lower() in {"1", "true", "yes"}
    notification_seconds = os.getenv("GP_PORTFOLIO_NOTIFICATION_SECONDS")
    if notification_seconds:
        app_overrides["notification_seconds"] = float(notification_seconds)
    if app_overrides:
        overrides["app"] = app_overrides

    return overrides


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings(**_settings_from_env())


settings = get_settings()
