"""Configuration management for the PayPal billing client.

Loads credentials and environment selection from .env / environment variables.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field
from dotenv import load_dotenv


API_BASE_SANDBOX = "https://api.sandbox.paypal.com"
API_BASE_LIVE = "https://api.paypal.com"

ENVIRONMENTS = {
    "sandbox": API_BASE_SANDBOX,
    "live": API_BASE_LIVE,
}


class Settings(BaseModel):
    """Application settings loaded from environment variables."""
    client_id: str = Field(default="", description="PayPal REST app client ID")
    client_secret: str = Field(default="", description="PayPal REST app secret")
    environment: str = Field(default="sandbox", description="sandbox or live")
    api_base: str = Field(default="", description="Explicit API base URL, overrides environment")
    trace_file: str = Field(default="", description="Append request/response dumps to this file")

    @property
    def base_url(self) -> str:
        """Resolve the API base URL for the configured environment."""
        if self.api_base:
            return self.api_base.rstrip("/")
        env = self.environment.lower()
        if env not in ENVIRONMENTS:
            available = ", ".join(sorted(ENVIRONMENTS))
            raise ValueError(f"Unknown environment '{self.environment}'. Available: {available}")
        return ENVIRONMENTS[env]


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (where .env lives)."""
    current = Path(__file__).resolve().parent
    for parent in [current, *current.parents]:
        if (parent / ".env").exists():
            return parent
    # Fallback: cwd
    return Path.cwd()


def _env(*keys: str, default: str = "") -> str:
    """Try multiple env var names, return the first one found."""
    for key in keys:
        val = os.environ.get(key, "")
        if val:
            return val.strip().strip('"')
    return default


def _load_settings() -> Settings:
    """Load settings from environment variables.

    Supports both PAYPAL_* and legacy camelCase names from .env.
    """
    return Settings(
        client_id=_env("PAYPAL_CLIENT_ID", "clientId"),
        client_secret=_env("PAYPAL_CLIENT_SECRET", "clientSecret"),
        environment=_env("PAYPAL_ENVIRONMENT", default="sandbox"),
        api_base=_env("PAYPAL_API_BASE"),
        trace_file=_env("PAYPAL_TRACE_FILE"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache the application settings."""
    env_path = _find_project_root() / ".env"
    if env_path.exists():
        load_dotenv(env_path)
    return _load_settings()
