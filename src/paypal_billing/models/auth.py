"""Auth-related data models."""

from __future__ import annotations

from datetime import datetime
from pydantic import BaseModel


class TokenResponse(BaseModel):
    """Response from PayPal's /v1/oauth2/token endpoint."""
    access_token: str = ""
    token_type: str = "Bearer"
    expires_in: int = 0
    scope: str | None = None
    app_id: str | None = None
    nonce: str | None = None


class TokenStatus(BaseModel):
    """Current state of the cached access token."""
    has_token: bool
    is_expired: bool
    expires_at: datetime | None = None
    seconds_remaining: int | None = None
