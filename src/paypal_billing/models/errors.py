"""Error bodies returned by PayPal."""

from __future__ import annotations

from pydantic import BaseModel

from paypal_billing.models.common import LinkDescription


class ErrorDetail(BaseModel):
    field: str | None = None
    value: str | None = None
    location: str | None = None
    issue: str | None = None
    description: str | None = None


class ErrorResponse(BaseModel):
    """Generic REST error body (400, 403, 404, 422, 5xx...)."""
    name: str | None = None
    message: str | None = None
    debug_id: str | None = None
    details: list[ErrorDetail] = []
    links: list[LinkDescription] = []


class IdentityErrorResponse(BaseModel):
    """OAuth2-style error body returned with HTTP 401."""
    error: str | None = None
    error_description: str | None = None
