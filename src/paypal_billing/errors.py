"""Exception hierarchy for the PayPal client.

Every failure surfaced by the request pipeline derives from PayPalError.
"""

from __future__ import annotations

from typing import Any

import httpx


class PayPalError(Exception):
    """Base class for all client errors."""


class ConfigurationError(PayPalError):
    """Missing or invalid credentials / base URL."""


class SerializationError(PayPalError):
    """A request payload could not be encoded as JSON."""


class TransportError(PayPalError):
    """The HTTP exchange itself failed (DNS, connect, timeout, ...)."""


class DecodeError(PayPalError):
    """A response body did not match the expected structure."""

    def __init__(self, message: str, response: httpx.Response | None = None) -> None:
        super().__init__(message)
        self.response = response


class APIError(PayPalError):
    """PayPal answered with a non-success status code."""

    def __init__(self, message: str, response: httpx.Response) -> None:
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.response.headers


class AuthorizationError(APIError):
    """HTTP 401 from the identity service or an API endpoint."""

    def __init__(
        self,
        response: httpx.Response,
        error: str | None = None,
        error_description: str | None = None,
    ) -> None:
        detail = error_description or error or "Unauthorized"
        super().__init__(f"Authorization failed (HTTP {response.status_code}): {detail}", response)
        self.error = error
        self.error_description = error_description


class ProviderError(APIError):
    """Any other non-success status, with PayPal's error body when present."""

    def __init__(
        self,
        response: httpx.Response,
        name: str | None = None,
        message: str | None = None,
        debug_id: str | None = None,
        details: list[Any] | None = None,
        links: list[Any] | None = None,
    ) -> None:
        detail = message or name or response.reason_phrase or "Unknown error"
        super().__init__(f"API error (HTTP {response.status_code}): {detail}", response)
        self.name = name
        self.message = message
        self.debug_id = debug_id
        self.details = details or []
        self.links = links or []
