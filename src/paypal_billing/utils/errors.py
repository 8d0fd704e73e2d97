"""Structured error reporting for CLI commands."""

from __future__ import annotations

import json
import sys

from rich.console import Console

from paypal_billing.errors import (
    AuthorizationError,
    ConfigurationError,
    DecodeError,
    PayPalError,
    ProviderError,
    SerializationError,
    TransportError,
)

console = Console(stderr=True)

# Checked in order; first isinstance match wins
_ERROR_CODES: list[tuple[type[Exception], str, str | None]] = [
    (ConfigurationError, "CONFIG_ERROR", "Set PAYPAL_CLIENT_ID / PAYPAL_CLIENT_SECRET in your .env"),
    (AuthorizationError, "AUTH_ERROR", "Check the client credentials and the selected environment (sandbox vs live)"),
    (TransportError, "CONNECTION_ERROR", "Connection error, check network connectivity"),
    (SerializationError, "INVALID_ARGUMENT", "Request payload could not be encoded, check parameter values"),
    (DecodeError, "DECODE_ERROR", "PayPal returned an unexpected response body"),
    (ProviderError, "API_ERROR", None),
]

# Hints for well-known PayPal error names
_PROVIDER_HINTS = {
    "RESOURCE_NOT_FOUND": "The specified resource does not exist, verify the ID",
    "INVALID_REQUEST": "Invalid request, check parameter values and JSON structure",
    "UNPROCESSABLE_ENTITY": "The action is not allowed in the resource's current state",
    "NOT_AUTHORIZED": "The app lacks permission for this operation",
    "RATE_LIMIT_REACHED": "Rate limited, wait a moment and retry",
}


def classify(error: Exception) -> tuple[str, str | None]:
    """Map an exception to an (error code, hint) pair."""
    for exc_type, code, hint in _ERROR_CODES:
        if isinstance(error, exc_type):
            if isinstance(error, ProviderError):
                if error.status_code == 404:
                    code = "NOT_FOUND"
                hint = _PROVIDER_HINTS.get(error.name or "")
            return code, hint
    if isinstance(error, PayPalError):
        return "PAYPAL_ERROR", None
    return "RUNTIME_ERROR", None


def handle_error(error: Exception) -> None:
    """Handle an error with structured output to stdout and human-readable output to stderr.

    Outputs a JSON error object to stdout for scripting:
    {"error": true, "code": "API_ERROR", "message": "...", "status": 422, "debug_id": "...", "hint": "..."}
    """
    message = str(error)
    code, hint = classify(error)

    error_obj: dict[str, object] = {
        "error": True,
        "code": code,
        "message": message,
    }
    if isinstance(error, ProviderError):
        error_obj["status"] = error.status_code
        if error.debug_id:
            error_obj["debug_id"] = error.debug_id
    elif isinstance(error, AuthorizationError):
        error_obj["status"] = error.status_code
    if hint:
        error_obj["hint"] = hint

    json.dump(error_obj, sys.stdout)
    sys.stdout.write("\n")

    console.print(f"[red]Error:[/red] {message}")
    if hint:
        console.print(f"[dim]Hint: {hint}[/dim]")
