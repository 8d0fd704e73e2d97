"""Typed client for PayPal's subscription and webhook REST APIs."""

from paypal_billing.client import PayPalClient
from paypal_billing.config import API_BASE_LIVE, API_BASE_SANDBOX
from paypal_billing.errors import (
    APIError,
    AuthorizationError,
    ConfigurationError,
    DecodeError,
    PayPalError,
    ProviderError,
    SerializationError,
    TransportError,
)
from paypal_billing.services.subscriptions import SubscriptionService
from paypal_billing.services.webhooks import WebhookService

__all__ = [
    "API_BASE_LIVE",
    "API_BASE_SANDBOX",
    "APIError",
    "AuthorizationError",
    "ConfigurationError",
    "DecodeError",
    "PayPalClient",
    "PayPalError",
    "ProviderError",
    "SerializationError",
    "SubscriptionService",
    "TransportError",
    "WebhookService",
]
