"""Webhook event payloads.

The ``resource`` of an event depends on its ``resource_type``: subscription
events carry a Subscription, payment events carry a Sale. Other resource
types are kept as plain dicts.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ValidationError, ValidationInfo, field_validator

from paypal_billing.errors import DecodeError
from paypal_billing.models.common import LinkDescription
from paypal_billing.models.subscriptions import Subscription


class EventResourceType(str, Enum):
    SUBSCRIPTION = "subscription"
    SALE = "sale"


class WebhookEventType(str, Enum):
    PAYMENT_SALE_COMPLETED = "PAYMENT.SALE.COMPLETED"
    PAYMENT_SALE_REFUNDED = "PAYMENT.SALE.REFUNDED"
    PAYMENT_SALE_DENIED = "PAYMENT.SALE.DENIED"
    PAYMENT_SALE_PENDING = "PAYMENT.SALE.PENDING"
    BILLING_PLAN_CREATED = "BILLING.PLAN.CREATED"
    BILLING_SUBSCRIPTION_CREATED = "BILLING.SUBSCRIPTION.CREATED"
    BILLING_SUBSCRIPTION_SUSPENDED = "BILLING.SUBSCRIPTION.SUSPENDED"
    BILLING_SUBSCRIPTION_UPDATED = "BILLING.SUBSCRIPTION.UPDATED"
    BILLING_SUBSCRIPTION_CANCELLED = "BILLING.SUBSCRIPTION.CANCELLED"
    BILLING_SUBSCRIPTION_ACTIVATED = "BILLING.SUBSCRIPTION.ACTIVATED"
    BILLING_SUBSCRIPTION_PAYMENT_FAILED = "BILLING.SUBSCRIPTION.PAYMENT.FAILED"
    BILLING_SUBSCRIPTION_RENEWED = "BILLING.SUBSCRIPTION.RENEWED"


class SaleAmount(BaseModel):
    total: str | None = None
    currency: str | None = None
    details: dict[str, str] | None = None


class Currency(BaseModel):
    value: str | None = None
    currency: str | None = None


class Sale(BaseModel):
    id: str | None = None
    state: str | None = None  # completed, partially_refunded, pending, refunded, denied
    amount: SaleAmount | None = None
    payment_mode: str | None = None
    protection_eligibility: str | None = None
    transaction_fee: Currency | None = None
    billing_agreement_id: str | None = None  # subscription ID for recurring payments
    parent_payment: str | None = None
    invoice_number: str | None = None
    custom: str | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    links: list[LinkDescription] = []

    model_config = {"frozen": True}


_RESOURCE_MODELS: dict[str, type[BaseModel]] = {
    EventResourceType.SUBSCRIPTION.value: Subscription,
    EventResourceType.SALE.value: Sale,
}


class WebhookEvent(BaseModel):
    id: str
    create_time: datetime | None = None
    resource_type: str | None = None
    event_version: str | None = None
    event_type: str | None = None
    summary: str | None = None
    resource: Any = None
    status: str | None = None
    links: list[LinkDescription] = []

    model_config = {"frozen": True}

    @field_validator("resource", mode="before")
    @classmethod
    def _decode_resource(cls, value: Any, info: ValidationInfo) -> Any:
        model = _RESOURCE_MODELS.get(info.data.get("resource_type") or "")
        if model is None or value is None or isinstance(value, model):
            return value
        return model.model_validate(value)

    def sale(self) -> Sale | None:
        return self.resource if isinstance(self.resource, Sale) else None

    def subscription(self) -> Subscription | None:
        return self.resource if isinstance(self.resource, Subscription) else None


def parse_event(body: bytes | str | dict[str, Any]) -> WebhookEvent:
    """Decode a webhook notification body into a WebhookEvent.

    Raises:
        DecodeError: If the body is not valid JSON or does not look like an event.
    """
    try:
        if isinstance(body, dict):
            return WebhookEvent.model_validate(body)
        return WebhookEvent.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"Invalid webhook event: {e}") from e
