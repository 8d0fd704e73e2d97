"""Subscription data models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel

from paypal_billing.models.common import (
    ApplicationContext,
    BillingInfo,
    LinkDescription,
    Money,
    Name,
    Subscriber,
)


class SubscriptionStatus(str, Enum):
    APPROVAL_PENDING = "APPROVAL_PENDING"
    APPROVED = "APPROVED"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    CANCELLED = "CANCELLED"
    EXPIRED = "EXPIRED"


class CreateSubscriptionRequest(BaseModel):
    plan_id: str
    start_time: datetime | None = None  # defaults to now on PayPal's side
    quantity: str | None = None
    shipping_amount: Money | None = None
    subscriber: Subscriber | None = None
    auto_renewal: bool | None = None
    application_context: ApplicationContext | None = None


class StatusChangeRequest(BaseModel):
    """Body for activate / suspend / cancel."""
    reason: str


class Subscription(BaseModel):
    id: str | None = None
    plan_id: str | None = None
    status: SubscriptionStatus | None = None
    status_change_note: str | None = None
    status_update_time: datetime | None = None
    start_time: datetime | None = None
    quantity: str | None = None
    shipping_amount: Money | None = None
    subscriber: Subscriber | None = None
    billing_info: BillingInfo | None = None
    auto_renewal: bool | None = None
    create_time: datetime | None = None
    update_time: datetime | None = None
    links: list[LinkDescription] = []

    model_config = {"frozen": True}

    @property
    def is_active(self) -> bool:
        return self.status == SubscriptionStatus.ACTIVE

    def approve_link(self) -> str | None:
        """URL the buyer must visit to approve an APPROVAL_PENDING subscription."""
        for link in self.links:
            if link.rel == "approve":
                return link.href
        return None


class TransactionStatus(str, Enum):
    COMPLETED = "COMPLETED"
    DECLINED = "DECLINED"
    PARTIALLY_REFUNDED = "PARTIALLY_REFUNDED"
    PENDING = "PENDING"
    REFUNDED = "REFUNDED"


class AmountWithBreakdown(BaseModel):
    gross_amount: Money | None = None
    fee_amount: Money | None = None
    shipping_amount: Money | None = None
    tax_amount: Money | None = None
    net_amount: Money | None = None


class Transaction(BaseModel):
    id: str | None = None
    status: TransactionStatus | None = None
    payer_email: str | None = None
    payer_name: Name | None = None
    amount_with_breakdown: AmountWithBreakdown | None = None
    time: datetime | None = None

    model_config = {"frozen": True}


class TransactionList(BaseModel):
    transactions: list[Transaction] = []
    total_items: int | None = None
    total_pages: int | None = None
    links: list[LinkDescription] = []

    model_config = {"frozen": True}
