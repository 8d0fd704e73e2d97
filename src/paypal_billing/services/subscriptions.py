"""Subscription management service."""

from __future__ import annotations

from paypal_billing.client import PayPalClient
from paypal_billing.models.patch import Patch, PatchBuilder
from paypal_billing.models.subscriptions import (
    CreateSubscriptionRequest,
    StatusChangeRequest,
    Subscription,
    TransactionList,
)

SUBSCRIPTIONS_PATH = "/v1/billing/subscriptions"


class SubscriptionService:
    """Service for /v1/billing/subscriptions operations."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def create(self, request: CreateSubscriptionRequest) -> Subscription:
        """Create a subscription.

        PayPal fires BILLING.SUBSCRIPTION.CREATED; the returned subscription is
        APPROVAL_PENDING until the buyer follows its approve link.
        """
        req = self._client.new_request(
            "POST",
            self._client.url(SUBSCRIPTIONS_PATH),
            request,
            headers={"Prefer": "return=representation"},
        )
        return self._client.send_with_auth(req, Subscription)

    def show(self, subscription_id: str) -> Subscription:
        """Show subscription details."""
        req = self._client.new_request("GET", self._url(subscription_id))
        return self._client.send_with_auth(req, Subscription)

    def update(
        self, subscription_id: str, patches: list[Patch] | PatchBuilder
    ) -> Subscription | None:
        """Apply a JSON-Patch document to a subscription.

        PayPal normally answers 204, in which case None is returned.
        """
        if isinstance(patches, PatchBuilder):
            patches = patches.build()
        if not patches:
            raise ValueError("At least one patch operation is required")
        req = self._client.new_request("PATCH", self._url(subscription_id), patches)
        return self._client.send_with_auth(req, Subscription)

    def activate(self, subscription_id: str, reason: str) -> None:
        self._change_status(subscription_id, "activate", reason)

    def suspend(self, subscription_id: str, reason: str) -> None:
        self._change_status(subscription_id, "suspend", reason)

    def cancel(self, subscription_id: str, reason: str) -> None:
        self._change_status(subscription_id, "cancel", reason)

    def list_transactions(
        self, subscription_id: str, start_time: str, end_time: str
    ) -> TransactionList:
        """List transactions between two ISO-8601 timestamps."""
        req = self._client.new_request(
            "GET",
            self._url(subscription_id, "transactions"),
            params={"start_time": start_time, "end_time": end_time},
        )
        return self._client.send_with_auth(req, TransactionList)

    def _change_status(self, subscription_id: str, action: str, reason: str) -> None:
        """POST a reason to /{id}/{action}; PayPal answers 204 No Content."""
        req = self._client.new_request(
            "POST",
            self._url(subscription_id, action),
            StatusChangeRequest(reason=reason),
        )
        self._client.send_with_auth(req)

    def _url(self, subscription_id: str, *parts: str) -> str:
        if not subscription_id:
            raise ValueError("subscription_id is required")
        return self._client.url("/".join([SUBSCRIPTIONS_PATH, subscription_id, *parts]))
