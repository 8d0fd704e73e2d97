"""Webhook management service."""

from __future__ import annotations

from paypal_billing.client import PayPalClient
from paypal_billing.models.webhooks import AnchorType, CreateWebhookRequest, Webhook, WebhookList

WEBHOOKS_PATH = "/v1/notifications/webhooks"


class WebhookService:
    """Service for /v1/notifications/webhooks operations."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def create(self, request: CreateWebhookRequest) -> Webhook:
        req = self._client.new_request("POST", self._client.url(WEBHOOKS_PATH), request)
        return self._client.send_with_auth(req, Webhook)

    def list(self, anchor_type: AnchorType | str | None = None) -> WebhookList:
        """List webhooks.

        PayPal defaults to APPLICATION; the query parameter is only sent for ACCOUNT.

        Raises:
            ValueError: If ``anchor_type`` is not APPLICATION or ACCOUNT (any case).
        """
        params = None
        if anchor_type is not None and AnchorType(anchor_type.upper()) == AnchorType.ACCOUNT:
            params = {"anchor_type": AnchorType.ACCOUNT.value}
        req = self._client.new_request("GET", self._client.url(WEBHOOKS_PATH), params=params)
        return self._client.send_with_auth(req, WebhookList)

    def delete(self, webhook_id: str) -> None:
        if not webhook_id:
            raise ValueError("webhook_id is required")
        req = self._client.new_request("DELETE", self._client.url(f"{WEBHOOKS_PATH}/{webhook_id}"))
        self._client.send_with_auth(req)
