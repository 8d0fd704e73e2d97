"""Tests for services/webhooks.py — create, list with anchor type, delete."""
import json

import pytest

from paypal_billing.errors import ProviderError
from paypal_billing.models.webhooks import AnchorType, CreateWebhookRequest, EventType, WebhookList
from paypal_billing.services.webhooks import WebhookService

from conftest import API_BASE

HOOKS = API_BASE + "/v1/notifications/webhooks"


# ── list ─────────────────────────────────────────────────────────────

def test_list_account_anchor(mock_client):
    WebhookService(mock_client).list("ACCOUNT")

    args, kwargs = mock_client.new_request.call_args
    assert args == ("GET", HOOKS)
    assert kwargs["params"] == {"anchor_type": "ACCOUNT"}
    assert mock_client.send_with_auth.call_args[0][1] is WebhookList


def test_list_application_anchor_sends_no_query(mock_client):
    WebhookService(mock_client).list(AnchorType.APPLICATION)
    assert mock_client.new_request.call_args[1]["params"] is None


def test_list_default_sends_no_query(mock_client):
    WebhookService(mock_client).list()
    assert mock_client.new_request.call_args[1]["params"] is None


def test_list_lowercase_anchor(mock_client):
    WebhookService(mock_client).list("account")
    assert mock_client.new_request.call_args[1]["params"] == {"anchor_type": "ACCOUNT"}


def test_list_invalid_anchor(mock_client):
    with pytest.raises(ValueError):
        WebhookService(mock_client).list("EVERYTHING")


def test_list_webhooks_scenario(client, paypal):
    paypal.queue(200, {"webhooks": [{
        "id": "40Y916089Y8324740",
        "url": "https://example.com/paypal_webhooks",
        "event_types": [{"name": "BILLING.SUBSCRIPTION.CREATED", "description": "A billing agreement is created."}],
        "links": [{"href": HOOKS + "/40Y916089Y8324740", "rel": "self", "method": "GET"}],
    }]})
    result = WebhookService(client).list("ACCOUNT")

    assert paypal.last.method == "GET"
    assert paypal.last.url.path == "/v1/notifications/webhooks"
    assert paypal.last.url.query == b"anchor_type=ACCOUNT"
    assert result.webhooks[0].event_types[0].name == "BILLING.SUBSCRIPTION.CREATED"


# ── create / delete ──────────────────────────────────────────────────

def test_create_webhook(client, paypal):
    paypal.queue(201, {
        "id": "0EH40505U7160970P",
        "url": "https://example.com/example_webhook",
        "event_types": [{"name": "PAYMENT.SALE.COMPLETED"}, {"name": "PAYMENT.SALE.REFUNDED"}],
    })
    request = CreateWebhookRequest(
        url="https://example.com/example_webhook",
        event_types=[EventType(name="PAYMENT.SALE.COMPLETED"), EventType(name="PAYMENT.SALE.REFUNDED")],
    )
    webhook = WebhookService(client).create(request)

    assert webhook.id == "0EH40505U7160970P"
    assert json.loads(paypal.last.content) == {
        "url": "https://example.com/example_webhook",
        "event_types": [{"name": "PAYMENT.SALE.COMPLETED"}, {"name": "PAYMENT.SALE.REFUNDED"}],
    }


def test_delete_webhook(client, paypal):
    paypal.queue(204)
    assert WebhookService(client).delete("5GP028458E2496506") is None
    assert paypal.last.method == "DELETE"
    assert paypal.last.url.path == "/v1/notifications/webhooks/5GP028458E2496506"


def test_delete_missing_webhook(client, paypal):
    paypal.queue(404, {"name": "INVALID_RESOURCE_ID", "message": "Webhook id not found."})
    with pytest.raises(ProviderError, match="Webhook id not found"):
        WebhookService(client).delete("WH-missing")


def test_delete_requires_id(mock_client):
    with pytest.raises(ValueError):
        WebhookService(mock_client).delete("")
