"""Shared fixtures for the paypal-billing test suite."""
from __future__ import annotations

import json
from unittest.mock import MagicMock

import httpx
import pytest

from paypal_billing.client import PayPalClient
from paypal_billing.config import Settings

API_BASE = "https://api.sandbox.paypal.com"


@pytest.fixture
def fake_settings() -> Settings:
    return Settings(
        client_id="test-client-id",
        client_secret="test-client-secret",
        environment="sandbox",
    )


class FakePayPal:
    """MockTransport handler: records requests and replays queued responses.

    Token requests are answered automatically unless a token response was queued.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []
        self.token_requests = 0
        self.token_expires_in = 32400

    def queue(self, status_code: int = 200, json_data=None, content: bytes | None = None) -> None:
        if json_data is not None:
            content = json.dumps(json_data).encode()
        self.responses.append(httpx.Response(status_code, content=content or b""))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == "/v1/oauth2/token":
            self.token_requests += 1
            return httpx.Response(
                200,
                json={
                    "access_token": f"token-{self.token_requests}",
                    "token_type": "Bearer",
                    "expires_in": self.token_expires_in,
                    "app_id": "APP-80W284485P519543T",
                },
            )
        self.requests.append(request)
        return self.responses.pop(0)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def paypal() -> FakePayPal:
    return FakePayPal()


@pytest.fixture
def client(paypal) -> PayPalClient:
    """PayPalClient wired to the FakePayPal transport."""
    http = httpx.Client(transport=httpx.MockTransport(paypal))
    return PayPalClient("test-client-id", "test-client-secret", API_BASE, http=http)


@pytest.fixture
def mock_client():
    """MagicMock standing in for PayPalClient in service tests."""
    client = MagicMock()
    client.url.side_effect = lambda path: API_BASE + path
    client.new_request = MagicMock(return_value=MagicMock())
    client.send_with_auth = MagicMock()
    client.close = MagicMock()
    return client
