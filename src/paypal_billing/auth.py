"""OAuth2 client-credentials authentication for the PayPal REST API.

Handles token acquisition, caching, and expiry tracking.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from paypal_billing.errors import DecodeError
from paypal_billing.models.auth import TokenResponse, TokenStatus

if TYPE_CHECKING:
    from paypal_billing.client import PayPalClient

logger = logging.getLogger(__name__)

TOKEN_PATH = "/v1/oauth2/token"

# Refresh this long before the token actually expires
EXPIRY_BUFFER = timedelta(minutes=5)


class AuthManager:
    """Manages the client-credentials access token for one PayPalClient.

    Not thread-safe: token state is mutated in place on refresh.
    """

    def __init__(self, client: PayPalClient) -> None:
        self._client = client
        self._access_token: str | None = None
        self._token_expiry: datetime | None = None

    @property
    def access_token(self) -> str | None:
        return self._access_token

    def ensure_valid_token(self) -> None:
        """Fetch a new token if none is cached or the cached one is about to expire."""
        if not self._is_token_valid():
            self._refresh_token()

    def get_access_token(self, force_refresh: bool = False) -> str:
        """Get a valid access token, refreshing if needed.

        Args:
            force_refresh: Force a token request even if the current token is valid.

        Returns:
            A valid access token string.
        """
        if force_refresh:
            self._refresh_token()
        else:
            self.ensure_valid_token()
        return self._access_token  # type: ignore[return-value]

    def set_access_token(self, token: str, expires_in: int | None = None) -> None:
        """Install a token obtained elsewhere.

        Without ``expires_in`` the token is treated as caller-managed and is
        never refreshed automatically.
        """
        self._access_token = token
        self._token_expiry = (
            datetime.now() + timedelta(seconds=expires_in) if expires_in is not None else None
        )

    def get_status(self) -> TokenStatus:
        """Get the current token status."""
        if not self._access_token:
            return TokenStatus(has_token=False, is_expired=True)

        if self._token_expiry is None:
            return TokenStatus(has_token=True, is_expired=False)

        now = datetime.now()
        is_expired = now > self._token_expiry
        seconds_remaining = None
        if not is_expired:
            seconds_remaining = int((self._token_expiry - now).total_seconds())

        return TokenStatus(
            has_token=True,
            is_expired=is_expired,
            expires_at=self._token_expiry,
            seconds_remaining=seconds_remaining,
        )

    def _is_token_valid(self) -> bool:
        """Check if the current token is valid with a safety buffer."""
        if not self._access_token:
            return False
        if self._token_expiry is None:
            return True
        return datetime.now() + EXPIRY_BUFFER < self._token_expiry

    def _refresh_token(self) -> TokenResponse:
        """Request a new token; cached state only changes on success."""
        logger.info("Requesting new PayPal access token")
        request = self._client.new_request(
            "POST",
            self._client.api_base + TOKEN_PATH,
            data={"grant_type": "client_credentials"},
        )
        token_data = self._client.send_with_basic_auth(request, TokenResponse)

        if token_data is None or not token_data.access_token:
            raise DecodeError("Token response did not contain an access_token")

        self._access_token = token_data.access_token
        self._token_expiry = datetime.now() + timedelta(seconds=token_data.expires_in)
        return token_data
