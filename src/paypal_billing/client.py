"""Base API client for the PayPal REST API.

Builds JSON requests, attaches Basic or Bearer credentials, dispatches them
and turns responses into decoded models or typed errors. No retries: every
call is a single blocking round trip.
"""

from __future__ import annotations

import base64
import json
import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from paypal_billing.auth import TOKEN_PATH, AuthManager
from paypal_billing.config import Settings
from paypal_billing.errors import (
    AuthorizationError,
    ConfigurationError,
    DecodeError,
    ProviderError,
    SerializationError,
    TransportError,
)
from paypal_billing.models.auth import TokenStatus
from paypal_billing.models.errors import ErrorResponse, IdentityErrorResponse
from paypal_billing.models.patch import Patch
from paypal_billing.trace import ExchangeRecorder, FileRecorder

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _to_jsonable(payload: Any) -> Any:
    """Convert models (and lists of models) into plain JSON data, omitting None fields."""
    if isinstance(payload, Patch):
        return payload.to_api()
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(payload, (list, tuple)):
        return [_to_jsonable(item) for item in payload]
    return payload


def _is_number_into_string(error: ValidationError) -> bool:
    """True when every failure is a JSON number landing in a string field.

    PayPal occasionally returns numeric values for fields documented as
    strings; those responses are accepted rather than failed.
    """
    details = error.errors()
    return bool(details) and all(
        d["type"] == "string_type"
        and isinstance(d.get("input"), (int, float))
        and not isinstance(d.get("input"), bool)
        for d in details
    )


class PayPalClient:
    """HTTP client for the PayPal REST API with transparent token handling."""

    def __init__(
        self,
        client_id: str,
        secret: str,
        api_base: str,
        *,
        http: httpx.Client | None = None,
        recorder: ExchangeRecorder | None = None,
        verbose: bool = False,
    ) -> None:
        if not client_id or not secret or not api_base:
            raise ConfigurationError(
                "client_id, secret and api_base are required to create a PayPalClient"
            )
        self._client_id = client_id
        self._secret = secret
        self._api_base = api_base.rstrip("/")
        self._owns_http = http is None
        self._http = http or httpx.Client(timeout=60.0)
        self._recorder = recorder
        self._verbose = verbose
        self._auth = AuthManager(self)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> PayPalClient:
        """Build a client from loaded Settings (credentials, environment, trace file)."""
        if settings.trace_file and "recorder" not in kwargs:
            kwargs["recorder"] = FileRecorder(settings.trace_file)
        try:
            base_url = settings.base_url
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        return cls(settings.client_id, settings.client_secret, base_url, **kwargs)

    @property
    def api_base(self) -> str:
        return self._api_base

    @property
    def auth(self) -> AuthManager:
        return self._auth

    def url(self, path: str) -> str:
        """Absolute URL for an API path such as "/v1/billing/subscriptions"."""
        return self._api_base + path

    # ── Token management ─────────────────────────────────────────────

    def ensure_valid_token(self) -> None:
        self._auth.ensure_valid_token()

    def get_access_token(self, force_refresh: bool = False) -> str:
        return self._auth.get_access_token(force_refresh=force_refresh)

    def set_access_token(self, token: str, expires_in: int | None = None) -> None:
        self._auth.set_access_token(token, expires_in)

    def token_status(self) -> TokenStatus:
        return self._auth.get_status()

    # ── Request building ─────────────────────────────────────────────

    def new_request(
        self,
        method: str,
        url: str,
        payload: Any = None,
        *,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        data: dict[str, str] | None = None,
    ) -> httpx.Request:
        """Construct a request, serializing ``payload`` to a JSON body.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE).
            url: Absolute request URL.
            payload: Model, list of models, or JSON-compatible data. None means no body.
            params: Query parameters.
            headers: Extra request headers.
            data: Form fields, used instead of a JSON payload (token endpoint).

        Raises:
            SerializationError: If the payload cannot be encoded as JSON.
        """
        content = None
        if payload is not None:
            try:
                content = json.dumps(_to_jsonable(payload), allow_nan=False).encode()
            except (TypeError, ValueError) as e:
                raise SerializationError(f"Cannot encode request payload as JSON: {e}") from e

        return httpx.Request(
            method,
            url,
            content=content,
            data=data,
            params=params,
            headers=headers,
        )

    # ── Dispatch ─────────────────────────────────────────────────────

    def send(self, request: httpx.Request, result_type: type[ModelT] | None = None) -> ModelT | None:
        """Send a request without attaching credentials and classify the response.

        Returns:
            The decoded ``result_type`` for 200/201 responses, otherwise None.

        Raises:
            TransportError: The exchange failed before a response arrived.
            DecodeError: A body could not be parsed into the expected model.
            AuthorizationError: HTTP 401.
            ProviderError: Any other non-success status.
        """
        request.headers["Accept"] = "application/json"
        request.headers["Accept-Language"] = "en_US"
        if "Content-Type" not in request.headers:
            request.headers["Content-Type"] = "application/json"

        if self._verbose:
            logger.info(f"{request.method} {request.url}")

        try:
            response = self._http.send(request)
            response.read()
        except httpx.HTTPError as e:
            raise TransportError(f"{request.method} {request.url} failed: {e}") from e

        if self._verbose:
            logger.info(f"Response: {response.status_code}")

        if self._recorder is not None and not request.url.path.endswith(TOKEN_PATH):
            try:
                self._recorder.record(request, response)
            except OSError as e:
                logger.warning(f"Could not record {request.method} {request.url}: {e}")

        status = response.status_code
        if status in (200, 201):
            if result_type is None:
                return None
            return self._decode(response, result_type)

        if status == 204:
            return None

        if status == 401:
            identity = self._decode_error(response, IdentityErrorResponse)
            raise AuthorizationError(response, identity.error, identity.error_description)

        body = self._decode_error(response, ErrorResponse)
        raise ProviderError(
            response,
            name=body.name,
            message=body.message,
            debug_id=body.debug_id,
            details=body.details,
            links=body.links,
        )

    def send_with_basic_auth(
        self, request: httpx.Request, result_type: type[ModelT] | None = None
    ) -> ModelT | None:
        """Send using client_id:secret HTTP Basic credentials."""
        credentials = base64.b64encode(f"{self._client_id}:{self._secret}".encode()).decode()
        request.headers["Authorization"] = f"Basic {credentials}"
        return self.send(request, result_type)

    def send_with_auth(
        self, request: httpx.Request, result_type: type[ModelT] | None = None
    ) -> ModelT | None:
        """Send with a Bearer token, fetching or refreshing the token first if needed."""
        self._auth.ensure_valid_token()
        request.headers["Authorization"] = f"Bearer {self._auth.access_token}"
        return self.send(request, result_type)

    def _decode(self, response: httpx.Response, result_type: type[ModelT]) -> ModelT:
        try:
            return result_type.model_validate_json(response.content)
        except ValidationError as e:
            if _is_number_into_string(e):
                logger.debug(f"Ignoring number/string mismatch decoding {result_type.__name__}: {e}")
                return result_type.model_construct()
            raise DecodeError(
                f"Cannot decode {result_type.__name__} from HTTP {response.status_code} response: {e}",
                response,
            ) from e

    def _decode_error(self, response: httpx.Response, error_type: type[ModelT]) -> ModelT:
        """Parse an error body; an empty body yields an empty model."""
        if not response.content:
            return error_type()
        try:
            return error_type.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(
                f"Cannot decode error body of HTTP {response.status_code} response: {e}",
                response,
            ) from e

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> PayPalClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
