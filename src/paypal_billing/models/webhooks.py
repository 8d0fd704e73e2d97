"""Webhook subscription data models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from paypal_billing.models.common import LinkDescription


class AnchorType(str, Enum):
    APPLICATION = "APPLICATION"
    ACCOUNT = "ACCOUNT"


class ResourceVersion(BaseModel):
    resource_version: str


class EventType(BaseModel):
    name: str
    description: str | None = None
    status: str | None = None
    resource_versions: list[ResourceVersion] | None = None


class CreateWebhookRequest(BaseModel):
    url: str
    event_types: list[EventType]


class Webhook(BaseModel):
    id: str | None = None
    url: str | None = None
    event_types: list[EventType] = []
    links: list[LinkDescription] = []

    model_config = {"frozen": True}


class WebhookList(BaseModel):
    webhooks: list[Webhook] = []

    model_config = {"frozen": True}
