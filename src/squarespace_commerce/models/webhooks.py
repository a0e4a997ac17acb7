"""Webhook subscription records."""

from __future__ import annotations

from pydantic import Field

from .base import CommerceModel


class WebhookSubscriptionRequest(CommerceModel):
    endpoint_url: str | None = None
    topics: list[str] | None = None


class WebhookSubscription(CommerceModel):
    id: str | None = None
    endpoint_url: str | None = None
    topics: list[str] = Field(default_factory=list)
    secret: str | None = None
    created_on: str | None = None
    updated_on: str | None = None


class WebhookSubscriptionsResponse(CommerceModel):
    webhook_subscriptions: list[WebhookSubscription] = Field(default_factory=list)


class SendTestNotificationRequest(CommerceModel):
    topic: str


class SendTestNotificationResponse(CommerceModel):
    status_code: int | None = None


class RotateSecretResponse(CommerceModel):
    secret: str | None = None
