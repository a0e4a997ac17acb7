"""Webhook subscription management."""

from __future__ import annotations

from ..exceptions import ValidationError
from ..models.webhooks import (
    RotateSecretResponse,
    SendTestNotificationRequest,
    SendTestNotificationResponse,
    WebhookSubscription,
    WebhookSubscriptionRequest,
    WebhookSubscriptionsResponse,
)
from ..operations import Operation
from ..query import require_id
from .base import ResourceBase

CREATE_SUBSCRIPTION = Operation(
    "CreateWebhookSubscription", "POST", "webhook_subscriptions", 201, WebhookSubscription
)
UPDATE_SUBSCRIPTION = Operation(
    "UpdateWebhookSubscription",
    "POST",
    "webhook_subscriptions/{subscription_id}",
    200,
    WebhookSubscription,
)
LIST_SUBSCRIPTIONS = Operation(
    "RetrieveAllWebhookSubscriptions", "GET", "webhook_subscriptions", 200, WebhookSubscriptionsResponse
)
GET_SUBSCRIPTION = Operation(
    "RetrieveSpecificWebhookSubscription",
    "GET",
    "webhook_subscriptions/{subscription_id}",
    200,
    WebhookSubscription,
)
DELETE_SUBSCRIPTION = Operation(
    "DeleteWebhookSubscription", "DELETE", "webhook_subscriptions/{subscription_id}", 204
)
SEND_TEST_NOTIFICATION = Operation(
    "SendTestNotification",
    "POST",
    "webhook_subscriptions/{subscription_id}/actions/sendTestNotification",
    200,
    SendTestNotificationResponse,
)
ROTATE_SECRET = Operation(
    "RotateSubscriptionSecret",
    "POST",
    "webhook_subscriptions/{subscription_id}/actions/rotateSecret",
    200,
    RotateSecretResponse,
)


class WebhooksResource(ResourceBase):
    """Manage webhook subscriptions and their signing secrets."""

    def create(self, request: WebhookSubscriptionRequest) -> WebhookSubscription:
        if not request.topics:
            raise ValidationError("topics cannot be empty")
        return self._execute(CREATE_SUBSCRIPTION, payload=request)

    def update(self, subscription_id: str, request: WebhookSubscriptionRequest) -> WebhookSubscription:
        path_args = self._subscription_path(subscription_id)
        if request.topics is not None and not request.topics:
            raise ValidationError("topics cannot be an empty array")
        return self._execute(UPDATE_SUBSCRIPTION, path_args=path_args, payload=request)

    def list(self) -> WebhookSubscriptionsResponse:
        return self._execute(LIST_SUBSCRIPTIONS)

    def get(self, subscription_id: str) -> WebhookSubscription:
        return self._execute(GET_SUBSCRIPTION, path_args=self._subscription_path(subscription_id))

    def delete(self, subscription_id: str) -> int:
        return self._execute(DELETE_SUBSCRIPTION, path_args=self._subscription_path(subscription_id))

    def send_test_notification(self, subscription_id: str, topic: str) -> SendTestNotificationResponse:
        """Ask the API to deliver a sample ``topic`` event to the subscription."""

        path_args = self._subscription_path(subscription_id)
        if not topic:
            raise ValidationError("topic is required")
        return self._execute(
            SEND_TEST_NOTIFICATION,
            path_args=path_args,
            payload=SendTestNotificationRequest(topic=topic),
        )

    def rotate_secret(self, subscription_id: str) -> RotateSecretResponse:
        return self._execute(ROTATE_SECRET, path_args=self._subscription_path(subscription_id))

    @staticmethod
    def _subscription_path(subscription_id: str) -> dict[str, str]:
        return {"subscription_id": require_id(subscription_id, "subscriptionID")}
