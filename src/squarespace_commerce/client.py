"""High-level Squarespace Commerce REST client."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import urlencode

import requests
import urllib3
from pydantic_core import PydanticSerializationError
from requests_toolbelt import MultipartEncoder
from urllib3.exceptions import InsecureRequestWarning

from .config import DEFAULT_USER_AGENT, ClientConfig, build_base_url
from .exceptions import ValidationError
from .http import decode_model, ensure_status
from .http import request as http_request
from .models.base import CommerceModel
from .operations import Operation
from .resources import (
    InventoryResource,
    OrdersResource,
    ProductsResource,
    ProfilesResource,
    TransactionsResource,
    WebhooksResource,
)

logger = logging.getLogger(__name__)


class CommerceClient:
    """Wrap the Squarespace Commerce endpoints with typed helper methods."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        user_agent: str | None = None,
        idempotency_key: str | None = None,
        base_url: str | None = None,
        timeout: float | tuple[float, float] | None = None,
        verify_ssl: bool | str = True,
        default_headers: Mapping[str, str] | None = None,
        session: requests.Session | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        if config is None:
            if not api_key:
                raise ValidationError("api_key is required")
            config = ClientConfig(
                api_key=api_key,
                user_agent=user_agent or DEFAULT_USER_AGENT,
                idempotency_key=idempotency_key,
                base_url=base_url,
                timeout=timeout,
                verify_ssl=verify_ssl,
                default_headers=default_headers,
            )
        self.config = config
        self._session = session or requests.Session()
        self._suppress_insecure_warning_if_needed()
        self.products = ProductsResource(self)
        self.inventory = InventoryResource(self)
        self.orders = OrdersResource(self)
        self.profiles = ProfilesResource(self)
        self.transactions = TransactionsResource(self)
        self.webhooks = WebhooksResource(self)

    @classmethod
    def from_config(
        cls, config: ClientConfig, session: requests.Session | None = None
    ) -> CommerceClient:
        """Build a client around an already prepared `ClientConfig`."""

        if not config.api_key:
            raise ValidationError("api_key is required")
        return cls(config=config, session=session)

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> CommerceClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # Public API --------------------------------------------------------------
    def execute(
        self,
        operation: Operation,
        *,
        path_args: Mapping[str, str | Sequence[str]] | None = None,
        params: Mapping[str, str] | None = None,
        payload: CommerceModel | None = None,
        data: MultipartEncoder | None = None,
    ) -> Any:
        """Run ``operation`` and return its typed result.

        Operations without a response model return the HTTP status code.
        """

        url = self._resolve_url(operation, path_args, params)
        body = self._serialize(operation, payload)
        headers = self.config.resolved_headers(
            json_body=body is not None, idempotent=operation.idempotent
        )
        if data is not None:
            headers["Content-Type"] = data.content_type
        self._log_request(operation, url)
        response = http_request(
            self._session,
            operation.method,
            url,
            endpoint=operation.name,
            headers=headers,
            json_payload=body,
            data=data,
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
        )
        ensure_status(response, operation.expected_status, endpoint=operation.name, url=url)
        if operation.response_model is None:
            return response.status_code
        return decode_model(operation.response_model, response.content, endpoint=operation.name)

    def close(self) -> None:
        self._session.close()

    # Internal helpers -------------------------------------------------------
    def _resolve_url(
        self,
        operation: Operation,
        path_args: Mapping[str, str | Sequence[str]] | None,
        params: Mapping[str, str] | None,
    ) -> str:
        url = build_base_url(self.config, operation.version, operation.render_path(**(path_args or {})))
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    @staticmethod
    def _serialize(operation: Operation, payload: CommerceModel | None) -> dict[str, Any] | None:
        if payload is None:
            return None
        try:
            return payload.to_payload()
        except PydanticSerializationError as exc:
            raise ValidationError(f"{operation.name}: failed to marshal request body: {exc}") from exc

    def _log_request(self, operation: Operation, url: str) -> None:
        logger.info(
            "Squarespace request %s %s (operation=%s)",
            operation.method.upper(),
            url,
            operation.name,
        )

    def _suppress_insecure_warning_if_needed(self) -> None:
        if isinstance(self.config.verify_ssl, bool) and not self.config.verify_ssl:
            urllib3.disable_warnings(InsecureRequestWarning)
