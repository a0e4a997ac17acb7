"""Configuration helpers for the Squarespace Commerce client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .idempotency import idempotency_headers

DEFAULT_USER_AGENT = "squarespace-commerce/default-client"
DEFAULT_API_HOST = "https://api.squarespace.com"
API_VERSION = "1.0"


def resolve_user_agent(user_agent: str | None) -> str:
    """Return the configured user agent, falling back to the library default."""

    if not user_agent:
        return DEFAULT_USER_AGENT
    return user_agent


@dataclass(slots=True)
class ClientConfig:
    """Typed session configuration shared by every operation."""

    api_key: str
    user_agent: str = DEFAULT_USER_AGENT
    idempotency_key: str | None = None
    base_url: str | None = None
    timeout: float | tuple[float, float] | None = None
    verify_ssl: bool | str = True
    default_headers: Mapping[str, str] | None = None

    def resolved_headers(
        self, *, json_body: bool = False, idempotent: bool = False
    ) -> dict[str, str]:
        headers: dict[str, str] = {"Accept": "application/json"}
        if self.default_headers:
            headers.update(self.default_headers)
        headers["Authorization"] = f"Bearer {self.api_key}"
        headers["User-Agent"] = resolve_user_agent(self.user_agent)
        if json_body:
            headers["Content-Type"] = "application/json"
        if idempotent:
            headers.update(idempotency_headers(self.idempotency_key))
        return headers


def build_base_url(config: ClientConfig, version: str, path: str) -> str:
    """Build the request URL for ``path`` under the versioned API root.

    ``config.base_url`` replaces the production host when set; it is used to
    point the client at a local test double and is not validated.
    """

    if config.base_url:
        return f"{config.base_url}/{version}/{path}"
    return f"{DEFAULT_API_HOST}/{version}/{path}"
