"""High-level Squarespace Commerce client entrypoints."""
from .client import CommerceClient
from .config import DEFAULT_USER_AGENT, ClientConfig, build_base_url, resolve_user_agent
from .exceptions import APIError, CommerceError, RequestError, ValidationError
from .idempotency import new_idempotency_key
from .query import QueryParams, validate_query_params

__all__ = [
    "CommerceClient",
    "ClientConfig",
    "CommerceError",
    "APIError",
    "RequestError",
    "ValidationError",
    "QueryParams",
    "DEFAULT_USER_AGENT",
    "build_base_url",
    "new_idempotency_key",
    "resolve_user_agent",
    "validate_query_params",
]
