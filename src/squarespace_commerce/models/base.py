"""Shared base model and records used across the Commerce APIs."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CommerceModel(BaseModel):
    """Base record mirroring the camelCase JSON of the remote API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Amount(CommerceModel):
    currency: str | None = None
    value: str | None = None


class Pagination(CommerceModel):
    has_next_page: bool = False
    next_page_cursor: str | None = None
    next_page_url: str | None = None


class Address(CommerceModel):
    first_name: str | None = None
    last_name: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country_code: str | None = None
    phone: str | None = None
