"""Profiles API records."""

from __future__ import annotations

from pydantic import Field

from .base import Address, Amount, CommerceModel, Pagination


class Profile(CommerceModel):
    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    has_account: bool = False
    is_customer: bool = False
    created_on: str | None = None
    address: Address | None = None
    accepts_marketing: bool = False
    total_order_count: int | None = None
    total_spent: Amount | None = None


class ProfilesResponse(CommerceModel):
    profiles: list[Profile] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)
