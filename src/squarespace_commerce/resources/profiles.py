"""Customer profile lookups."""

from __future__ import annotations

from collections.abc import Sequence

from ..models.profiles import ProfilesResponse
from ..operations import Operation
from ..query import QueryParams
from .base import ResourceBase

LIST_PROFILES = Operation("RetrieveAllProfiles", "GET", "commerce/profiles", 200, ProfilesResponse)
GET_PROFILES = Operation("RetrieveSpecificProfiles", "GET", "commerce/profiles/{ids}", 200, ProfilesResponse)


class ProfilesResource(ResourceBase):
    def list(self, params: QueryParams | None = None) -> ProfilesResponse:
        return self._list(
            LIST_PROFILES, params, ("cursor", "filter", "sort_direction", "sort_field")
        )

    def get(self, profile_ids: Sequence[str]) -> ProfilesResponse:
        return self._get_many(GET_PROFILES, profile_ids, "profile")
