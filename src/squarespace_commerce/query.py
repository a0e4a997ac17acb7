"""Query parameter handling shared by list endpoints."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime

from .exceptions import ValidationError

PRODUCT_TYPE_PHYSICAL = "PHYSICAL"
PRODUCT_TYPE_DIGITAL = "DIGITAL"
PRODUCT_TYPES = (PRODUCT_TYPE_PHYSICAL, PRODUCT_TYPE_DIGITAL)

MAX_IDS_PER_REQUEST = 50

_RFC3339 = re.compile(
    r"^(?P<stamp>\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2})"
    r"(?:\.\d+)?"
    r"(?P<zone>[Zz]|[+-](?P<hours>\d{2}):(?P<minutes>\d{2}))$"
)

# Wire names for each QueryParams field.
WIRE_NAMES: dict[str, str] = {
    "cursor": "cursor",
    "filter": "filter",
    "modified_after": "modifiedAfter",
    "modified_before": "modifiedBefore",
    "sort_direction": "sortDirection",
    "sort_field": "sortField",
    "status": "status",
    "type": "type",
}


@dataclass(slots=True)
class QueryParams:
    """Optional filters accepted by the list endpoints."""

    cursor: str | None = None
    filter: str | None = None
    modified_after: str | None = None
    modified_before: str | None = None
    sort_direction: str | None = None
    sort_field: str | None = None
    status: str | None = None
    type: str | None = None

    def to_query(
        self,
        fields: Sequence[str],
        *,
        renames: Mapping[str, str] | None = None,
    ) -> dict[str, str]:
        """Render the non-empty ``fields`` under their wire names."""

        query: dict[str, str] = {}
        for field_name in fields:
            value = getattr(self, field_name)
            if not value:
                continue
            wire_name = (renames or {}).get(field_name, WIRE_NAMES[field_name])
            query[wire_name] = value
        return query


def is_rfc3339(value: str) -> bool:
    """Return True when ``value`` is a date-time with an explicit UTC offset."""

    match = _RFC3339.match(value)
    if not match:
        return False
    try:
        datetime.strptime(match.group("stamp"), "%Y-%m-%dT%H:%M:%S")
    except ValueError:
        return False
    if match.group("hours") is not None:
        if int(match.group("hours")) > 23 or int(match.group("minutes")) > 59:
            return False
    return True


def validate_type_param(product_type: str) -> None:
    """Check a comma separated product type filter."""

    types = product_type.split(",")
    seen: set[str] = set()
    for raw in types:
        entry = raw.strip()
        if entry not in PRODUCT_TYPES:
            raise ValidationError(
                "type must be either 'PHYSICAL' or 'DIGITAL' (or both comma-separated), "
                f"got: {product_type}"
            )
        seen.add(entry)
    if len(seen) != len(types):
        raise ValidationError(f"duplicate types found in: {product_type}")


def validate_query_params(params: QueryParams) -> None:
    """Raise `ValidationError` when the parameter combination is not allowed.

    A cursor already encodes the filters of the page it came from, so it
    cannot be combined with any other filter. The modified window is only
    accepted as a pair of RFC 3339 timestamps.
    """

    if params.cursor:
        others = (
            params.filter,
            params.modified_after,
            params.modified_before,
            params.sort_direction,
            params.sort_field,
            params.status,
        )
        if any(others):
            raise ValidationError("cannot use cursor alongside other query parameters")
        return

    if bool(params.modified_after) != bool(params.modified_before):
        raise ValidationError(
            "modifiedAfter and modifiedBefore must both be specified together or not at all"
        )
    if params.modified_after and not is_rfc3339(params.modified_after):
        raise ValidationError(
            "modifiedAfter is not a valid ISO 8601 UTC date-time string: "
            f"{params.modified_after}"
        )
    if params.modified_before and not is_rfc3339(params.modified_before):
        raise ValidationError(
            "modifiedBefore is not a valid ISO 8601 UTC date-time string: "
            f"{params.modified_before}"
        )
    if params.type:
        try:
            validate_type_param(params.type)
        except ValidationError as exc:
            raise ValidationError(f"invalid type: {exc}") from exc


def ensure_id_list(ids: Sequence[str], noun: str) -> list[str]:
    """Validate a bulk id lookup and return the ids as a list."""

    if isinstance(ids, str):
        ids = [ids]
    if not ids:
        raise ValidationError(f"at least one {noun} ID is required")
    if len(ids) > MAX_IDS_PER_REQUEST:
        raise ValidationError(
            f"cannot retrieve more than {MAX_IDS_PER_REQUEST} {noun} IDs at once"
        )
    if any(not item or not item.strip() for item in ids):
        raise ValidationError(f"{noun} IDs cannot be empty")
    return list(ids)


def require_id(value: str | None, name: str) -> str:
    """Return ``value`` or raise when a path identifier is missing."""

    if not value or not value.strip():
        raise ValidationError(f"{name} is required")
    return value
