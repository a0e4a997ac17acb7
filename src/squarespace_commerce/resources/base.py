"""Common helpers for resource wrappers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from ..models.base import CommerceModel
from ..operations import Operation
from ..query import QueryParams, ensure_id_list, validate_query_params

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from requests_toolbelt import MultipartEncoder

    from ..client import CommerceClient


class ResourceBase:
    """Provide shared helpers for resource modules."""

    def __init__(self, client: CommerceClient) -> None:
        self._client = client

    def _execute(
        self,
        operation: Operation,
        *,
        path_args: Mapping[str, str | Sequence[str]] | None = None,
        params: Mapping[str, str] | None = None,
        payload: CommerceModel | None = None,
        data: MultipartEncoder | None = None,
    ) -> Any:
        return self._client.execute(
            operation, path_args=path_args, params=params, payload=payload, data=data
        )

    def _list(
        self,
        operation: Operation,
        params: QueryParams | None,
        fields: Sequence[str],
        *,
        renames: Mapping[str, str] | None = None,
    ) -> Any:
        params = params or QueryParams()
        validate_query_params(params)
        return self._execute(operation, params=params.to_query(fields, renames=renames))

    def _get_many(self, operation: Operation, ids: Sequence[str], noun: str) -> Any:
        checked = ensure_id_list(ids, noun)
        return self._execute(operation, path_args={"ids": checked})
