"""HTTP utilities for Squarespace Commerce API access."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

import requests
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from requests import Response, Session

from .exceptions import APIError, RequestError, UnexpectedResponseError


@dataclass(slots=True)
class HttpResponse:
    """Buffered response envelope."""

    status_code: int
    content: bytes
    headers: Mapping[str, str]


class ErrorBody(BaseModel):
    """Uniform error document returned by the Commerce APIs."""

    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    subtype: str | None = None
    message: str | None = None
    detail: str | None = None


def parse_error_response(endpoint: str, url: str, body: bytes, status_code: int) -> APIError:
    """Turn a failure response into a descriptive `APIError`.

    Bodies that are not a JSON error document are not echoed back; only the
    endpoint and status are reported.
    """

    try:
        error = ErrorBody.model_validate_json(body or b"")
    except PydanticValidationError:
        return APIError(
            f"{endpoint}: error unmarshalling response body: status: {status_code}",
            endpoint=endpoint,
            url=url,
            status_code=status_code,
            body=body,
        )

    text = f"{endpoint} url: {url}: status: {status_code}, type: {error.type or ''}"
    if error.subtype:
        text += f", subtype: {error.subtype}"
    text += f", message: {error.message or ''}"
    if error.detail:
        text += f", detail: {error.detail}"

    return APIError(
        text,
        endpoint=endpoint,
        url=url,
        status_code=status_code,
        type=error.type,
        subtype=error.subtype or None,
        message=error.message,
        detail=error.detail or None,
        body=body,
    )


def ensure_status(response: HttpResponse, expected: int, *, endpoint: str, url: str) -> None:
    """Raise `APIError` unless the response carries the ``expected`` status."""

    if response.status_code == expected:
        return
    raise parse_error_response(endpoint, url, response.content, response.status_code)


def decode_model(model: type[BaseModel], content: bytes, *, endpoint: str) -> Any:
    """Decode a success body into ``model`` with helpful error context."""

    try:
        return model.model_validate_json(content)
    except PydanticValidationError as exc:
        raise UnexpectedResponseError(
            f"{endpoint}: failed to unmarshal response body: {exc}",
            details=content,
        ) from exc


def request(
    session: Session,
    method: str,
    url: str,
    *,
    endpoint: str,
    params: Mapping[str, str] | None = None,
    headers: MutableMapping[str, str] | None = None,
    json_payload: Any | None = None,
    data: Any | None = None,
    timeout: float | tuple[float, float] | None = None,
    verify: bool | str = True,
) -> HttpResponse:
    """Make a request and return the fully buffered response."""

    try:
        response: Response = session.request(
            method=method,
            url=url,
            params=params,
            headers=headers,
            json=json_payload,
            data=data,
            timeout=timeout,
            verify=verify,
        )
    except requests.RequestException as exc:
        reason = str(exc).strip() or exc.__class__.__name__
        raise RequestError(
            f"{endpoint}: failed to communicate with Squarespace API: {reason}",
            details=reason,
        ) from exc

    try:
        return HttpResponse(
            status_code=response.status_code,
            content=response.content,
            headers=response.headers,
        )
    finally:
        response.close()
