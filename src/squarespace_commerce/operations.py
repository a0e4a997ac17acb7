"""Declarative description of a single Commerce API call."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from urllib.parse import quote

from pydantic import BaseModel

from .config import API_VERSION
from .exceptions import ValidationError


def quote_segment(value: str) -> str:
    """Escape ``value`` so it stays a single path segment."""

    if value in (".", ".."):
        raise ValidationError(f"path identifier cannot be '{value}'")
    return quote(value, safe="")


@dataclass(frozen=True, slots=True)
class Operation:
    """One remote endpoint: how to reach it and what counts as success.

    ``response_model`` is None for endpoints that answer without a body; the
    caller then receives the status code.
    """

    name: str
    method: str
    path: str
    expected_status: int
    response_model: type[BaseModel] | None = None
    idempotent: bool = False
    version: str = API_VERSION

    def render_path(self, **path_args: str | Sequence[str]) -> str:
        """Fill the path template; id lists become one comma separated segment."""

        rendered: dict[str, str] = {}
        for key, value in path_args.items():
            if isinstance(value, str):
                rendered[key] = quote_segment(value)
            else:
                rendered[key] = ",".join(quote_segment(item) for item in value)
        return self.path.format(**rendered)
