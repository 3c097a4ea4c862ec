"""Shared request helpers for resource facades."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter

from gptzator.client.http import AuthenticatedTransport


class ResourceApi:
    """Stateless facade over one group of remote endpoints."""

    def __init__(self, transport: AuthenticatedTransport) -> None:
        self._transport = transport

    async def _fetch(
        self,
        response_type: Any,
        method: str,
        path: str,
        *,
        unwrap: str | None = None,
        params: Mapping[str, Any] | None = None,
        json: Any | None = None,
        files: Any | None = None,
    ) -> Any:
        """Request ``path`` and validate the (optionally unwrapped) body as ``response_type``."""
        payload = await self._transport.request_json(
            method,
            path,
            params=params,
            json=json,
            files=files,
        )
        if unwrap is not None:
            if not isinstance(payload, dict) or unwrap not in payload:
                raise ValueError(f"response is missing the {unwrap!r} field")
            payload = payload[unwrap]
        if response_type is None:
            return payload
        return _adapter(response_type).validate_python(payload)


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def where_equals(field: str, value: Any) -> dict[str, Any]:
    """Build a ``where[field][equals]=value`` filter."""
    return {"where": {field: {"equals": value}}}


def where_in(field: str, values: list[str]) -> dict[str, Any]:
    """Build a ``where[field][in][i]=value`` filter."""
    return {"where": {field: {"in": list(values)}}}


def drop_none(values: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}
