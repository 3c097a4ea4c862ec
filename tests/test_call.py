"""Tests for the domain call wrapper."""

from __future__ import annotations

import asyncio

import pytest

from gptzator.client import ApiError, TransportError, api_call


@pytest.mark.asyncio
async def test_api_call_returns_result_unchanged() -> None:
    payload = {"id": "p1"}

    async def operation() -> dict[str, str]:
        return payload

    assert await api_call("Ctx.op", operation) is payload


@pytest.mark.asyncio
async def test_api_call_normalizes_with_context() -> None:
    async def operation() -> None:
        raise KeyError("docs")

    with pytest.raises(ApiError) as exc_info:
        await api_call("Ctx.op", operation)

    assert exc_info.value.message == "[Ctx.op] 'docs'"


@pytest.mark.asyncio
async def test_api_call_keeps_transport_status() -> None:
    async def operation() -> None:
        raise TransportError("down", 503, {"message": "down"})

    with pytest.raises(TransportError) as exc_info:
        await api_call("Ctx.op", operation)

    assert exc_info.value.status == 503
    assert exc_info.value.message == "[Ctx.op] down"


@pytest.mark.asyncio
async def test_api_call_lets_cancellation_through() -> None:
    async def operation() -> None:
        raise asyncio.CancelledError

    with pytest.raises(asyncio.CancelledError):
        await api_call("Ctx.op", operation)
