"""Uniform error contract for domain calls."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar

from .errors import raise_api_error

T = TypeVar("T")


async def api_call(context: str, operation: Callable[[], Awaitable[T]]) -> T:
    """Await ``operation`` and re-raise any failure as an ``ApiError`` tagged with ``context``."""
    try:
        return await operation()
    except Exception as exc:
        raise_api_error(exc, context)
