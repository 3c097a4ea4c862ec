"""Normalize any raised value into an :class:`ApiError`."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, NoReturn

import httpx

from .exceptions import (
    DEFAULT_ERROR_MESSAGE,
    ApiError,
    AuthError,
    RequestTimeoutError,
    TransportError,
)


def raise_api_error(error: object, context: str | None = None) -> NoReturn:
    """Raise ``error`` as an :class:`ApiError`, prefixing ``[context]`` when given.

    This never returns. Errors that are already typed keep their class,
    status and data; only the message gains the context label.
    """
    normalized = _normalize(error)
    if context:
        normalized = type(normalized)(
            f"[{context}] {normalized.message}",
            normalized.status,
            normalized.data,
        )
    if normalized is error:
        raise normalized
    if isinstance(error, BaseException):
        raise normalized from error
    raise normalized


def _normalize(error: object) -> ApiError:
    if isinstance(error, ApiError):
        return error
    if isinstance(error, httpx.HTTPStatusError):
        return _from_response(error.response, fallback=str(error))
    if isinstance(error, httpx.TimeoutException):
        return RequestTimeoutError(_message_or_default(str(error)))
    if isinstance(error, httpx.HTTPError):
        return TransportError(_message_or_default(str(error)))
    if isinstance(error, Exception):
        return ApiError(_message_or_default(str(error)))
    if isinstance(error, Mapping):
        return _from_mapping(error)
    if isinstance(error, str):
        return ApiError(_message_or_default(error))
    if error is None:
        return ApiError(DEFAULT_ERROR_MESSAGE)
    return ApiError(_message_or_default(str(error)))


def _from_response(response: httpx.Response, *, fallback: str) -> ApiError:
    data = _response_body(response)
    message = _body_message(data) or _message_or_default(fallback)
    error_type = AuthError if response.status_code == 401 else TransportError
    return error_type(message, response.status_code, data)


def _from_mapping(error: Mapping[Any, Any]) -> ApiError:
    response = error.get("response")
    if isinstance(response, Mapping):
        data = response.get("data")
        message = _body_message(data)
        if message:
            status = response.get("status")
            return ApiError(message, status if isinstance(status, int) else None, data)

    message = error.get("message")
    if isinstance(message, str) and message:
        return ApiError(message)

    try:
        serialized = json.dumps(error)
    except (TypeError, ValueError):
        serialized = ""
    return ApiError(_message_or_default(serialized))


def _response_body(response: httpx.Response) -> Any:
    text = response.text
    if not text.strip():
        return None
    try:
        return response.json()
    except ValueError:
        return text


def _body_message(data: Any) -> str | None:
    if not isinstance(data, Mapping):
        return None
    message = data.get("message")
    if isinstance(message, str) and message:
        return message
    errors = data.get("errors")
    if isinstance(errors, list) and errors:
        first = errors[0]
        if isinstance(first, Mapping):
            nested = first.get("message")
            if isinstance(nested, str) and nested:
                return nested
    return None


def _message_or_default(message: str) -> str:
    return message if message.strip() else DEFAULT_ERROR_MESSAGE
