"""Authenticated async HTTP transport with single-flight token refresh."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections import deque
from collections.abc import Mapping
from typing import Any, NoReturn

import httpx

from .errors import raise_api_error
from .exceptions import ApiError
from .query import encode_query
from .tokens import AuthFailedHook, InMemoryTokenStorage, RefreshFn, Tokens, TokenStorage

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.dev.gpt-zator.ladcloud.ru/api/"
DEFAULT_TIMEOUT_MS = 30_000


class AuthenticatedTransport:
    """Wrap ``httpx.AsyncClient`` with bearer auth and 401 refresh-and-retry.

    At most one refresh runs at a time per transport. Requests that hit a 401
    while it runs wait in FIFO order and are resubmitted once after it settles.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        token_storage: TokenStorage | None = None,
        refresh_fn: RefreshFn | None = None,
        on_auth_failed: AuthFailedHook | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        transport: httpx.AsyncBaseTransport | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._token_storage = token_storage if token_storage is not None else InMemoryTokenStorage()
        self._refresh_fn = refresh_fn
        self._on_auth_failed = on_auth_failed
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_ms / 1000,
            transport=transport,
            headers={"Accept": "application/json", **(headers or {})},
        )
        self._refreshing = False
        self._waiters: deque[asyncio.Future[None]] = deque()

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    @property
    def token_storage(self) -> TokenStorage:
        return self._token_storage

    @property
    def is_refreshing(self) -> bool:
        return self._refreshing

    def get_tokens(self) -> Tokens | None:
        return self._token_storage.get()

    def set_tokens(self, tokens: Tokens | None) -> None:
        self._token_storage.set(tokens)

    async def aclose(self) -> None:
        await self._client.aclose()

    def build_request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any | None = None,
        data: Mapping[str, Any] | None = None,
        files: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Request:
        query = encode_query(params)
        url = f"{path}?{query}" if query else path
        return self._client.build_request(
            method,
            url,
            json=json,
            data=data,
            files=files,
            headers=headers,
        )

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any | None = None,
        data: Mapping[str, Any] | None = None,
        files: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send one request, raising ``ApiError`` for any failure."""
        request = self.build_request(
            method,
            path,
            params=params,
            json=json,
            data=data,
            files=files,
            headers=headers,
        )
        # Buffer the body so a retry after refresh can replay it.
        await request.aread()
        return await self.send(request)

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any | None = None,
        data: Mapping[str, Any] | None = None,
        files: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send one request and decode its JSON body (``None`` when empty)."""
        response = await self.request(
            method,
            path,
            params=params,
            json=json,
            data=data,
            files=files,
            headers=headers,
        )
        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(
                "server returned non-JSON response",
                response.status_code,
                response.text,
            ) from exc

    async def get(self, path: str, **kwargs: Any) -> Any:
        return await self.request_json("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> Any:
        return await self.request_json("POST", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> Any:
        return await self.request_json("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> Any:
        return await self.request_json("DELETE", path, **kwargs)

    async def send(self, request: httpx.Request, *, retried: bool = False) -> httpx.Response:
        """Authorize and send ``request``; ``retried`` marks the post-refresh resubmission."""
        sent_token = self._authorize(request)
        logger.debug("%s %s (retried=%s)", request.method, request.url.path, retried)
        try:
            response = await self._client.send(request)
        except httpx.HTTPError as exc:
            raise_api_error(exc)

        if response.status_code == 401 and self._refresh_fn is not None:
            return await self._handle_unauthorized(
                request,
                response,
                sent_token=sent_token,
                retried=retried,
            )
        if response.is_error:
            _raise_status_error(response)
        return response

    def _authorize(self, request: httpx.Request) -> str | None:
        """Attach the current bearer token and return the access token used."""
        tokens = self._token_storage.get()
        if tokens is not None and tokens.access_token:
            request.headers["Authorization"] = f"Bearer {tokens.access_token}"
            return tokens.access_token
        if "Authorization" in request.headers:
            del request.headers["Authorization"]
        return None

    async def _handle_unauthorized(
        self,
        request: httpx.Request,
        response: httpx.Response,
        *,
        sent_token: str | None,
        retried: bool,
    ) -> httpx.Response:
        if retried:
            logger.warning("request %s still unauthorized after refresh", request.url.path)
            await self._notify_auth_failed()
            _raise_status_error(response)

        if self._refreshing:
            waiter: asyncio.Future[None] = asyncio.get_running_loop().create_future()
            self._waiters.append(waiter)
            await waiter
            return await self.send(request, retried=True)

        # Tokens were replaced after this request went out; the 401 is stale.
        current = self._token_storage.get()
        if current is not None and current.access_token != sent_token:
            logger.debug("request %s used a superseded token; resubmitting", request.url.path)
            return await self.send(request, retried=True)

        self._refreshing = True
        try:
            await self._refresh_tokens(response)
        finally:
            self._refreshing = False
            self._release_waiters()
        return await self.send(request, retried=True)

    async def _refresh_tokens(self, response: httpx.Response) -> None:
        assert self._refresh_fn is not None
        tokens = self._token_storage.get()
        if tokens is None or not tokens.refresh_token:
            logger.warning("received 401 without a refresh token; authentication failed")
            await self._notify_auth_failed()
            _raise_status_error(response)

        logger.debug("refreshing access token")
        try:
            new_tokens = await self._refresh_fn(tokens.refresh_token)
        except Exception as exc:
            logger.warning("token refresh failed: %s", exc)
            await self._notify_auth_failed()
            _raise_status_error(response)
        self._token_storage.set(new_tokens)
        logger.info("access token refreshed")

    def _release_waiters(self) -> None:
        while self._waiters:
            waiter = self._waiters.popleft()
            if not waiter.done():
                waiter.set_result(None)

    async def _notify_auth_failed(self) -> None:
        if self._on_auth_failed is None:
            return
        try:
            result = self._on_auth_failed()
            if inspect.isawaitable(result):
                await result
        except Exception as exc:
            logger.warning("auth failure hook raised: %s", exc)


def _raise_status_error(response: httpx.Response) -> NoReturn:
    message = f"HTTP {response.status_code} {response.reason_phrase} for url '{response.url}'"
    raise_api_error(
        httpx.HTTPStatusError(message, request=response.request, response=response),
    )
