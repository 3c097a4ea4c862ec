"""High-level async client bundling every resource facade over one transport."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from gptzator.apis import (
    ApiTemplatesApi,
    AppsApi,
    AssistantsApi,
    FilesApi,
    InvitesApi,
    ModelsApi,
    ProjectsApi,
    SourcesApi,
    SubscribesApi,
    ThreadAssistantApi,
    ThreadsApi,
    UserApi,
    VaultsApi,
    WorkspacesApi,
)
from gptzator.client import AuthenticatedTransport, AuthFailedHook, RefreshFn, Tokens, TokenStorage
from gptzator.config import ClientSettings

logger = logging.getLogger(__name__)


class GptzatorClient:
    """Authenticated entry point to the platform API.

    Each instance owns its own transport, token storage and refresh state, so
    several clients can run side by side in one process. Explicit constructor
    arguments take precedence over ``settings``.

    Example::

        async with GptzatorClient() as client:
            await client.user.login_user("me@example.com", "secret")
            project = await client.projects.call_app(app_id, "Write a haiku")
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        token_storage: TokenStorage | None = None,
        refresh_fn: RefreshFn | None = None,
        on_auth_failed: AuthFailedHook | None = None,
        timeout_ms: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        settings: ClientSettings | None = None,
    ) -> None:
        resolved = settings if settings is not None else ClientSettings()
        self.http = AuthenticatedTransport(
            base_url if base_url is not None else resolved.base_url,
            token_storage=token_storage,
            refresh_fn=refresh_fn,
            on_auth_failed=on_auth_failed,
            timeout_ms=timeout_ms if timeout_ms is not None else resolved.timeout_ms,
            transport=transport,
        )
        logger.debug("gptzator client created for %s", self.http.base_url)

        self.user = UserApi(self.http)
        self.apps = AppsApi(self.http)
        self.projects = ProjectsApi(self.http)
        self.threads = ThreadsApi(self.http)
        self.assistants = AssistantsApi(self.http)
        self.thread_assistant = ThreadAssistantApi(self.http)
        self.api_templates = ApiTemplatesApi(self.http)
        self.files = FilesApi(self.http)
        self.models = ModelsApi(self.http)
        self.invites = InvitesApi(self.http)
        self.sources = SourcesApi(self.http)
        self.subscribes = SubscribesApi(self.http)
        self.vaults = VaultsApi(self.http)
        self.workspaces = WorkspacesApi(self.http)

    @classmethod
    def from_env(cls, **kwargs: Any) -> GptzatorClient:
        """Create a client with defaults read from ``GPTZATOR_*`` environment variables."""
        return cls(settings=ClientSettings.from_env(), **kwargs)

    def set_tokens(self, tokens: Tokens | None) -> None:
        self.http.set_tokens(tokens)

    def get_tokens(self) -> Tokens | None:
        return self.http.get_tokens()

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> GptzatorClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()
