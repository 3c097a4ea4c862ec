"""Tests for resource facades and the top-level client."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from gptzator import GptzatorClient
from gptzator.client import ApiError, InMemoryTokenStorage, Tokens, TransportError
from gptzator.config import ClientSettings
from gptzator.schemas import Collection, Model, Project, Vault


class _Recorder:
    """Answer every request with a canned JSON payload keyed by ``METHOD path``."""

    def __init__(self, routes: dict[str, Any]) -> None:
        self._routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = f"{request.method} {request.url.path}"
        if key not in self._routes:
            return httpx.Response(404, json={"message": f"no route for {key}"})
        route = self._routes[key]
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, json=route)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_params(self) -> dict[str, str]:
        return dict(self.last.url.params.multi_items())


def _client(routes: dict[str, Any], **kwargs: Any) -> tuple[GptzatorClient, _Recorder]:
    recorder = _Recorder(routes)
    client = GptzatorClient(
        "https://api.example.test/api/",
        transport=httpx.MockTransport(recorder),
        **kwargs,
    )
    return client, recorder


def _page(*docs: dict[str, Any]) -> dict[str, Any]:
    return {"docs": list(docs), "totalDocs": len(docs), "page": 1, "hasNextPage": False}


@pytest.mark.asyncio
async def test_login_stores_tokens_used_by_later_requests() -> None:
    client, recorder = _client(
        {
            "POST /api/users/login": {
                "user": {"id": "u1", "email": "me@example.com"},
                "token": "t1",
                "refreshToken": "r1",
            },
            "GET /api/users/me": {"user": {"id": "u1", "firstName": "Ada"}},
        },
    )

    result = await client.user.login_user("me@example.com", "secret")
    user = await client.user.get_user()

    assert result.token == "t1"
    assert result.user is not None and result.user.email == "me@example.com"
    assert client.get_tokens() == Tokens(access_token="t1", refresh_token="r1")
    assert json.loads(recorder.requests[0].content) == {"email": "me@example.com", "password": "secret"}
    assert recorder.last.headers["Authorization"] == "Bearer t1"
    assert user.first_name == "Ada"


@pytest.mark.asyncio
async def test_login_without_token_is_an_error_and_keeps_tokens() -> None:
    client, _ = _client({"POST /api/users/login": {"user": {"id": "u1"}}})

    with pytest.raises(ApiError) as exc_info:
        await client.user.login_user("me@example.com", "secret")

    assert exc_info.value.message == "[UserApi.login_user] login failed: token not returned"
    assert client.get_tokens() is None


@pytest.mark.asyncio
async def test_logout_clears_tokens_even_when_remote_call_fails() -> None:
    client, _ = _client({"POST /api/users/logout": httpx.Response(500, json={"message": "down"})})
    client.set_tokens(Tokens(access_token="t1", refresh_token="r1"))

    with pytest.raises(TransportError) as exc_info:
        await client.user.logout_user()

    assert exc_info.value.message == "[UserApi.logout_user] down"
    assert client.get_tokens() is None


@pytest.mark.asyncio
async def test_signup_sends_optional_fields_only_when_given() -> None:
    client, recorder = _client({"POST /api/users/register": {"user": {"id": "u1"}, "token": "t1"}})

    await client.user.signup_user(email="a@b.c", password="pw", policy=True, phone="+100", promo_code="SPRING")

    assert json.loads(recorder.last.content) == {
        "email": "a@b.c",
        "password": "pw",
        "policy": True,
        "phone": "+100",
        "promoCode": "SPRING",
    }
    assert client.get_tokens() == Tokens(access_token="t1")


@pytest.mark.asyncio
async def test_collection_reads_decode_pagination_envelope() -> None:
    client, recorder = _client({"GET /api/vaults": _page({"id": "v1", "name": "Docs"})})

    vaults = await client.vaults.get_vaults(page=2, search="Do")

    assert isinstance(vaults, Collection)
    assert vaults.total_docs == 1
    assert vaults.has_next_page is False
    assert vaults.docs == [Vault.model_validate({"id": "v1", "name": "Docs"})]
    assert recorder.last_params() == {"page": "2", "search": "Do"}


@pytest.mark.asyncio
async def test_by_ids_filters_use_indexed_brackets() -> None:
    client, recorder = _client({"GET /api/files": _page()})

    await client.files.get_files_by_ids(["a", "b"])

    assert recorder.last_params() == {"where[id][in][0]": "a", "where[id][in][1]": "b"}


@pytest.mark.asyncio
async def test_models_unwrap_docs_and_filter_active() -> None:
    client, recorder = _client({"GET /api/models": _page({"id": "m1", "name": "gpt", "active": True})})

    models = await client.models.get_active_models()

    assert models == [Model(id="m1", name="gpt", active=True)]
    assert recorder.last_params() == {"limit": "20", "where[active][equals]": "true"}


@pytest.mark.asyncio
async def test_missing_envelope_field_is_reported_with_context() -> None:
    client, _ = _client({"GET /api/llm_models": {"items": []}})

    with pytest.raises(ApiError) as exc_info:
        await client.models.get_llm_models()

    assert exc_info.value.message == "[ModelsApi.get_llm_models] response is missing the 'docs' field"
    assert exc_info.value.status is None


@pytest.mark.asyncio
async def test_invites_list_skips_empty_search() -> None:
    client, recorder = _client({"GET /api/orgs_invites": _page({"id": "i1", "email": "x@y.z"})})

    invites = await client.invites.get_invites_list(page=1)

    assert invites.docs[0].id == "i1"
    assert recorder.last_params() == {"page": "1", "depth": "0"}


@pytest.mark.parametrize(("has_blocks", "suffix"), [(True, "generateBlocks"), (False, "generate")])
@pytest.mark.asyncio
async def test_generate_artefact_picks_endpoint(has_blocks: bool, suffix: str) -> None:
    client, recorder = _client({f"POST /api/projects/p1/{suffix}": [{"id": "a1"}]})

    artefacts = await client.projects.generate_artefact("p1", has_blocks)

    assert [artefact.id for artefact in artefacts] == ["a1"]
    assert recorder.last.url.path == f"/api/projects/p1/{suffix}"


@pytest.mark.asyncio
async def test_favourite_vaults_come_from_current_user() -> None:
    client, _ = _client({"GET /api/users/me": {"user": {"id": "u1", "favoriteVaults": [{"id": "v1"}]}}})

    assert await client.vaults.get_favourite_vaults() == [Vault(id="v1")]


@pytest.mark.asyncio
async def test_favourite_vaults_default_to_empty_list() -> None:
    client, _ = _client({"GET /api/users/me": {"user": {"id": "u1"}}})

    assert await client.vaults.get_favourite_vaults() == []


@pytest.mark.asyncio
async def test_favourite_toggles_choose_method() -> None:
    client, recorder = _client(
        {
            "POST /api/users/me/favorites/vaults/v1": {},
            "DELETE /api/users/me/favorites/vaults/v1": {},
            "POST /api/users/favourites": {},
            "DELETE /api/users/favourites/a1": {},
        },
    )

    await client.vaults.update_is_favourite_vault("v1", True)
    await client.vaults.update_is_favourite_vault("v1", False)
    await client.apps.update_is_favourite("a1", True)
    await client.apps.update_is_favourite("a1", False)

    assert [f"{request.method} {request.url.path}" for request in recorder.requests] == [
        "POST /api/users/me/favorites/vaults/v1",
        "DELETE /api/users/me/favorites/vaults/v1",
        "POST /api/users/favourites",
        "DELETE /api/users/favourites/a1",
    ]
    assert json.loads(recorder.requests[2].content) == {"id": "a1"}


@pytest.mark.asyncio
async def test_edit_vault_drops_id_from_body() -> None:
    client, recorder = _client({"PATCH /api/vaults/v1": {"doc": {"id": "v1", "name": "Renamed"}}})

    vault = await client.vaults.edit_vault("v1", {"id": "v1", "name": "Renamed"})

    assert vault.name == "Renamed"
    assert json.loads(recorder.last.content) == {"name": "Renamed"}


@pytest.mark.asyncio
async def test_upload_sends_multipart_body() -> None:
    client, recorder = _client({"POST /api/files": {"doc": {"id": "f1"}}})

    result = await client.files.upload_file({"file": ("notes.txt", b"hello", "text/plain")})

    assert result == {"doc": {"id": "f1"}}
    assert recorder.last.headers["Content-Type"].startswith("multipart/form-data")
    assert b"hello" in recorder.last.content


@pytest.mark.asyncio
async def test_sources_and_workspaces_paths() -> None:
    client, recorder = _client(
        {
            "GET /api/assistant__sources": _page(),
            "POST /api/assistant/workspaces/w1/sources": {"id": "s1"},
            "GET /api/assistant/workspaces/w1/tree": {"id": "w1", "children": []},
        },
    )

    await client.sources.get_sources(ids=["s1"], search="faq")
    assert recorder.last_params() == {
        "limit": "50",
        "page": "1",
        "id[in][0]": "s1",
        "name[contains]": "faq",
    }

    await client.sources.create_source("w1", "f1")
    assert json.loads(recorder.last.content) == {"fileId": "f1"}

    await client.workspaces.get_workspace_sources_tree("w1")
    assert recorder.last.url.path == "/api/assistant/workspaces/w1/tree"


@pytest.mark.asyncio
async def test_repeated_reads_of_unchanged_state_are_equal() -> None:
    client, _ = _client({"GET /api/projects/p1": {"id": "p1", "generating": False, "name": "Haiku"}})

    first = await client.projects.get_project("p1")
    second = await client.projects.get_project("p1")

    assert first == second
    assert isinstance(first, Project)


@pytest.mark.asyncio
async def test_clients_do_not_share_tokens() -> None:
    first, first_recorder = _client({"GET /api/threads/t1": {"id": "t1"}})
    second, second_recorder = _client({"GET /api/threads/t1": {"id": "t1"}})
    first.set_tokens(Tokens(access_token="one"))

    await first.threads.get_thread_by_id("t1")
    await second.threads.get_thread_by_id("t1")

    assert first_recorder.last.headers["Authorization"] == "Bearer one"
    assert "Authorization" not in second_recorder.last.headers
    assert second.get_tokens() is None


def test_explicit_arguments_override_settings() -> None:
    storage = InMemoryTokenStorage()
    settings = ClientSettings(base_url="https://settings.example.test/api/", timeout_ms=1000)

    from_settings = GptzatorClient(settings=settings, token_storage=storage)
    explicit = GptzatorClient("https://explicit.example.test/api/", settings=settings)

    assert from_settings.http.base_url == "https://settings.example.test/api/"
    assert from_settings.http.token_storage is storage
    assert explicit.http.base_url == "https://explicit.example.test/api/"


def test_from_env_reads_base_url(monkeypatch) -> None:
    monkeypatch.setenv("GPTZATOR_BASE_URL", "https://env.example.test/api/")

    client = GptzatorClient.from_env()

    assert client.http.base_url == "https://env.example.test/api/"


@pytest.mark.asyncio
async def test_async_context_manager_closes_transport() -> None:
    recorder = _Recorder({"GET /api/products": _page()})

    async with GptzatorClient(transport=httpx.MockTransport(recorder)) as client:
        products = await client.subscribes.get_products()

    assert products.docs == []
    with pytest.raises(RuntimeError):
        await client.http.get("products")
