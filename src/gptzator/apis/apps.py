"""Applications (skills), their menu, tags, OAuth clients and settings templates."""

from __future__ import annotations

from typing import Any

from gptzator.client.call import api_call
from gptzator.schemas import App, AppsMenuItem, Collection, OauthClient, SettingsTemplate, Tag

from .base import ResourceApi, where_equals

DEFAULT_APP_NAME = "New skill"
TAGS_PER_PAGE = 50


class AppsApi(ResourceApi):
    async def get_apps(
        self,
        *,
        page: int,
        tag: str | None = None,
        search: str | None = None,
        author: str | None = None,
        apps_per_page: int | None = None,
    ) -> Collection[App]:
        params: dict[str, Any] = {"name": {"contains": search}, "limit": apps_per_page, "page": page}
        if tag:
            params["tags"] = {"equals": tag}
        if author:
            params["author"] = {"equals": author}
        return await api_call(
            "AppsApi.get_apps",
            lambda: self._fetch(Collection[App], "GET", "/apps", params=params),
        )

    async def create_app(self, author: str, name: str = DEFAULT_APP_NAME) -> App:
        return await api_call(
            "AppsApi.create_app",
            lambda: self._fetch(
                App,
                "POST",
                "/apps",
                params={"depth": 0},
                json={"author": author, "name": name},
                unwrap="doc",
            ),
        )

    async def update_app(self, app_id: str, data: dict[str, Any]) -> App:
        return await api_call(
            "AppsApi.update_app",
            lambda: self._fetch(App, "PATCH", f"/apps/{app_id}", params={"depth": 0}, json=data),
        )

    async def delete_app(self, app_id: str) -> Collection[App]:
        return await api_call(
            "AppsApi.delete_app",
            lambda: self._fetch(Collection[App], "DELETE", "/apps", params=where_equals("id", app_id)),
        )

    async def get_app_by_id(self, app_id: str) -> App:
        return await api_call(
            "AppsApi.get_app_by_id",
            lambda: self._fetch(App, "GET", f"/apps/{app_id}", params={"depth": 0}),
        )

    async def get_oauth_clients(self, redirect_uri: str) -> list[OauthClient]:
        return await api_call(
            "AppsApi.get_oauth_clients",
            lambda: self._fetch(
                list[OauthClient],
                "GET",
                "/oauth_clients/oauth/clients",
                params={"redirectUri": redirect_uri},
                unwrap="clients",
            ),
        )

    async def logout_oauth_client(self, client_id: str) -> None:
        await api_call(
            "AppsApi.logout_oauth_client",
            lambda: self._fetch(None, "POST", f"/oauth_clients/oauth/clients/{client_id}/logout"),
        )

    async def get_apps_menu(self) -> list[AppsMenuItem]:
        return await api_call(
            "AppsApi.get_apps_menu",
            lambda: self._fetch(list[AppsMenuItem], "GET", "/apps_menu/tree", unwrap="menu"),
        )

    async def get_favourite_apps(self) -> list[App]:
        return await api_call(
            "AppsApi.get_favourite_apps",
            lambda: self._fetch(list[App], "GET", "/apps/favourites", params={"depth": 0}),
        )

    async def update_is_favourite(self, app_id: str, is_favourite: bool) -> None:
        await api_call(
            "AppsApi.update_is_favourite",
            lambda: self._set_favourite(app_id, is_favourite),
        )

    async def get_tags(self) -> Collection[Tag]:
        return await api_call(
            "AppsApi.get_tags",
            lambda: self._fetch(Collection[Tag], "GET", "/tags", params={"limit": TAGS_PER_PAGE, "page": 1}),
        )

    async def get_settings_templates(
        self,
        *,
        app_id: str,
        page: int,
        search: str | None = None,
        templates_per_page: int | None = None,
    ) -> Collection[SettingsTemplate]:
        params: dict[str, Any] = {"app": {"equals": app_id}, "limit": templates_per_page, "page": page}
        if search:
            params["name"] = {"contains": search}
        return await api_call(
            "AppsApi.get_settings_templates",
            lambda: self._fetch(Collection[SettingsTemplate], "GET", "/apps_settings", params=params),
        )

    async def activate_template(self, template_id: str) -> SettingsTemplate:
        return await api_call(
            "AppsApi.activate_template",
            lambda: self._fetch(SettingsTemplate, "POST", f"/apps_settings/{template_id}/activate"),
        )

    async def create_settings_template(self, data: dict[str, Any]) -> SettingsTemplate:
        return await api_call(
            "AppsApi.create_settings_template",
            lambda: self._fetch(SettingsTemplate, "POST", "/apps_settings", json=data),
        )

    async def update_settings_template(self, template_id: str, data: dict[str, Any]) -> SettingsTemplate:
        return await api_call(
            "AppsApi.update_settings_template",
            lambda: self._fetch(
                SettingsTemplate,
                "PATCH",
                f"/apps_settings/{template_id}",
                params={"depth": 0},
                json=data,
            ),
        )

    async def delete_settings_template(self, template_id: str) -> None:
        await api_call(
            "AppsApi.delete_settings_template",
            lambda: self._fetch(None, "DELETE", "/apps_settings", params=where_equals("id", template_id)),
        )

    async def _set_favourite(self, app_id: str, is_favourite: bool) -> None:
        if is_favourite:
            await self._transport.request_json("POST", "/users/favourites", json={"id": app_id})
        else:
            await self._transport.request_json("DELETE", f"/users/favourites/{app_id}")
