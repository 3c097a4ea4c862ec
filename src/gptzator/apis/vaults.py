"""Vaults (knowledge stores) and their tags."""

from __future__ import annotations

from typing import Any

from gptzator.client.call import api_call
from gptzator.schemas import Collection, Tag, Vault

from .base import ResourceApi, drop_none, where_equals, where_in


class VaultsApi(ResourceApi):
    async def get_vaults(
        self,
        *,
        page: int,
        tag: str | None = None,
        search: str | None = None,
        vaults_per_page: int | None = None,
    ) -> Collection[Vault]:
        params = drop_none({"page": page, "tag": tag, "search": search, "vaultsPerPage": vaults_per_page})
        return await api_call(
            "VaultsApi.get_vaults",
            lambda: self._fetch(Collection[Vault], "GET", "vaults", params=params),
        )

    async def get_vault(self, vault_id: str) -> Vault:
        return await api_call(
            "VaultsApi.get_vault",
            lambda: self._fetch(Vault, "GET", f"vaults/{vault_id}"),
        )

    async def get_vaults_by_ids(self, ids: list[str]) -> Collection[Vault]:
        return await api_call(
            "VaultsApi.get_vaults_by_ids",
            lambda: self._fetch(Collection[Vault], "GET", "vaults", params=where_in("id", ids)),
        )

    async def get_favourite_vaults(self) -> list[Vault]:
        return await api_call("VaultsApi.get_favourite_vaults", self._favourite_vaults)

    async def update_is_favourite_vault(self, vault_id: str, is_favourite: bool) -> None:
        method = "POST" if is_favourite else "DELETE"
        await api_call(
            "VaultsApi.update_is_favourite_vault",
            lambda: self._fetch(None, method, f"users/me/favorites/vaults/{vault_id}"),
        )

    async def get_vault_tags(self) -> Collection[Tag]:
        return await api_call(
            "VaultsApi.get_vault_tags",
            lambda: self._fetch(Collection[Tag], "GET", "vaults_tags", params={"page": 1}),
        )

    async def create_vault(self, data: dict[str, Any]) -> Vault:
        return await api_call(
            "VaultsApi.create_vault",
            lambda: self._fetch(Vault, "POST", "vaults", params={"depth": 0}, json=data, unwrap="doc"),
        )

    async def edit_vault(self, vault_id: str, data: dict[str, Any]) -> Vault:
        body = {key: value for key, value in data.items() if key != "id"}
        return await api_call(
            "VaultsApi.edit_vault",
            lambda: self._fetch(Vault, "PATCH", f"vaults/{vault_id}", json=body, unwrap="doc"),
        )

    async def delete_vault(self, vault_id: str) -> Collection[Vault]:
        return await api_call(
            "VaultsApi.delete_vault",
            lambda: self._fetch(Collection[Vault], "DELETE", "vaults", params=where_equals("id", vault_id)),
        )

    async def _favourite_vaults(self) -> list[Vault]:
        user = await self._fetch(None, "GET", "users/me", unwrap="user")
        favourites = user.get("favoriteVaults") if isinstance(user, dict) else None
        return [Vault.model_validate(item) for item in favourites or []]
