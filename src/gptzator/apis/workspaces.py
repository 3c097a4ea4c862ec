"""Assistant workspaces and the knowledge sources inside them."""

from __future__ import annotations

from typing import Any

from gptzator.client.call import api_call
from gptzator.schemas import Collection, Source, Workspace, WorkspaceList, WorkspaceTree

from .base import ResourceApi, drop_none

SOURCES_PER_PAGE = 50


class WorkspacesApi(ResourceApi):
    async def get_workspaces(self, search: str | None = None) -> WorkspaceList:
        return await api_call(
            "WorkspacesApi.get_workspaces",
            lambda: self._fetch(WorkspaceList, "GET", "/assistant/workspaces", params={"search": search}),
        )

    async def create_workspace(
        self,
        name: str,
        *,
        description: str | None = None,
        instructions: str | None = None,
    ) -> Workspace:
        body = drop_none({"name": name, "description": description, "instructions": instructions})
        return await api_call(
            "WorkspacesApi.create_workspace",
            lambda: self._fetch(Workspace, "POST", "assistant__workspaces", params={"depth": 0}, json=body),
        )

    async def update_workspace(
        self,
        workspace_id: str,
        *,
        name: str,
        description: str,
        instructions: str | None = None,
    ) -> Workspace:
        body = drop_none({"name": name, "description": description, "instructions": instructions})
        return await api_call(
            "WorkspacesApi.update_workspace",
            lambda: self._fetch(
                Workspace,
                "PATCH",
                f"assistant__workspaces/{workspace_id}",
                params={"depth": 0},
                json=body,
            ),
        )

    async def delete_workspace(self, workspace_id: str) -> Workspace:
        return await api_call(
            "WorkspacesApi.delete_workspace",
            lambda: self._fetch(Workspace, "DELETE", f"/assistant/workspaces/{workspace_id}"),
        )

    async def get_workspace_by_id(self, workspace_id: str) -> Workspace:
        return await api_call(
            "WorkspacesApi.get_workspace_by_id",
            lambda: self._fetch(Workspace, "GET", f"assistant__workspaces/{workspace_id}", params={"depth": 0}),
        )

    async def get_workspace_sources_tree(self, workspace_id: str) -> WorkspaceTree:
        return await api_call(
            "WorkspacesApi.get_workspace_sources_tree",
            lambda: self._fetch(WorkspaceTree, "GET", f"/assistant/workspaces/{workspace_id}/tree"),
        )


class SourcesApi(ResourceApi):
    async def get_sources(
        self,
        *,
        ids: list[str] | None = None,
        search: str | None = None,
    ) -> Collection[Source]:
        params: dict[str, Any] = {"limit": SOURCES_PER_PAGE, "page": 1}
        if ids:
            params["id"] = {"in": list(ids)}
        if search:
            params["name"] = {"contains": search}
        return await api_call(
            "SourcesApi.get_sources",
            lambda: self._fetch(Collection[Source], "GET", "assistant__sources", params=params),
        )

    async def upload_file_source(self, files: Any) -> Any:
        return await api_call(
            "SourcesApi.upload_file_source",
            lambda: self._fetch(None, "POST", "assistant__source_files", files=files),
        )

    async def create_source(
        self,
        workspace_id: str,
        file_id: str,
        *,
        parent_space_id: str | None = None,
    ) -> Any:
        body = drop_none({"fileId": file_id, "parentSpaceId": parent_space_id})
        return await api_call(
            "SourcesApi.create_source",
            lambda: self._fetch(None, "POST", f"assistant/workspaces/{workspace_id}/sources", json=body),
        )

    async def update_source(
        self,
        source_id: str,
        name: str,
        *,
        description: str | None = None,
    ) -> Source:
        body = drop_none({"name": name, "description": description})
        return await api_call(
            "SourcesApi.update_source",
            lambda: self._fetch(Source, "PATCH", f"assistant/sources/{source_id}", json=body, unwrap="doc"),
        )

    async def delete_source(self, workspace_id: str, source_id: str) -> Any:
        return await api_call(
            "SourcesApi.delete_source",
            lambda: self._fetch(None, "DELETE", f"assistant/workspaces/{workspace_id}/sources/{source_id}"),
        )
