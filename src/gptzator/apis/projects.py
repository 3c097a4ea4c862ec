"""Projects API and the create/trigger/poll ``call_app`` workflow."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any

from gptzator.client.call import api_call
from gptzator.client.exceptions import (
    ApiError,
    CallAppCancelledError,
    CallAppError,
    GenerationFailedError,
    GenerationTimeoutError,
    GenerationTriggerError,
    ProjectCreationError,
    ProjectStatusError,
)
from gptzator.schemas import Artefact, Collection, Project

from .base import ResourceApi, where_equals

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_MS = 2_000
DEFAULT_CALL_APP_TIMEOUT_MS = 300_000
PROJECTS_PER_PAGE = 20


class ProjectsApi(ResourceApi):
    """Projects created from applications, their artefacts and generation runs."""

    async def get_projects(self, *, search: str | None = None, page: int | None = None) -> Collection[Project]:
        params: dict[str, Any] = {"limit": PROJECTS_PER_PAGE, "page": page}
        if search:
            params["where"] = {"name": {"contains": search}}
        return await api_call(
            "ProjectsApi.get_projects",
            lambda: self._fetch(Collection[Project], "GET", "/projects", params=params),
        )

    async def get_app_projects(self, app_id: str) -> Collection[Project]:
        params = {**where_equals("application", app_id), "depth": 0}
        return await api_call(
            "ProjectsApi.get_app_projects",
            lambda: self._fetch(Collection[Project], "GET", "/projects", params=params),
        )

    async def get_project(self, project_id: str) -> Project:
        return await api_call(
            "ProjectsApi.get_project",
            lambda: self._fetch(Project, "GET", f"/projects/{project_id}"),
        )

    async def create_project(
        self,
        *,
        idea: str,
        application_id: str,
        is_demo: bool | None = None,
        is_test: bool | None = None,
    ) -> Project:
        body: dict[str, Any] = {"name": idea, "idea": idea, "application": application_id}
        if is_demo:
            body["isDemo"] = is_demo
        if is_test:
            body["isTest"] = is_test
        return await api_call(
            "ProjectsApi.create_project",
            lambda: self._fetch(Project, "POST", "/projects/", json=body, unwrap="doc"),
        )

    async def update_project_actions(self, project_id: str, data: dict[str, Any]) -> Project:
        return await api_call(
            "ProjectsApi.update_project_actions",
            lambda: self._fetch(Project, "PATCH", f"/projects/{project_id}", json=data, unwrap="doc"),
        )

    async def generate_artefact(self, project_id: str, has_blocks: bool) -> list[Artefact]:
        """Start generation: ``/generateBlocks`` for multi-step apps, ``/generate`` otherwise."""
        suffix = "generateBlocks" if has_blocks else "generate"
        return await api_call(
            "ProjectsApi.generate_artefact",
            lambda: self._fetch(list[Artefact], "POST", f"/projects/{project_id}/{suffix}"),
        )

    async def regenerate_artefact(
        self,
        project_id: str,
        artefact_id: str,
        comment: str | None = None,
    ) -> list[Artefact]:
        return await api_call(
            "ProjectsApi.regenerate_artefact",
            lambda: self._fetch(
                list[Artefact],
                "POST",
                f"/projects/{project_id}/regenerate/{artefact_id}",
                json={"comment": comment},
            ),
        )

    async def delete_project(self, project_id: str) -> None:
        params = {**where_equals("id", project_id), "depth": 0}
        await api_call(
            "ProjectsApi.delete_project",
            lambda: self._fetch(None, "DELETE", "/projects", params=params),
        )

    async def call_app(
        self,
        application_id: str,
        idea: str,
        *,
        has_blocks: bool = True,
        poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
        timeout_ms: int = DEFAULT_CALL_APP_TIMEOUT_MS,
        is_demo: bool | None = None,
        is_test: bool | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> Project:
        """Create a project from ``application_id``, start generation and wait for it.

        Intended for applications whose steps all advance automatically. The
        project is polled immediately after generation starts, then every
        ``poll_interval_ms`` until it stops generating.

        Raises:
            ProjectCreationError: the project could not be created.
            GenerationTriggerError: generation could not be started.
            ProjectStatusError: the project state could not be fetched.
            GenerationTimeoutError: ``timeout_ms`` elapsed before completion.
            GenerationFailedError: the project reported a generation error.
            CallAppCancelledError: ``cancel_event`` was set while waiting.
        """
        started = time.monotonic()

        try:
            project = await self.create_project(
                idea=idea,
                application_id=application_id,
                is_demo=is_demo,
                is_test=is_test,
            )
        except ApiError as exc:
            raise _phase_error(ProjectCreationError, "project creation failed", exc) from exc

        try:
            await self.generate_artefact(project.id, has_blocks)
        except ApiError as exc:
            raise _phase_error(GenerationTriggerError, "generation start failed", exc) from exc
        logger.debug("started generation for project %s", project.id)

        timeout_s = timeout_ms / 1000
        interval_s = poll_interval_ms / 1000
        while True:
            try:
                project = await self.get_project(project.id)
            except ApiError as exc:
                raise _phase_error(ProjectStatusError, "project status fetch failed", exc) from exc

            if time.monotonic() - started > timeout_s:
                raise GenerationTimeoutError(
                    f"project {project.id} generation did not finish within {timeout_ms} ms",
                )
            if project.last_generation_error:
                raise GenerationFailedError(
                    f"generation failed: {project.last_generation_error}",
                    data=project.last_generation_error,
                )
            if project.error is not None:
                raise GenerationFailedError(
                    f"project error: {_serialize(project.error)}",
                    data=project.error,
                )
            if not project.generating:
                logger.info("project %s finished generating", project.id)
                return project

            logger.debug("project %s still generating", project.id)
            if await _sleep(interval_s, cancel_event):
                raise CallAppCancelledError(f"call_app cancelled while project {project.id} was generating")


async def _sleep(seconds: float, cancel_event: asyncio.Event | None) -> bool:
    """Wait ``seconds``; return ``True`` if ``cancel_event`` was set instead."""
    if cancel_event is None:
        await asyncio.sleep(seconds)
        return False
    try:
        await asyncio.wait_for(cancel_event.wait(), timeout=seconds)
    except TimeoutError:
        return False
    return True


def _phase_error(error_type: type[CallAppError], label: str, exc: ApiError) -> CallAppError:
    return error_type(f"{label}: {exc.message}", exc.status, exc.data)


def _serialize(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, sort_keys=True)
    except (TypeError, ValueError):
        return str(value)
