"""Assistants and assistant-bound threads."""

from __future__ import annotations

from typing import Any

from gptzator.client.call import api_call
from gptzator.schemas import Assistant, AssistantList, AssistantThread, Collection, Message

from .base import ResourceApi, drop_none


class AssistantsApi(ResourceApi):
    async def get_assistants(self, search: str | None = None) -> AssistantList:
        return await api_call(
            "AssistantsApi.get_assistants",
            lambda: self._fetch(
                AssistantList,
                "GET",
                "/assistant/assistants",
                params={"search": search},
            ),
        )

    async def get_assistant_by_id(self, assistant_id: str) -> Assistant:
        return await api_call(
            "AssistantsApi.get_assistant_by_id",
            lambda: self._fetch(Assistant, "GET", f"/assistant/assistants/{assistant_id}"),
        )

    async def create_assistant(self, data: dict[str, Any]) -> Assistant:
        """Create an assistant from general settings plus a ``modes`` list."""
        return await api_call(
            "AssistantsApi.create_assistant",
            lambda: self._fetch(Assistant, "POST", "/assistant/assistants", json=data),
        )

    async def update_assistant(self, assistant_id: str, data: dict[str, Any]) -> Assistant:
        return await api_call(
            "AssistantsApi.update_assistant",
            lambda: self._fetch(Assistant, "PATCH", f"/assistant/assistants/{assistant_id}", json=data),
        )

    async def update_assistant_context(
        self,
        assistant_id: str,
        *,
        mode_id: str | None = None,
        workspace_ids: list[str] | None = None,
    ) -> Assistant:
        body = drop_none({"modeId": mode_id, "workspaceIds": workspace_ids})
        return await api_call(
            "AssistantsApi.update_assistant_context",
            lambda: self._fetch(
                Assistant,
                "PATCH",
                f"/assistant/assistants/{assistant_id}/context",
                json=body,
            ),
        )

    async def upload_assistant_image(self, files: Any) -> Any:
        return await api_call(
            "AssistantsApi.upload_assistant_image",
            lambda: self._fetch(None, "POST", "/assistant__images", files=files),
        )

    async def delete_assistant(self, assistant_id: str) -> Assistant:
        return await api_call(
            "AssistantsApi.delete_assistant",
            lambda: self._fetch(Assistant, "DELETE", f"/assistant/assistants/{assistant_id}"),
        )


class ThreadAssistantApi(ResourceApi):
    """Threads opened against a workspace or an assistant."""

    async def get_threads_by_workspace_id(
        self,
        workspace_id: str,
        *,
        page: int,
        search: str | None = None,
    ) -> Collection[AssistantThread]:
        params = drop_none({"id": workspace_id, "page": page, "search": search})
        return await api_call(
            "ThreadAssistantApi.get_threads_by_workspace_id",
            lambda: self._fetch(Collection[AssistantThread], "GET", "assistant__threads", params=params),
        )

    async def get_threads_by_assistant_id(
        self,
        assistant_id: str,
        *,
        page: int,
        search: str | None = None,
    ) -> Collection[AssistantThread]:
        params = drop_none({"id": assistant_id, "page": page, "search": search})
        return await api_call(
            "ThreadAssistantApi.get_threads_by_assistant_id",
            lambda: self._fetch(Collection[AssistantThread], "GET", "assistant__threads", params=params),
        )

    async def create_thread_by_workspace_id(self, workspace_id: str, title: str) -> AssistantThread:
        return await api_call(
            "ThreadAssistantApi.create_thread_by_workspace_id",
            lambda: self._fetch(
                AssistantThread,
                "POST",
                f"assistant/workspaces/{workspace_id}/threads",
                params={"depth": 0},
                json={"title": title},
            ),
        )

    async def create_thread_by_assistant_id(
        self,
        assistant_id: str,
        title: str,
        mode_id: str | None = None,
    ) -> AssistantThread:
        body = drop_none({"title": title, "modeId": mode_id})
        return await api_call(
            "ThreadAssistantApi.create_thread_by_assistant_id",
            lambda: self._fetch(AssistantThread, "POST", f"/assistant/assistants/{assistant_id}/threads", json=body),
        )

    async def update_thread_assistant(self, thread_id: str, data: dict[str, Any]) -> AssistantThread:
        return await api_call(
            "ThreadAssistantApi.update_thread_assistant",
            lambda: self._fetch(
                AssistantThread,
                "PATCH",
                f"assistant__threads/{thread_id}",
                params={"depth": 0},
                json=data,
            ),
        )

    async def get_thread_assistant_by_id(self, thread_id: str) -> AssistantThread:
        return await api_call(
            "ThreadAssistantApi.get_thread_assistant_by_id",
            lambda: self._fetch(AssistantThread, "GET", f"assistant__threads/{thread_id}"),
        )

    async def get_messages_assistant(self, thread_id: str, *, page: int = 1) -> Collection[Message]:
        params = {"thread": {"equals": thread_id}, "page": page}
        return await api_call(
            "ThreadAssistantApi.get_messages_assistant",
            lambda: self._fetch(Collection[Message], "GET", "assistant__thread_messages", params=params),
        )

    async def create_message_assistant(self, thread_id: str, text: str) -> Message:
        return await api_call(
            "ThreadAssistantApi.create_message_assistant",
            lambda: self._fetch(Message, "POST", f"assistant/threads/{thread_id}/messages", json={"text": text}),
        )

    async def edit_message_assistant(self, thread_id: str, message_id: str, content: str) -> Message:
        return await api_call(
            "ThreadAssistantApi.edit_message_assistant",
            lambda: self._fetch(
                Message,
                "PATCH",
                f"/assistant/threads/{thread_id}/messages/{message_id}",
                json={"content": content},
            ),
        )

    async def delete_message_assistant(self, thread_id: str, message_id: str) -> Message:
        return await api_call(
            "ThreadAssistantApi.delete_message_assistant",
            lambda: self._fetch(Message, "DELETE", f"/assistant/threads/{thread_id}/messages/{message_id}"),
        )

    async def regenerate_message_assistant(self, thread_id: str, message_id: str) -> Message:
        return await api_call(
            "ThreadAssistantApi.regenerate_message_assistant",
            lambda: self._fetch(
                Message,
                "POST",
                f"/assistant/threads/{thread_id}/messages/{message_id}/regenerate",
            ),
        )

    async def delete_thread_assistant(self, thread_id: str) -> Any:
        return await api_call(
            "ThreadAssistantApi.delete_thread_assistant",
            lambda: self._fetch(None, "DELETE", f"assistant/threads/{thread_id}"),
        )
