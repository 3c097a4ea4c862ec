"""Chat threads and their messages."""

from __future__ import annotations

from typing import Any

from gptzator.client.call import api_call
from gptzator.schemas import Collection, GenerationType, Message, Thread

from .base import ResourceApi, drop_none


class ThreadsApi(ResourceApi):
    """Model chat threads, messages, attached vaults and files."""

    async def get_threads(self, *, page: int | None = None, search: str | None = None) -> Collection[Thread]:
        params = drop_none({"page": page, "search": search})
        return await api_call(
            "ThreadsApi.get_threads",
            lambda: self._fetch(Collection[Thread], "GET", "threads", params=params),
        )

    async def get_thread_by_id(self, thread_id: str) -> Thread:
        return await api_call(
            "ThreadsApi.get_thread_by_id",
            lambda: self._fetch(Thread, "GET", f"threads/{thread_id}"),
        )

    async def create_thread(
        self,
        *,
        model_id: str,
        title: str,
        vault_ids: list[str] | None = None,
        file_ids: list[str] | None = None,
    ) -> Thread:
        body = drop_none({"id": model_id, "title": title, "vaultIds": vault_ids, "fileIds": file_ids})
        return await api_call(
            "ThreadsApi.create_thread",
            lambda: self._fetch(Thread, "POST", "threads/create", json=body),
        )

    async def delete_thread(self, thread_id: str) -> Thread:
        return await api_call(
            "ThreadsApi.delete_thread",
            lambda: self._fetch(Thread, "DELETE", f"threads/{thread_id}"),
        )

    async def update_thread_vault(self, thread_id: str, vault_ids: list[str]) -> Thread:
        return await api_call(
            "ThreadsApi.update_thread_vault",
            lambda: self._fetch(
                Thread,
                "POST",
                f"threads/{thread_id}/set-context",
                json={"vaultIds": vault_ids},
            ),
        )

    async def get_messages(self, thread_id: str, *, page: int | None = None) -> Collection[Message]:
        params = drop_none({"threadId": thread_id, "page": page})
        return await api_call(
            "ThreadsApi.get_messages",
            lambda: self._fetch(Collection[Message], "GET", "threads_messages", params=params),
        )

    async def get_generation_types(self) -> Collection[GenerationType]:
        return await api_call(
            "ThreadsApi.get_generation_types",
            lambda: self._fetch(Collection[GenerationType], "GET", "threads_generation_types"),
        )

    async def update_generation_type(self, thread_id: str, type_id: str) -> Thread:
        return await api_call(
            "ThreadsApi.update_generation_type",
            lambda: self._fetch(Thread, "PATCH", f"threads/{thread_id}", json={"generationType": type_id}),
        )

    async def update_thread_model(self, thread_id: str, model_id: str) -> Thread:
        return await api_call(
            "ThreadsApi.update_thread_model",
            lambda: self._fetch(Thread, "PATCH", f"threads/{thread_id}", json={"model": model_id}),
        )

    async def create_message(self, thread_id: str, text: str) -> Message:
        return await api_call(
            "ThreadsApi.create_message",
            lambda: self._fetch(Message, "POST", f"threads/{thread_id}/messages", json={"text": text}),
        )

    async def edit_message(self, thread_id: str, message_id: str, content: str) -> Message:
        return await api_call(
            "ThreadsApi.edit_message",
            lambda: self._fetch(
                Message,
                "PATCH",
                f"threads/{thread_id}/messages/{message_id}",
                json={"content": content},
            ),
        )

    async def delete_message(self, thread_id: str, message_id: str) -> Message:
        return await api_call(
            "ThreadsApi.delete_message",
            lambda: self._fetch(Message, "DELETE", f"threads/{thread_id}/messages/{message_id}"),
        )

    async def regenerate_message(self, thread_id: str, message_id: str) -> Message:
        return await api_call(
            "ThreadsApi.regenerate_message",
            lambda: self._fetch(Message, "POST", f"threads/{thread_id}/messages/{message_id}/regenerate"),
        )

    async def attach_files_to_thread(self, thread_id: str, file_ids: list[str]) -> Any:
        return await api_call(
            "ThreadsApi.attach_files_to_thread",
            lambda: self._fetch(
                None,
                "POST",
                f"threads/{thread_id}/files/attach",
                json={"fileIds": file_ids},
            ),
        )
