"""Read-mostly catalogues: files, invites, models, API templates and billing."""

from __future__ import annotations

from typing import Any

from gptzator.client.call import api_call
from gptzator.schemas import (
    ApiTemplate,
    Collection,
    CouponResult,
    EmbeddingModel,
    File,
    Invite,
    LlmModel,
    Model,
    PaymentUri,
    Product,
    Subscribe,
)

from .base import ResourceApi, where_equals, where_in

MODELS_PER_PAGE = 20


class FilesApi(ResourceApi):
    async def upload_file(self, files: Any) -> Any:
        return await api_call(
            "FilesApi.upload_file",
            lambda: self._fetch(None, "POST", "files", files=files),
        )

    async def get_file(self, file_id: str) -> File:
        return await api_call(
            "FilesApi.get_file",
            lambda: self._fetch(File, "GET", f"files/{file_id}"),
        )

    async def get_files_by_ids(self, ids: list[str]) -> Collection[File]:
        return await api_call(
            "FilesApi.get_files_by_ids",
            lambda: self._fetch(Collection[File], "GET", "files", params=where_in("id", ids)),
        )

    async def delete_file(self, file_id: str) -> Any:
        return await api_call(
            "FilesApi.delete_file",
            lambda: self._fetch(None, "DELETE", "files", params=where_equals("id", file_id)),
        )

    async def upload_thread_file(self, files: Any) -> Any:
        return await api_call(
            "FilesApi.upload_thread_file",
            lambda: self._fetch(None, "POST", "threads_files", files=files),
        )

    async def delete_thread_file(self, file_id: str) -> Any:
        return await api_call(
            "FilesApi.delete_thread_file",
            lambda: self._fetch(None, "DELETE", "threads_files", params=where_equals("id", file_id)),
        )


class InvitesApi(ResourceApi):
    """Organization invitations."""

    async def get_invites_list(
        self,
        *,
        page: int,
        search: str | None = None,
        invites_per_page: int | None = None,
    ) -> Collection[Invite]:
        params = {
            "email": {"contains": search},
            "page": page,
            "limit": invites_per_page,
            "depth": 0,
        }
        return await api_call(
            "InvitesApi.get_invites_list",
            lambda: self._fetch(Collection[Invite], "GET", "orgs_invites", params=params),
        )

    async def get_invite(self, organization_invite_token: str) -> Invite:
        return await api_call(
            "InvitesApi.get_invite",
            lambda: self._fetch(Invite, "GET", f"orgs/invites/{organization_invite_token}"),
        )

    async def create_invite(self, email: str) -> Invite:
        return await api_call(
            "InvitesApi.create_invite",
            lambda: self._fetch(Invite, "POST", "orgs_invites", json={"email": email}),
        )

    async def delete_invite(self, invite_id: str) -> Invite:
        return await api_call(
            "InvitesApi.delete_invite",
            lambda: self._fetch(Invite, "DELETE", f"orgs_invites/{invite_id}"),
        )


class ModelsApi(ResourceApi):
    async def get_models(self) -> list[Model]:
        return await api_call(
            "ModelsApi.get_models",
            lambda: self._fetch(list[Model], "GET", "models", params={"limit": MODELS_PER_PAGE}, unwrap="docs"),
        )

    async def get_active_models(self) -> list[Model]:
        params = {"limit": MODELS_PER_PAGE, **where_equals("active", True)}
        return await api_call(
            "ModelsApi.get_active_models",
            lambda: self._fetch(list[Model], "GET", "models", params=params, unwrap="docs"),
        )

    async def get_llm_models(self) -> list[LlmModel]:
        return await api_call(
            "ModelsApi.get_llm_models",
            lambda: self._fetch(
                list[LlmModel],
                "GET",
                "llm_models",
                params={"limit": MODELS_PER_PAGE},
                unwrap="docs",
            ),
        )

    async def get_embedding_models(self) -> list[EmbeddingModel]:
        return await api_call(
            "ModelsApi.get_embedding_models",
            lambda: self._fetch(list[EmbeddingModel], "GET", "embedding_models", unwrap="docs"),
        )


class ApiTemplatesApi(ResourceApi):
    """Templates for API-call steps inside applications."""

    async def get_api_templates(
        self,
        *,
        page: int,
        search: str | None = None,
        templates_per_page: int | None = None,
    ) -> Collection[ApiTemplate]:
        params = {"name": {"contains": search}, "page": page, "limit": templates_per_page}
        return await api_call(
            "ApiTemplatesApi.get_api_templates",
            lambda: self._fetch(Collection[ApiTemplate], "GET", "apps_steps_api_templates", params=params),
        )

    async def get_api_template(self, template_id: str) -> ApiTemplate:
        return await api_call(
            "ApiTemplatesApi.get_api_template",
            lambda: self._fetch(ApiTemplate, "GET", f"apps_steps_api_templates/{template_id}"),
        )


class SubscribesApi(ResourceApi):
    """Billing: subscriptions, products, payment links and coupons."""

    async def get_subscribes(self) -> Collection[Subscribe]:
        return await api_call(
            "SubscribesApi.get_subscribes",
            lambda: self._fetch(Collection[Subscribe], "GET", "subscribes", params={"depth": 1}),
        )

    async def get_products(self) -> Collection[Product]:
        return await api_call(
            "SubscribesApi.get_products",
            lambda: self._fetch(Collection[Product], "GET", "products"),
        )

    async def get_subscribe_url(self, product_id: str) -> PaymentUri:
        return await api_call(
            "SubscribesApi.get_subscribe_url",
            lambda: self._fetch(PaymentUri, "GET", "transactions/paymenturi", params={"productId": product_id}),
        )

    async def apply_coupon(self, coupon_code: str) -> CouponResult:
        return await api_call(
            "SubscribesApi.apply_coupon",
            lambda: self._fetch(CouponResult, "POST", "coupons/apply", json={"couponCode": coupon_code}),
        )
