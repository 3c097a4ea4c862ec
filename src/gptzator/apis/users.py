"""Account, authentication and profile endpoints."""

from __future__ import annotations

from typing import Any

from gptzator.client.call import api_call
from gptzator.client.tokens import Tokens
from gptzator.schemas import AuthResult, User, UserAvatar

from .base import ResourceApi, drop_none, where_equals


class UserApi(ResourceApi):
    """Current user, login/signup and profile updates."""

    async def get_user(self) -> User:
        return await api_call(
            "UserApi.get_user",
            lambda: self._fetch(User, "GET", "/users/me", unwrap="user"),
        )

    async def change_password(self, old_password: str, new_password: str) -> Any:
        body = {"oldPassword": old_password, "newPassword": new_password}
        return await api_call(
            "UserApi.change_password",
            lambda: self._fetch(None, "POST", "/users/me/change-password", json=body),
        )

    async def forgot_password(self, email: str) -> Any:
        return await api_call(
            "UserApi.forgot_password",
            lambda: self._fetch(None, "POST", "/users/forgot-password", json={"email": email}),
        )

    async def reset_password(self, token: str, password: str) -> Any:
        body = {"token": token, "password": password}
        return await api_call(
            "UserApi.reset_password",
            lambda: self._fetch(None, "POST", "/users/reset-password", json=body),
        )

    async def login_user(self, email: str, password: str) -> AuthResult:
        """Log in and store the returned token pair in the client."""
        body = {"email": email, "password": password}
        return await api_call(
            "UserApi.login_user",
            lambda: self._authenticate("/users/login", body),
        )

    async def signup_user(
        self,
        *,
        email: str,
        password: str,
        policy: bool,
        phone: str,
        promo_code: str | None = None,
        organization_invite_token: str | None = None,
    ) -> AuthResult:
        """Register and store the returned token pair in the client."""
        body = drop_none(
            {
                "email": email,
                "password": password,
                "policy": policy,
                "phone": phone,
                "promoCode": promo_code,
                "organizationInviteToken": organization_invite_token,
            },
        )
        return await api_call(
            "UserApi.signup_user",
            lambda: self._authenticate("/users/register", body),
        )

    async def signup_demo_user(self) -> User:
        return await api_call(
            "UserApi.signup_demo_user",
            lambda: self._fetch(User, "POST", "/users/register-demo", unwrap="user"),
        )

    async def logout_user(self) -> None:
        """Log out remotely; local tokens are cleared even if the call fails."""
        await api_call("UserApi.logout_user", self._logout)

    async def update_default_thread_model(self, user_id: str, model_id: str) -> User:
        return await api_call(
            "UserApi.update_default_thread_model",
            lambda: self._fetch(
                User,
                "PATCH",
                f"/users/{user_id}",
                json={"defaultThreadModel": model_id},
                unwrap="doc",
            ),
        )

    async def set_onboarded(self, user_id: str, page_name: str) -> User:
        return await api_call(
            "UserApi.set_onboarded",
            lambda: self._fetch(
                User,
                "PATCH",
                f"/users/{user_id}",
                json={"onboarded": {page_name: True}},
                unwrap="user",
            ),
        )

    async def upload_avatar(self, files: Any) -> UserAvatar:
        return await api_call(
            "UserApi.upload_avatar",
            lambda: self._fetch(UserAvatar, "POST", "/users_avatars", files=files, unwrap="doc"),
        )

    async def delete_avatar(self, file_id: str) -> Any:
        return await api_call(
            "UserApi.delete_avatar",
            lambda: self._fetch(None, "DELETE", "/users_avatars", params=where_equals("id", file_id)),
        )

    async def update_first_and_last_name(self, user_id: str, first_name: str, last_name: str) -> User:
        body = {"firstName": first_name, "lastName": last_name}
        return await api_call(
            "UserApi.update_first_and_last_name",
            lambda: self._fetch(User, "PATCH", f"/users/{user_id}", json=body, unwrap="doc"),
        )

    async def set_locale(self, locale: str) -> None:
        await api_call(
            "UserApi.set_locale",
            lambda: self._fetch(None, "POST", "/payload-preferences/locale", json={"value": locale}),
        )

    async def _authenticate(self, path: str, body: dict[str, Any]) -> AuthResult:
        payload = await self._transport.request_json("POST", path, json=body)
        token = payload.get("token") if isinstance(payload, dict) else None
        if not token:
            raise ValueError("login failed: token not returned")
        self._transport.set_tokens(
            Tokens(access_token=token, refresh_token=payload.get("refreshToken") or None),
        )
        return AuthResult.model_validate({"user": payload.get("user"), "token": token})

    async def _logout(self) -> None:
        try:
            await self._transport.request_json("POST", "/users/logout")
        finally:
            self._transport.set_tokens(None)
