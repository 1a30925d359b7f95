"""Typed calls to the user-management endpoints, routed through the gateway."""

from __future__ import annotations

from typing import Any

from portal_client.gateway import RequestGateway
from portal_client.models.users import ChangePasswordRequest, UpdateProfileRequest, UserProfile


class UsersApi:
    """Profile endpoints for the signed-in user."""

    def __init__(self, gateway: RequestGateway) -> None:
        self._gateway = gateway

    async def get_me(self) -> UserProfile:
        data = await self._gateway.get("/users/me")
        return UserProfile.model_validate(data)

    async def update_me(self, update: UpdateProfileRequest) -> UserProfile:
        data = await self._gateway.put(
            "/users/me", json=update.model_dump(by_alias=True, exclude_unset=True)
        )
        return UserProfile.model_validate(data)

    async def change_password(self, change: ChangePasswordRequest) -> Any:
        return await self._gateway.put(
            "/users/me/password", json=change.model_dump(by_alias=True)
        )
