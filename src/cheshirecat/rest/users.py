"""Users REST API."""

from __future__ import annotations

from typing import Optional

import httpx

from cheshirecat.models import JSONPayload
from cheshirecat.rest.base import BaseAPI


class UsersAPI(BaseAPI):
    """User management endpoints."""

    async def create_user(self, payload: JSONPayload) -> httpx.Response:
        """Create a user."""
        return await self._post_json("/users/", payload)

    async def get_users(
        self,
        skip: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> httpx.Response:
        """List users.

        Args:
            skip: Number of users to skip
            limit: Maximum number of users to return

        Returns:
            HTTP response
        """
        return await self._get("/users/", skip=skip, limit=limit)

    async def get_user(self, user_id: str) -> httpx.Response:
        """Get user by ID."""
        return await self._get(self._path("/users/{}", user_id))

    async def update_user(self, user_id: str, payload: JSONPayload) -> httpx.Response:
        """Update user by ID."""
        return await self._put_json(self._path("/users/{}", user_id), payload)

    async def delete_user(self, user_id: str) -> httpx.Response:
        """Delete user by ID."""
        return await self._delete(self._path("/users/{}", user_id))
