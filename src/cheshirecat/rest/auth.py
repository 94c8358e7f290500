"""Authentication REST API."""

from __future__ import annotations

import httpx

from cheshirecat.models import JSONPayload
from cheshirecat.rest.base import BaseAPI


class AuthAPI(BaseAPI):
    """Token and permission endpoints."""

    async def get_token(self, payload: JSONPayload) -> httpx.Response:
        """Exchange credentials (see :class:`~cheshirecat.models.TokenRequest`) for a token."""
        return await self._post_json("/auth/token", payload)

    async def get_available_permissions(self) -> httpx.Response:
        """List the permissions that can be granted to users."""
        return await self._get("/auth/available-permissions")
