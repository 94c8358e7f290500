"""Settings REST API."""

from __future__ import annotations

from typing import Optional

import httpx

from cheshirecat.models import JSONPayload
from cheshirecat.rest.base import BaseAPI


class SettingsAPI(BaseAPI):
    """Settings endpoints."""

    async def get_settings(self, search: Optional[str] = None) -> httpx.Response:
        """List settings, optionally filtered by name."""
        return await self._get("/settings/", search=search)

    async def create_setting(self, payload: JSONPayload) -> httpx.Response:
        return await self._post_json("/settings/", payload)

    async def get_setting(self, setting_id: str) -> httpx.Response:
        return await self._get(self._path("/settings/{}", setting_id))

    async def update_setting(self, setting_id: str, payload: JSONPayload) -> httpx.Response:
        return await self._put_json(self._path("/settings/{}", setting_id), payload)

    async def delete_setting(self, setting_id: str) -> httpx.Response:
        return await self._delete(self._path("/settings/{}", setting_id))
