"""Plugins REST API."""

from __future__ import annotations

from typing import Iterable

import httpx

from cheshirecat.models import AnyPart
from cheshirecat.rest.base import BaseAPI


class PluginsAPI(BaseAPI):
    """Plugin listing, installation and activation."""

    async def get_available_plugins(self) -> httpx.Response:
        return await self._get("/plugins/")

    async def install_plugin(self, parts: Iterable[AnyPart]) -> httpx.Response:
        """Upload a plugin archive.

        Args:
            parts: Multipart body, typically a single ``file`` part with the zip archive

        Returns:
            HTTP response
        """
        return await self._post_multipart("/plugins/upload", parts)

    async def toggle_plugin(self, plugin_id: str) -> httpx.Response:
        """Activate or deactivate a plugin."""
        return await self.http_client.put(self._path("/plugins/toggle/{}", plugin_id))
