"""Memory REST API."""

from __future__ import annotations

from typing import Optional

import httpx

from cheshirecat.models import JSONPayload
from cheshirecat.rest.base import BaseAPI


class MemoryAPI(BaseAPI):
    """Memory collection point endpoints."""

    async def get_memory_points(
        self,
        collection_id: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> httpx.Response:
        """List points of a memory collection.

        Args:
            collection_id: Collection name, e.g. ``declarative``
            limit: Maximum number of points to return
            offset: Point ID to resume listing from

        Returns:
            HTTP response
        """
        path = self._path("/memory/collections/{}/points", collection_id)
        return await self._get(path, limit=limit, offset=offset)

    async def create_memory_point(self, collection_id: str, payload: JSONPayload) -> httpx.Response:
        """Add a point to a memory collection."""
        path = self._path("/memory/collections/{}/points", collection_id)
        return await self._post_json(path, payload)

    async def delete_memory_point(self, collection_id: str, point_id: str) -> httpx.Response:
        """Delete a point from a memory collection."""
        path = self._path("/memory/collections/{}/points/{}", collection_id, point_id)
        return await self._delete(path)
