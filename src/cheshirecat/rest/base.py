"""Base class for REST API endpoints."""

from __future__ import annotations

from typing import Any
from typing import Dict
from typing import Iterable
from typing import List
from typing import Optional
from typing import Tuple
from urllib.parse import quote

import httpx

from cheshirecat.http import CheshireCatHTTPClient
from cheshirecat.http import FileSpec
from cheshirecat.models import AnyPart
from cheshirecat.models import JSONPayload
from cheshirecat.models import UploadPart
from cheshirecat.models import dump_payload


def _escape(identifier: Any) -> str:
    escaped = quote(str(identifier), safe="")
    # Dot segments would be removed by URL normalization
    if escaped in (".", ".."):
        escaped = escaped.replace(".", "%2E")
    return escaped


class BaseAPI:
    """Base class for REST API endpoints."""

    def __init__(self, http_client: CheshireCatHTTPClient) -> None:
        """Initialize base API.

        Args:
            http_client: HTTP client instance
        """
        self.http_client = http_client

    @staticmethod
    def _path(template: str, *identifiers: Any) -> str:
        """Interpolate URL-escaped identifiers into a path template.

        Args:
            template: Path with ``{}`` placeholders
            *identifiers: Values for the placeholders, in order

        Returns:
            Request path
        """
        return template.format(*(_escape(identifier) for identifier in identifiers))

    @staticmethod
    def _params(**params: Any) -> Optional[Dict[str, Any]]:
        query = {key: value for key, value in params.items() if value is not None}
        return query or None

    async def _get(self, path: str, **params: Any) -> httpx.Response:
        return await self.http_client.get(path, params=self._params(**params))

    async def _post_json(self, path: str, payload: JSONPayload) -> httpx.Response:
        return await self.http_client.post(path, json=dump_payload(payload))

    async def _put_json(self, path: str, payload: Optional[JSONPayload] = None) -> httpx.Response:
        body = dump_payload(payload) if payload is not None else None
        return await self.http_client.put(path, json=body)

    async def _delete(self, path: str) -> httpx.Response:
        return await self.http_client.delete(path)

    async def _post_multipart(self, path: str, parts: Iterable[AnyPart]) -> httpx.Response:
        data, files = self._multipart(parts)
        return await self.http_client.post(path, data=data, files=files)

    @staticmethod
    def _multipart(parts: Iterable[AnyPart]) -> Tuple[Dict[str, List[str]], List[FileSpec]]:
        """Split parts into form fields and file parts.

        Args:
            parts: Upload parts or mappings with the same keys

        Returns:
            Form fields, grouped by name in part order, and file parts in
            httpx's ``data``/``files`` shape
        """
        data: Dict[str, List[str]] = {}
        files: List[FileSpec] = []
        for part in parts:
            if not isinstance(part, UploadPart):
                part = UploadPart.model_validate(part)
            if part.is_field:
                data.setdefault(part.name, []).append(str(part.contents))
                continue
            filename = part.filename or getattr(part.contents, "name", None) or part.name
            files.append((part.name, (str(filename).rsplit("/", 1)[-1], part.contents, part.content_type)))
        return data, files
