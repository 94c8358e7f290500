"""Async HTTP transport for the Cheshire Cat REST API."""

from __future__ import annotations

import logging
from typing import Any
from typing import Dict
from typing import List
from typing import Mapping
from typing import Optional
from typing import Tuple

import httpx

from cheshirecat.errors import map_transport_error
from cheshirecat.models import HTTPConfig

logger = logging.getLogger(__name__)

FileSpec = Tuple[str, Tuple[Optional[str], Any, Optional[str]]]


class CheshireCatHTTPClient:
    """Async HTTP client that authenticates requests and types failures.

    Every call performs exactly one round-trip: there is no retry, caching
    or rate limiting. Non-2xx responses and transport failures are raised
    as :class:`~cheshirecat.errors.CheshireCatError` subclasses.
    """

    def __init__(
        self,
        config: HTTPConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize HTTP client.

        Args:
            config: HTTP configuration
            transport: Optional httpx transport, e.g. ``httpx.MockTransport``
        """
        self.config = config

        client_kwargs: Dict[str, Any] = {
            "base_url": config.base_url,
            "headers": self._default_headers(),
            "follow_redirects": True,
        }
        if config.timeout is not None:
            client_kwargs["timeout"] = httpx.Timeout(config.timeout)
        if transport is not None:
            client_kwargs["transport"] = transport

        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> CheshireCatHTTPClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    @property
    def closed(self) -> bool:
        """Whether the underlying connection pool has been released."""
        return self._client.is_closed

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    def _default_headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Optional[Any] = None,
        data: Optional[Mapping[str, Any]] = None,
        files: Optional[List[FileSpec]] = None,
    ) -> httpx.Response:
        """Make an authenticated HTTP request.

        Args:
            method: HTTP method
            path: Request path, resolved against the base URL
            params: Query parameters, ``None`` values are dropped
            json: JSON body
            data: Multipart form fields
            files: Multipart file parts

        Returns:
            HTTP response with a 2xx status

        Raises:
            CheshireCatConnectionError: No response was received
            CheshireCatAuthenticationError: HTTP 401
            CheshireCatNotFoundError: HTTP 404
            CheshireCatValidationError: HTTP 422
            CheshireCatAPIError: Any other non-2xx status
        """
        headers: Dict[str, str] = {}
        if files is None:
            # Multipart requests get their boundary header from httpx
            headers["Content-Type"] = "application/json"

        query = None
        if params:
            query = {key: value for key, value in params.items() if value is not None}

        try:
            response = await self._client.request(
                method,
                path,
                params=query or None,
                json=json,
                data=data,
                files=files,
                headers=headers,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            error = map_transport_error(e)
            logger.debug(f"{method} {path} failed: {error!r}")
            raise error from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        return response

    # Convenience methods
    async def get(
        self,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        """Make GET request."""
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        *,
        json: Optional[Any] = None,
        data: Optional[Mapping[str, Any]] = None,
        files: Optional[List[FileSpec]] = None,
    ) -> httpx.Response:
        """Make POST request."""
        return await self.request("POST", path, json=json, data=data, files=files)

    async def put(
        self,
        path: str,
        *,
        json: Optional[Any] = None,
    ) -> httpx.Response:
        """Make PUT request."""
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> httpx.Response:
        """Make DELETE request."""
        return await self.request("DELETE", path)
