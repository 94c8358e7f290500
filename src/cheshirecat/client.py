"""Cheshire Cat Python SDK - Main client implementation.

Async SDK for the Cheshire Cat REST and WebSocket APIs with:
- One httpx request per call, no hidden retries
- Bearer token authentication
- Typed exceptions for connection, auth, not-found and validation failures
- A single-connection WebSocket session for chat
"""

from __future__ import annotations

import logging
from typing import Any
from typing import Dict
from typing import Optional

import httpx
from dotenv import load_dotenv
from pydantic import ValidationError

from cheshirecat.env_config import load_config_from_env
from cheshirecat.errors import CheshireCatConfigurationError
from cheshirecat.http import CheshireCatHTTPClient
from cheshirecat.models import ClientConfig
from cheshirecat.models import HTTPConfig
from cheshirecat.models import JSONPayload
from cheshirecat.models import WebSocketConfig
from cheshirecat.models import dump_payload
from cheshirecat.rest import AuthAPI
from cheshirecat.rest import MemoryAPI
from cheshirecat.rest import PluginsAPI
from cheshirecat.rest import RabbitHoleAPI
from cheshirecat.rest import SettingsAPI
from cheshirecat.rest import UsersAPI
from cheshirecat.websocket import CheshireCatWebSocket

logger = logging.getLogger(__name__)


class CheshireCatClient:
    """Main Cheshire Cat SDK client.

    Provides access to the REST resources and the chat WebSocket.

    Example:
        ```python
        from cheshirecat import CheshireCatClient

        async with CheshireCatClient(base_url="http://localhost:1865/", api_key="meow") as cat:
            status = await cat.get_status()
            users = await cat.users.get_users(skip=0, limit=10)
            reply = await cat.send_message_via_websocket({"text": "Hello!"})
        ```
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        ws_url: Optional[str] = None,
        timeout: Optional[float] = None,
        receive_timeout: Optional[float] = None,
        log_level: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize Cheshire Cat client.

        Args:
            config: Complete configuration object (takes precedence)
            base_url: Base URL for the REST API
            api_key: API key sent as bearer token
            ws_url: WebSocket URL
            timeout: HTTP timeout in seconds
            receive_timeout: Default WebSocket receive timeout in seconds
            log_level: Level for the SDK logger
            transport: Optional httpx transport

        Raises:
            CheshireCatConfigurationError: Invalid configuration
        """
        if config is None:
            config = self._build_config(
                base_url=base_url,
                api_key=api_key,
                ws_url=ws_url,
                timeout=timeout,
                receive_timeout=receive_timeout,
                log_level=log_level,
            )
        self.config = config

        if config.log_level:
            try:
                logging.getLogger("cheshirecat").setLevel(config.log_level.upper())
            except ValueError as e:
                raise CheshireCatConfigurationError(f"Invalid log level: {config.log_level}") from e

        # Initialize HTTP client
        self.http = CheshireCatHTTPClient(config.http, transport=transport)

        # Initialize REST API modules
        self.auth = AuthAPI(self.http)
        self.users = UsersAPI(self.http)
        self.settings = SettingsAPI(self.http)
        self.memory = MemoryAPI(self.http)
        self.plugins = PluginsAPI(self.http)
        self.rabbit_hole = RabbitHoleAPI(self.http)

        # WebSocket session (initialized on demand)
        self._websocket: Optional[CheshireCatWebSocket] = None

    @staticmethod
    def _build_config(**options: Any) -> ClientConfig:
        http_values: Dict[str, Any] = {}
        ws_values: Dict[str, Any] = {}
        if options["base_url"] is not None:
            http_values["base_url"] = options["base_url"]
        if options["api_key"] is not None:
            http_values["api_key"] = options["api_key"]
        if options["timeout"] is not None:
            http_values["timeout"] = options["timeout"]
        if options["ws_url"] is not None:
            ws_values["url"] = options["ws_url"]
        if options["receive_timeout"] is not None:
            ws_values["receive_timeout"] = options["receive_timeout"]

        try:
            return ClientConfig(
                http=HTTPConfig(**http_values),
                websocket=WebSocketConfig(**ws_values),
                log_level=options["log_level"],
            )
        except ValidationError as e:
            raise CheshireCatConfigurationError(f"Invalid client configuration: {e}") from e

    @property
    def websocket(self) -> CheshireCatWebSocket:
        """Get the chat WebSocket session, creating it on first access."""
        if self._websocket is None:
            self._websocket = CheshireCatWebSocket(self.config.websocket)
        return self._websocket

    async def get_status(self) -> httpx.Response:
        """Get the service status (``GET /``)."""
        return await self.http.get("/")

    async def send_message(self, payload: JSONPayload) -> httpx.Response:
        """Send a chat message over HTTP (``POST /message``).

        Args:
            payload: Message body, e.g. ``{"text": "Hello"}`` or a
                :class:`~cheshirecat.models.MessagePayload`

        Returns:
            HTTP response with the cat's reply
        """
        return await self.http.post("/message", json=dump_payload(payload))

    async def send_message_via_websocket(
        self,
        payload: Any,
        timeout: Optional[float] = None,
    ) -> Any:
        """Send one message on the WebSocket and wait for one reply.

        Args:
            payload: JSON-serializable message
            timeout: Receive timeout in seconds

        Returns:
            Decoded reply

        Raises:
            CheshireCatWebSocketError: Connection, send or receive failure
        """
        await self.websocket.send(payload)
        return await self.websocket.receive(timeout=timeout)

    async def close_websocket_connection(self) -> None:
        """Close the WebSocket session, if one was created."""
        if self._websocket is not None:
            await self._websocket.close()

    async def close(self) -> None:
        """Close the WebSocket session and the HTTP connection pool."""
        try:
            await self.close_websocket_connection()
        finally:
            await self.http.close()
        logger.debug("Cheshire Cat client closed")

    async def __aenter__(self) -> CheshireCatClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()


def create_client(
    base_url: Optional[str] = None,
    api_key: Optional[str] = None,
    ws_url: Optional[str] = None,
    **kwargs: Any,
) -> CheshireCatClient:
    """Factory function to create a Cheshire Cat client.

    Unset URLs default to a local development cat
    (``http://localhost:1865/`` and ``ws://localhost:1865/ws``).

    Args:
        base_url: Base URL for the REST API
        api_key: API key sent as bearer token
        ws_url: WebSocket URL
        **kwargs: Additional client options

    Returns:
        CheshireCatClient instance
    """
    return CheshireCatClient(base_url=base_url, api_key=api_key, ws_url=ws_url, **kwargs)


def create_client_from_env(
    dotenv_path: Optional[str] = None,
    **kwargs: Any,
) -> CheshireCatClient:
    """Create a client from ``CHESHIRE_CAT_*`` environment variables.

    Variables from a ``.env`` file are loaded first; variables already set
    in the environment take precedence.

    Args:
        dotenv_path: Path of the .env file, searched for when unset
        **kwargs: Additional client options, e.g. ``transport``

    Returns:
        CheshireCatClient instance
    """
    load_dotenv(dotenv_path)
    return CheshireCatClient(load_config_from_env(), **kwargs)
